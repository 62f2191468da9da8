from tripproxy.domain.trip.model.record import RECORD_SHAPE, FieldKind, Record, sortable_fields
from tripproxy.domain.trip.model.value import PageSpec, SortOrder, SortSpec

__all__ = [
    "RECORD_SHAPE",
    "FieldKind",
    "PageSpec",
    "Record",
    "SortOrder",
    "SortSpec",
    "sortable_fields",
]
