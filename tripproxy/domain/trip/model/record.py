"""Trip record shape.

Upstream records are passed through as plain JSON objects so that every field
survives re-serialization untouched. The only place that knows which fields a
record has is ``RECORD_SHAPE``; sort keys are resolved against it.
"""

from enum import StrEnum
from typing import Any

Record = dict[str, Any]


class FieldKind(StrEnum):
    TEXT = "text"
    NUMBER = "number"
    TEXT_LIST = "text_list"
    REFERENCE = "reference"  # nested {_id, name, ...} object


RECORD_SHAPE: dict[str, FieldKind] = {
    "id": FieldKind.TEXT,
    "name": FieldKind.TEXT,
    "status": FieldKind.TEXT,
    "tripPath": FieldKind.TEXT,
    "tags": FieldKind.TEXT,
    "categories": FieldKind.TEXT_LIST,
    "heroPhoto": FieldKind.TEXT,
    "datePeriod": FieldKind.TEXT,
    "destination": FieldKind.TEXT,
    "price": FieldKind.NUMBER,
    "pendingTravelers": FieldKind.NUMBER,
    "cancelledTravelers": FieldKind.NUMBER,
    "confirmedTravelers": FieldKind.NUMBER,
    "onHoldTravelers": FieldKind.NUMBER,
    "minimumTripThreshold": FieldKind.NUMBER,
    "maximumSpots": FieldKind.NUMBER,
    "potentialEarnings": FieldKind.NUMBER,
    "startDate": FieldKind.TEXT,
    "filterClasses": FieldKind.TEXT,
    "host": FieldKind.REFERENCE,
    "operator": FieldKind.REFERENCE,
    "activityLevel": FieldKind.NUMBER,
}

SORTABLE_KINDS = frozenset({FieldKind.TEXT, FieldKind.NUMBER, FieldKind.TEXT_LIST})


def sortable_fields() -> list[str]:
    """Names of the record fields that have a native ordering."""
    return [name for name, kind in RECORD_SHAPE.items() if kind in SORTABLE_KINDS]
