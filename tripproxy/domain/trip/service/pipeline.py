"""In-memory transformations applied to a fetched record list.

Every transformation returns a new list; the input is never reordered in place.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from tripproxy.domain.shared.error import InvalidSortKey
from tripproxy.domain.trip.model.record import Record
from tripproxy.domain.trip.model.value import PageSpec, SortOrder, SortSpec

logger = logging.getLogger(__name__)


def sort_records(records: Sequence[Record], spec: SortSpec) -> list[Record]:
    """Sort records by ``spec.key`` using the native ordering of its values.

    Records without a value for the key (absent or null, or elements that are
    not JSON objects at all) keep their relative order and are placed after
    all valued records, whatever the sort order.

    Raises:
        InvalidSortKey: If the values under the key cannot be compared with each other.
    """
    valued = [r for r in records if _value(r, spec.key) is not None]
    missing = [r for r in records if _value(r, spec.key) is None]

    try:
        ordered = sorted(
            valued,
            key=lambda r: r[spec.key],
            reverse=spec.order is SortOrder.DESC,
        )
    except TypeError as e:
        raise InvalidSortKey(f"Values of {spec.key!r} are not mutually comparable: {e}") from e

    if missing:
        logger.debug("%d record(s) have no value for %r", len(missing), spec.key)
    return ordered + missing


def _value(record: Record, key: str) -> Any:
    return record.get(key) if isinstance(record, dict) else None


def paginate_records(records: Sequence[Record], spec: PageSpec) -> list[Record]:
    """Return the records in ``[(page-1)*limit, page*limit)``, clipped to the list bounds."""
    return list(records[spec.start : spec.stop])


@dataclass(frozen=True)
class TripPipeline:
    """Fixed sort-then-paginate composition. Either step may be absent."""

    sort: SortSpec | None = None
    page: PageSpec | None = None

    def apply(self, records: Sequence[Record]) -> list[Record]:
        result = list(records)
        if self.sort is not None:
            result = sort_records(result, self.sort)
        if self.page is not None:
            result = paginate_records(result, self.page)
        return result
