"""Value objects describing how a fetched record list is transformed."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from tripproxy.domain.shared.error import InvalidQueryParam, InvalidSortKey
from tripproxy.domain.trip.model.record import RECORD_SHAPE, SORTABLE_KINDS


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(BaseModel):
    """Sort by a single record field in the given order."""

    model_config = ConfigDict(frozen=True)

    key: str
    order: SortOrder = SortOrder.ASC

    @classmethod
    def parse(cls, sort_order: str | None, sort_key: str | None) -> "SortSpec":
        """Build a SortSpec from raw query parameters.

        Raises:
            InvalidQueryParam: If sortOrder is missing or not asc/desc.
            InvalidSortKey: If sortKey is missing, unknown, or not orderable.
        """
        if sort_order is None:
            raise InvalidQueryParam("sortOrder is required", field="sortOrder")
        try:
            order = SortOrder(sort_order.lower())
        except ValueError:
            raise InvalidQueryParam(
                f"sortOrder must be 'asc' or 'desc', got {sort_order!r}", field="sortOrder"
            ) from None

        if not sort_key:
            raise InvalidSortKey("sortKey is required")
        kind = RECORD_SHAPE.get(sort_key)
        if kind is None:
            raise InvalidSortKey(f"Unknown sort key: {sort_key!r}")
        if kind not in SORTABLE_KINDS:
            raise InvalidSortKey(f"Field {sort_key!r} ({kind}) cannot be sorted on")

        return cls(key=sort_key, order=order)


class PageSpec(BaseModel):
    """A 1-based page of ``limit`` records."""

    model_config = ConfigDict(frozen=True)

    page: int
    limit: int

    @property
    def start(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def stop(self) -> int:
        return self.start + self.limit

    @classmethod
    def parse(cls, page: str | None, limit: str | None) -> "PageSpec":
        """Build a PageSpec from raw query parameters.

        Both values must be integers >= 1.

        Raises:
            InvalidQueryParam: If either value is missing, non-numeric or < 1.
        """
        return cls(page=_positive_int("page", page), limit=_positive_int("limit", limit))


def _positive_int(name: str, raw: str | None) -> int:
    if raw is None or not raw.strip():
        raise InvalidQueryParam(f"{name} is required", field=name)
    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidQueryParam(f"{name} must be an integer, got {raw!r}", field=name) from None
    if value < 1:
        raise InvalidQueryParam(f"{name} must be >= 1, got {value}", field=name)
    return value
