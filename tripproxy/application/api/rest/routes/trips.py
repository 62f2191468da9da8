"""Trip proxy routes.

Query parameters arrive as raw strings and are parsed into domain values so
that bad input surfaces as InvalidQueryParam / InvalidSortKey, before the
upstream is contacted.
"""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from tripproxy.domain.trip.model.value import PageSpec, SortSpec
from tripproxy.domain.trip.query.fetch_all import FetchAllTrips, FetchAllTripsHandler
from tripproxy.domain.trip.query.fetch_paginated import (
    FetchPaginatedTrips,
    FetchPaginatedTripsHandler,
)
from tripproxy.domain.trip.query.fetch_sorted import FetchSortedTrips, FetchSortedTripsHandler
from tripproxy.domain.trip.query.fetch_sorted_paginated import (
    FetchSortedPaginatedTrips,
    FetchSortedPaginatedTripsHandler,
)

router = APIRouter(tags=["trips"], route_class=DishkaRoute)


@router.get("/fetch-all")
async def fetch_all(
    handler: FromDishka[FetchAllTripsHandler],
) -> list[Any]:
    """Full upstream dataset."""
    result = await handler.run(FetchAllTrips())
    return result.items


@router.get("/fetch-paginated")
async def fetch_paginated(
    handler: FromDishka[FetchPaginatedTripsHandler],
    page: str | None = Query(None, description="1-based page number"),
    limit: str | None = Query(None, description="Records per page"),
) -> list[Any]:
    result = await handler.run(FetchPaginatedTrips(page=PageSpec.parse(page, limit)))
    return result.items


@router.get("/fetch-sorted")
async def fetch_sorted(
    handler: FromDishka[FetchSortedTripsHandler],
    sort_order: str | None = Query(None, alias="sortOrder", description="asc or desc"),
    sort_key: str | None = Query(None, alias="sortKey", description="Record field to sort by"),
) -> list[Any]:
    result = await handler.run(FetchSortedTrips(sort=SortSpec.parse(sort_order, sort_key)))
    return result.items


@router.get("/fetch-sorted-paginated")
async def fetch_sorted_paginated(
    handler: FromDishka[FetchSortedPaginatedTripsHandler],
    sort_order: str | None = Query(None, alias="sortOrder", description="asc or desc"),
    sort_key: str | None = Query(None, alias="sortKey", description="Record field to sort by"),
    page: str | None = Query(None, description="1-based page number"),
    limit: str | None = Query(None, description="Records per page"),
) -> list[Any]:
    query = FetchSortedPaginatedTrips(
        sort=SortSpec.parse(sort_order, sort_key),
        page=PageSpec.parse(page, limit),
    )
    result = await handler.run(query)
    return result.items
