"""Sort first, then slice out one page. The order of the two steps is fixed."""

from tripproxy.domain.shared.query import Query, QueryHandler
from tripproxy.domain.trip.model.value import PageSpec, SortSpec
from tripproxy.domain.trip.query.fetch_all import TripList
from tripproxy.domain.trip.service.trip import TripService


class FetchSortedPaginatedTrips(Query):
    sort: SortSpec
    page: PageSpec


class FetchSortedPaginatedTripsHandler(QueryHandler[FetchSortedPaginatedTrips, TripList]):
    trip_service: TripService

    async def run(self, cmd: FetchSortedPaginatedTrips) -> TripList:
        return TripList(items=await self.trip_service.fetch_sorted_paginated(cmd.sort, cmd.page))
