from tripproxy.domain.shared.query import Query, QueryHandler
from tripproxy.domain.trip.model.value import PageSpec
from tripproxy.domain.trip.query.fetch_all import TripList
from tripproxy.domain.trip.service.trip import TripService


class FetchPaginatedTrips(Query):
    page: PageSpec


class FetchPaginatedTripsHandler(QueryHandler[FetchPaginatedTrips, TripList]):
    trip_service: TripService

    async def run(self, cmd: FetchPaginatedTrips) -> TripList:
        return TripList(items=await self.trip_service.fetch_paginated(cmd.page))
