from typing import Any

from tripproxy.domain.shared.query import Query, QueryHandler, Result
from tripproxy.domain.trip.service.trip import TripService


class FetchAllTrips(Query):
    pass


class TripList(Result):
    # Upstream elements are passed through as-is, objects or not
    items: list[Any]


class FetchAllTripsHandler(QueryHandler[FetchAllTrips, TripList]):
    trip_service: TripService

    async def run(self, cmd: FetchAllTrips) -> TripList:
        return TripList(items=await self.trip_service.fetch_all())
