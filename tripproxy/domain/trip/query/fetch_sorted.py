from tripproxy.domain.shared.query import Query, QueryHandler
from tripproxy.domain.trip.model.value import SortSpec
from tripproxy.domain.trip.query.fetch_all import TripList
from tripproxy.domain.trip.service.trip import TripService


class FetchSortedTrips(Query):
    sort: SortSpec


class FetchSortedTripsHandler(QueryHandler[FetchSortedTrips, TripList]):
    trip_service: TripService

    async def run(self, cmd: FetchSortedTrips) -> TripList:
        return TripList(items=await self.trip_service.fetch_sorted(cmd.sort))
