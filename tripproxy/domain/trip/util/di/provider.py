from dishka import Provider, provide

from tripproxy.domain.trip.port.trip_fetcher import TripFetcher
from tripproxy.domain.trip.query.fetch_all import FetchAllTripsHandler
from tripproxy.domain.trip.query.fetch_paginated import FetchPaginatedTripsHandler
from tripproxy.domain.trip.query.fetch_sorted import FetchSortedTripsHandler
from tripproxy.domain.trip.query.fetch_sorted_paginated import FetchSortedPaginatedTripsHandler
from tripproxy.domain.trip.service.trip import TripService
from tripproxy.util.di.scope import Scope


class TripProvider(Provider):
    # Services
    @provide(scope=Scope.UOW)
    def get_trip_service(self, fetcher: TripFetcher) -> TripService:
        return TripService(fetcher=fetcher)

    # Query Handlers
    fetch_all_handler = provide(FetchAllTripsHandler, scope=Scope.UOW)
    fetch_paginated_handler = provide(FetchPaginatedTripsHandler, scope=Scope.UOW)
    fetch_sorted_handler = provide(FetchSortedTripsHandler, scope=Scope.UOW)
    fetch_sorted_paginated_handler = provide(FetchSortedPaginatedTripsHandler, scope=Scope.UOW)
