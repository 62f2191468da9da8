from tripproxy.domain.trip.port.trip_fetcher import TripFetcher

__all__ = ["TripFetcher"]
