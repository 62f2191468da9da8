from tripproxy.domain.trip.util.di.provider import TripProvider

__all__ = ["TripProvider"]
