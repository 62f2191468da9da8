from tripproxy.domain.trip.service.pipeline import TripPipeline, paginate_records, sort_records
from tripproxy.domain.trip.service.trip import TripService

__all__ = ["TripPipeline", "TripService", "paginate_records", "sort_records"]
