"""TripService - fetches the upstream dataset and runs it through a pipeline."""

import logging

from tripproxy.domain.shared.service import Service
from tripproxy.domain.trip.model.record import Record
from tripproxy.domain.trip.model.value import PageSpec, SortSpec
from tripproxy.domain.trip.port.trip_fetcher import TripFetcher
from tripproxy.domain.trip.service.pipeline import TripPipeline

logger = logging.getLogger(__name__)


class TripService(Service):
    """The four proxy entry points. Each call fetches a fresh copy of the dataset."""

    fetcher: TripFetcher

    async def fetch_all(self) -> list[Record]:
        return await self._run(TripPipeline())

    async def fetch_paginated(self, page: PageSpec) -> list[Record]:
        return await self._run(TripPipeline(page=page))

    async def fetch_sorted(self, sort: SortSpec) -> list[Record]:
        return await self._run(TripPipeline(sort=sort))

    async def fetch_sorted_paginated(self, sort: SortSpec, page: PageSpec) -> list[Record]:
        return await self._run(TripPipeline(sort=sort, page=page))

    async def _run(self, pipeline: TripPipeline) -> list[Record]:
        records = await self.fetcher.fetch_all()
        result = pipeline.apply(records)
        logger.debug(
            "Pipeline sort=%s page=%s: %d -> %d records",
            pipeline.sort,
            pipeline.page,
            len(records),
            len(result),
        )
        return result
