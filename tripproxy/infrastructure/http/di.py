"""DI provider for HTTP infrastructure."""

from collections.abc import AsyncIterator
from typing import NewType

import httpx
from dishka import Provider, provide

from tripproxy.config import Config
from tripproxy.domain.trip.port.trip_fetcher import TripFetcher
from tripproxy.infrastructure.http.trip_fetcher import HttpTripFetcher, RetryingTripFetcher
from tripproxy.util.di.scope import Scope

UpstreamHttpClient = NewType("UpstreamHttpClient", httpx.AsyncClient)


class HttpProvider(Provider):
    """DI provider for the upstream HTTP client and fetcher."""

    @provide(scope=Scope.APP)
    async def get_upstream_http_client(self, config: Config) -> AsyncIterator[UpstreamHttpClient]:
        """Shared connection pool for upstream requests, closed on shutdown."""
        async with httpx.AsyncClient(timeout=httpx.Timeout(config.upstream.timeout)) as client:
            yield UpstreamHttpClient(client)

    @provide(scope=Scope.APP)
    def get_trip_fetcher(self, client: UpstreamHttpClient, config: Config) -> TripFetcher:
        fetcher: TripFetcher = HttpTripFetcher(
            client=client,
            url=config.upstream.url,
            data_field=config.upstream.data_field,
        )
        if config.retry.attempts > 1:
            fetcher = RetryingTripFetcher(
                fetcher,
                attempts=config.retry.attempts,
                wait_min=config.retry.wait_min,
                wait_max=config.retry.wait_max,
            )
        return fetcher
