"""HTTP adapters for the TripFetcher port."""

import logging

import httpx
import logfire
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from tripproxy.domain.shared.error import UpstreamError
from tripproxy.domain.trip.model.record import Record
from tripproxy.domain.trip.port.trip_fetcher import TripFetcher

logger = logging.getLogger(__name__)


class HttpTripFetcher(TripFetcher):
    """Fetches the trip list from the upstream JSON API using httpx.

    The whole body is buffered before it is parsed.
    """

    def __init__(self, client: httpx.AsyncClient, url: str, data_field: str = "data") -> None:
        self._client = client
        self._url = url
        self._data_field = data_field

    async def fetch_all(self) -> list[Record]:
        with logfire.span("fetch upstream trips {url}", url=self._url):
            try:
                response = await self._client.get(self._url)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise UpstreamError(
                    f"Upstream returned HTTP {e.response.status_code}",
                    status_code=e.response.status_code,
                    transient=e.response.status_code >= 500,
                ) from e
            except httpx.HTTPError as e:
                raise UpstreamError(f"Upstream request failed: {e!r}", transient=True) from e

            try:
                payload = response.json()
            except ValueError as e:
                raise UpstreamError(f"Upstream body is not valid JSON: {e}") from e

        if not isinstance(payload, dict):
            raise UpstreamError(f"Upstream body is a {type(payload).__name__}, expected an object")
        records = payload.get(self._data_field)
        if not isinstance(records, list):
            raise UpstreamError(f"Upstream body has no {self._data_field!r} list")

        logger.debug("Fetched %d records from %s", len(records), self._url)
        return records


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, UpstreamError) and exc.transient


class RetryingTripFetcher(TripFetcher):
    """Retries a wrapped fetcher on transient upstream failures with exponential backoff."""

    def __init__(
        self,
        inner: TripFetcher,
        attempts: int,
        wait_min: float = 0.5,
        wait_max: float = 5.0,
    ) -> None:
        self._inner = inner
        self._attempts = attempts
        self._wait_min = wait_min
        self._wait_max = wait_max

    async def fetch_all(self) -> list[Record]:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._attempts),
            wait=wait_exponential(multiplier=self._wait_min, min=self._wait_min, max=self._wait_max),
            retry=retry_if_exception(_is_transient),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                return await self._inner.fetch_all()
        raise AssertionError("unreachable")  # pragma: no cover
