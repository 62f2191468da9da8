"""Port for fetching the upstream trip dataset."""

from abc import abstractmethod
from typing import Protocol

from tripproxy.domain.shared.port import Port
from tripproxy.domain.trip.model.record import Record


class TripFetcher(Port, Protocol):
    """Fetches the full, untransformed record list from the upstream API."""

    @abstractmethod
    async def fetch_all(self) -> list[Record]: ...
