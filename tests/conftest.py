"""Global test fixtures."""

import os

# Must be set before any test module builds a Config
os.environ.setdefault("TRIPPROXY_TELEMETRY__INSTRUMENT", "false")

import logfire  # noqa: E402
import pytest  # noqa: E402

from tripproxy.domain.trip.model.record import Record  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)


class FakeTripFetcher:
    """In-memory TripFetcher that counts how often the upstream was hit."""

    def __init__(self, records: list[Record] | None = None, error: Exception | None = None) -> None:
        self.records = records or []
        self.error = error
        self.calls = 0

    async def fetch_all(self) -> list[Record]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.records


def make_trip(id: str, **fields) -> Record:
    trip: Record = {
        "id": id,
        "name": f"Trip {id}",
        "status": "confirmed",
        "categories": ["adventure"],
        "price": 1000,
        "host": {"_id": f"h-{id}", "name": "Host"},
        "operator": {"_id": f"o-{id}", "userId": "u1", "name": "Operator"},
    }
    trip.update(fields)
    return trip


@pytest.fixture
def trips() -> list[Record]:
    return [
        make_trip("b", price=2500, startDate="2024-05-01"),
        make_trip("a", price=1200.5, startDate="2024-03-15"),
        make_trip("c", price=900, startDate="2024-09-30"),
    ]


@pytest.fixture
def make_fetcher():
    """Factory for FakeTripFetcher instances."""
    return FakeTripFetcher
