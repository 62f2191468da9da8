"""End-to-end tests for the proxy routes against an in-memory fetcher."""

import pytest
from dishka import Provider, provide
from fastapi.testclient import TestClient

from tripproxy.application.api.rest.app import create_app
from tripproxy.application.di import create_container
from tripproxy.config import Config
from tripproxy.domain.shared.error import UpstreamError
from tripproxy.domain.trip.port.trip_fetcher import TripFetcher
from tripproxy.util.di.scope import Scope


class StubFetcherProvider(Provider):
    def __init__(self, fetcher) -> None:
        super().__init__()
        self._fetcher = fetcher

    @provide(scope=Scope.APP)
    def get_trip_fetcher(self) -> TripFetcher:
        return self._fetcher


@pytest.fixture
def client_for():
    clients: list[TestClient] = []

    def _build(fetcher) -> TestClient:
        config = Config()  # type: ignore[call-arg]
        container = create_container(config, infrastructure=[StubFetcherProvider(fetcher)])
        client = TestClient(create_app(config, container))
        client.__enter__()
        clients.append(client)
        return client

    yield _build

    for client in clients:
        client.__exit__(None, None, None)


class TestFetchAll:
    def test_round_trips_every_field(self, client_for, make_fetcher, trips):
        client = client_for(make_fetcher(trips))

        response = client.get("/fetch-all")

        assert response.status_code == 200
        assert response.json() == trips

    def test_non_object_elements_pass_through(self, client_for, make_fetcher):
        client = client_for(make_fetcher([{"id": "a"}, None, 3]))

        response = client.get("/fetch-all")

        assert response.status_code == 200
        assert response.json() == [{"id": "a"}, None, 3]

    def test_upstream_failure_is_502(self, client_for, make_fetcher):
        client = client_for(make_fetcher(error=UpstreamError("Upstream body is not valid JSON")))

        response = client.get("/fetch-all")

        assert response.status_code == 502
        assert response.json()["code"] == "UPSTREAM_ERROR"


class TestFetchPaginated:
    def test_returns_requested_page(self, client_for, make_fetcher, trips):
        client = client_for(make_fetcher(trips))

        response = client.get("/fetch-paginated", params={"page": 2, "limit": 2})

        assert response.status_code == 200
        assert response.json() == [trips[2]]

    def test_page_past_end_is_empty(self, client_for, make_fetcher, trips):
        client = client_for(make_fetcher(trips))

        response = client.get("/fetch-paginated", params={"page": 10, "limit": 2})

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.parametrize("params, field", [
        ({"page": "abc", "limit": 2}, "page"),
        ({"page": 1, "limit": 0}, "limit"),
        ({"page": -1, "limit": 2}, "page"),
        ({"limit": 2}, "page"),
    ])
    def test_bad_params_rejected_before_upstream(self, client_for, make_fetcher, trips, params, field):
        fetcher = make_fetcher(trips)
        client = client_for(fetcher)

        response = client.get("/fetch-paginated", params=params)

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_QUERY_PARAM"
        assert response.json()["field"] == field
        assert fetcher.calls == 0


class TestFetchSorted:
    def test_sorts_by_key(self, client_for, make_fetcher, trips):
        client = client_for(make_fetcher(trips))

        response = client.get("/fetch-sorted", params={"sortOrder": "desc", "sortKey": "price"})

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == ["b", "a", "c"]

    def test_non_object_elements_sort_last(self, client_for, make_fetcher):
        client = client_for(make_fetcher([None, {"id": "b"}, 3, {"id": "a"}]))

        response = client.get("/fetch-sorted", params={"sortOrder": "asc", "sortKey": "id"})

        assert response.status_code == 200
        assert response.json() == [{"id": "a"}, {"id": "b"}, None, 3]

    def test_unknown_sort_key(self, client_for, make_fetcher, trips):
        fetcher = make_fetcher(trips)
        client = client_for(fetcher)

        response = client.get("/fetch-sorted", params={"sortOrder": "asc", "sortKey": "colour"})

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_SORT_KEY"
        assert fetcher.calls == 0

    def test_unknown_sort_order(self, client_for, make_fetcher, trips):
        client = client_for(make_fetcher(trips))

        response = client.get("/fetch-sorted", params={"sortOrder": "up", "sortKey": "id"})

        assert response.status_code == 422
        assert response.json()["field"] == "sortOrder"

    def test_incomparable_values_are_invalid_sort_key(self, client_for, make_fetcher):
        client = client_for(make_fetcher([{"id": "a", "price": 1}, {"id": "b", "price": "n/a"}]))

        response = client.get("/fetch-sorted", params={"sortOrder": "asc", "sortKey": "price"})

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_SORT_KEY"


class TestFetchSortedPaginated:
    def test_sorts_then_paginates(self, client_for, make_fetcher):
        client = client_for(make_fetcher([{"id": "b"}, {"id": "a"}, {"id": "c"}]))

        response = client.get(
            "/fetch-sorted-paginated",
            params={"sortOrder": "asc", "sortKey": "id", "page": 1, "limit": 2},
        )

        assert response.status_code == 200
        assert response.json() == [{"id": "a"}, {"id": "b"}]

    def test_requires_all_params(self, client_for, make_fetcher, trips):
        client = client_for(make_fetcher(trips))

        response = client.get("/fetch-sorted-paginated", params={"sortOrder": "asc", "sortKey": "id"})

        assert response.status_code == 422


class TestHealth:
    def test_health_does_not_touch_upstream(self, client_for, make_fetcher):
        fetcher = make_fetcher(error=UpstreamError("down"))
        client = client_for(fetcher)

        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert fetcher.calls == 0
