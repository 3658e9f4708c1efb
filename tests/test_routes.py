from fastapi.testclient import TestClient

from trip_expense_api.app.core.store import InMemoryStore
from trip_expense_api.app.main import create_app
from trip_expense_api.app.schemas.route import RouteInfo


def test_search_marks_cheapest(client):
    res = client.get("/api/routes/search", params={"departure": "Tokyo", "destination": "Osaka"})
    assert res.status_code == 200
    routes = res.json()
    assert len(routes) == 3

    cheapest = min(r["fare"] for r in routes)
    assert all(r["cheapestFare"] == cheapest for r in routes)
    assert [r["isCheapest"] for r in routes] == [r["fare"] == cheapest for r in routes]
    assert all(r["departure"] == "Tokyo" and r["arrival"] == "Osaka" for r in routes)


def test_search_steps_use_from_key(client):
    routes = client.get("/api/routes/search", params={"departure": "Tokyo", "destination": "Osaka"}).json()
    first_step = routes[0]["steps"][0]
    assert first_step["from"] == "Tokyo"
    assert first_step["type"] == "train"
    walk = routes[0]["steps"][1]
    assert walk["type"] == "walk"
    assert "fare" not in walk and "line" not in walk


def test_search_requires_both_places(client):
    res = client.get("/api/routes/search", params={"departure": "Tokyo"})
    assert res.status_code == 400
    assert res.json() == {"message": "Missing required fields"}


class TiedProvider:
    def search(self, departure, destination):
        return [
            RouteInfo(id="a", departure=departure, arrival=destination, duration=60, fare=5000, transfers=0),
            RouteInfo(id="b", departure=departure, arrival=destination, duration=50, fare=5000, transfers=1),
            RouteInfo(id="c", departure=departure, arrival=destination, duration=30, fare=9000, transfers=0),
        ]


class EmptyProvider:
    def search(self, departure, destination):
        return []


def test_provider_is_pluggable_and_ties_are_all_cheapest():
    client = TestClient(create_app(store=InMemoryStore(), route_provider=TiedProvider()))
    routes = client.get("/api/routes/search", params={"departure": "A", "destination": "B"}).json()
    assert [(r["id"], r["isCheapest"]) for r in routes] == [("a", True), ("b", True), ("c", False)]
    assert {r["cheapestFare"] for r in routes} == {5000}


def test_no_routes_found():
    client = TestClient(create_app(store=InMemoryStore(), route_provider=EmptyProvider()))
    res = client.get("/api/routes/search", params={"departure": "A", "destination": "B"})
    assert res.status_code == 200
    assert res.json() == []


def test_selected_route_is_stored_as_snapshot(client, trip_payload):
    route = client.get("/api/routes/search", params={"departure": "Tokyo", "destination": "Osaka"}).json()[1]
    payload = dict(trip_payload, selectedRoute=route, estimatedCost=route["fare"] * 2)

    created = client.post("/api/trip-requests", json=payload).json()
    assert created["selectedRoute"] == route
    assert client.get("/api/trip-requests").json()[0]["selectedRoute"] == route


def test_malformed_selected_route_is_rejected(client, store, trip_payload):
    res = client.post("/api/trip-requests", json=dict(trip_payload, selectedRoute={"id": "1"}))
    assert res.status_code == 400
    assert store.load()["tripRequests"] == []
