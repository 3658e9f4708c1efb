from fastapi.testclient import TestClient

from trip_expense_api.app.core.store import InMemoryStore
from trip_expense_api.app.main import create_app


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_cors_headers_on_every_response(client):
    for res in (client.get("/api/health"), client.get("/api/nowhere")):
        assert res.headers["access-control-allow-origin"] == "*"
        assert "PATCH" in res.headers["access-control-allow-methods"]
        assert res.headers["access-control-allow-headers"] == "Content-Type"


def test_options_anywhere_is_no_content(client):
    for path in ("/api/trip-requests", "/api/expenses/123", "/whatever"):
        res = client.options(path)
        assert res.status_code == 204
        assert res.content == b""
        assert res.headers["access-control-allow-origin"] == "*"


def test_unknown_route_is_not_found(client):
    res = client.get("/api/unknown")
    assert res.status_code == 404
    assert res.json() == {"message": "Not found"}


def test_trailing_slash_is_not_redirected(client):
    res = client.get("/api/trip-requests/", follow_redirects=False)
    assert res.status_code == 404
    assert res.json() == {"message": "Not found"}


def test_unsupported_method_is_not_found(client):
    res = client.put("/api/trip-requests")
    assert res.status_code == 404
    assert res.json() == {"message": "Not found"}


def test_malformed_body_reads_as_missing_fields(client, store):
    res = client.post(
        "/api/trip-requests",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json() == {"message": "Missing required fields"}
    assert store.load()["tripRequests"] == []


def test_empty_and_non_object_bodies(client):
    assert client.post("/api/expenses").json() == {"message": "Missing required fields"}
    res = client.post("/api/expenses", json=["tripRequestId"])
    assert res.status_code == 400
    assert res.json() == {"message": "Missing required fields"}


class ExplodingStore(InMemoryStore):
    def load(self):
        raise RuntimeError("disk on fire")


def test_unexpected_error_is_reported_generically(caplog):
    client = TestClient(create_app(store=ExplodingStore()), raise_server_exceptions=False)

    res = client.get("/api/trip-requests")
    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error"}
    assert res.headers["access-control-allow-origin"] == "*"
    assert "disk on fire" not in res.text
    assert any("Unexpected server error" in r.getMessage() for r in caplog.records)

    # The server keeps answering after a failure.
    assert client.get("/api/health").status_code == 200
