import pytest
from fastapi.testclient import TestClient

from trip_expense_api.app.core.store import InMemoryStore
from trip_expense_api.app.main import create_app


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store=store))


@pytest.fixture
def trip_payload():
    return {
        "employeeName": "Tanaka",
        "department": "Sales",
        "destination": "Osaka",
        "purpose": "Client visit",
        "startDate": "2024-04-01",
        "endDate": "2024-04-03",
        "estimatedCost": 30000,
    }


@pytest.fixture
def trip(client, trip_payload):
    res = client.post("/api/trip-requests", json=trip_payload)
    assert res.status_code == 201
    return res.json()


@pytest.fixture
def expense_payload(trip):
    return {
        "tripRequestId": trip["id"],
        "category": "Lodging",
        "amount": 12000,
        "date": "2024-04-01",
        "description": "Hotel",
    }
