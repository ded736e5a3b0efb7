"""
Tests for the expense API.
"""

from datetime import date, datetime, timezone

import pytest
from fastapi.testclient import TestClient

from expense_api.api.app import create_app
from expense_api.repositories import InMemoryExpenseRepository

EXPENSES = "/api/expenses"
FIXED_DAY = date(2024, 2, 1)

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, DELETE, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


@pytest.fixture
def repository():
    """Create a freshly seeded store."""
    return InMemoryExpenseRepository(seed=True, id_strategy="max_plus_one")


@pytest.fixture
def client(repository):
    """Create a test client with the lifespan running."""
    app = create_app(repository=repository, clock=lambda: FIXED_DAY)
    with TestClient(app) as test_client:
        yield test_client


def assert_cors(response):
    for header, value in CORS.items():
        assert response.headers[header] == value


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Expense API"
    assert data["endpoints"]["expenses"] == EXPENSES


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "expenses": 3}


def test_list_all(client):
    response = client.get(EXPENSES)
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert [e["id"] for e in data["data"]] == [1, 2, 3]
    assert data["total"] == 136.49
    assert data["count"] == 3
    assert_cors(response)


def test_list_by_category(client):
    """Seeded collection filtered by Food holds only the groceries."""
    data = client.get(EXPENSES, params={"category": "Food"}).json()
    assert data["data"] == [
        {"id": 1, "description": "Groceries", "amount": 75.5, "category": "Food", "date": "2024-01-15"}
    ]
    assert data["total"] == 75.5
    assert data["count"] == 1


def test_list_category_ignores_case(client):
    data = client.get(EXPENSES, params={"category": "tRANSPORT"}).json()
    assert [e["description"] for e in data["data"]] == ["Gasoline"]


def test_list_amount_range_is_inclusive(client):
    data = client.get(EXPENSES, params={"minAmount": "15.99", "maxAmount": "45"}).json()
    assert [e["id"] for e in data["data"]] == [2, 3]
    assert all(15.99 <= e["amount"] <= 45 for e in data["data"])
    assert data["total"] == 60.99
    assert data["count"] == len(data["data"])


def test_list_filters_combine(client):
    data = client.get(EXPENSES, params={"category": "food", "maxAmount": "50"}).json()
    assert data["data"] == []
    assert data["total"] == 0
    assert data["count"] == 0


def test_list_ignores_unparsable_bounds(client):
    data = client.get(EXPENSES, params={"minAmount": "abc", "maxAmount": ""}).json()
    assert data["count"] == 3


def test_list_skips_infinite_bound(client):
    data = client.get(EXPENSES, params={"minAmount": "Infinity"}).json()
    assert data["count"] == 3


def test_create_expense(client):
    response = client.post(EXPENSES, json={"description": "Coffee", "amount": "4.5", "category": "Food"})
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Expense added successfully"
    assert body["data"] == {
        "id": 4,
        "description": "Coffee",
        "amount": 4.5,
        "category": "Food",
        "date": FIXED_DAY.isoformat(),
    }
    assert_cors(response)

    listed = client.get(EXPENSES).json()
    assert listed["count"] == 4
    assert listed["data"][-1]["id"] == 4


def test_create_trims_and_rounds(client):
    response = client.post(
        EXPENSES,
        json={"description": "  Lunch  ", "amount": 12.345678, "category": " Food "},
    )
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["description"] == "Lunch"
    assert data["category"] == "Food"
    assert data["amount"] == 12.35


def test_create_uses_utc_date_by_default():
    app = create_app(repository=InMemoryExpenseRepository(seed=True))
    with TestClient(app) as test_client:
        response = test_client.post(EXPENSES, json={"description": "Tea", "amount": 2, "category": "Food"})
    assert response.status_code == 201
    assert response.json()["data"]["date"] == datetime.now(timezone.utc).date().isoformat()


@pytest.mark.parametrize(
    "payload",
    [
        {"amount": "4.5", "category": "Food"},
        {"description": "", "amount": "4.5", "category": "Food"},
        {"description": "Coffee", "amount": 0, "category": "Food"},
        {"description": "Coffee", "amount": None, "category": "Food"},
        {"description": "Coffee", "amount": "4.5", "category": "   "},
        {},
    ],
)
def test_create_missing_fields(client, payload):
    response = client.post(EXPENSES, json=payload)
    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Missing required fields: description, amount, category",
    }
    assert client.get(EXPENSES).json()["count"] == 3


@pytest.mark.parametrize("amount", ["-5", -1, "0", "abc", "0.00", True])
def test_create_rejects_non_positive_amount(client, amount):
    response = client.post(EXPENSES, json={"description": "Coffee", "amount": amount, "category": "Food"})
    assert response.status_code == 400
    assert response.json()["error"] == "Amount must be a positive number"
    assert client.get(EXPENSES).json()["count"] == 3


def test_create_without_body(client):
    response = client.post(EXPENSES)
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_create_with_malformed_json(client):
    response = client.post(
        EXPENSES,
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid request body"}
    assert_cors(response)


def test_created_ids_are_unique(client):
    ids = []
    for n in range(5):
        response = client.post(EXPENSES, json={"description": f"Item {n}", "amount": n + 1, "category": "Misc"})
        ids.append(response.json()["data"]["id"])
    stored = [e["id"] for e in client.get(EXPENSES).json()["data"]]
    assert len(stored) == len(set(stored))
    assert ids == [4, 5, 6, 7, 8]


def test_delete_expense(client):
    response = client.delete(EXPENSES, params={"id": "2"})
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Expense deleted successfully"}

    data = client.get(EXPENSES).json()
    assert data["count"] == 2
    assert 2 not in [e["id"] for e in data["data"]]


def test_delete_unknown_id(client):
    response = client.delete(EXPENSES, params={"id": "999"})
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Expense not found"}
    assert client.get(EXPENSES).json()["count"] == 3


def test_delete_non_numeric_id(client):
    response = client.delete(EXPENSES, params={"id": "abc"})
    assert response.status_code == 404
    assert client.get(EXPENSES).json()["count"] == 3


@pytest.mark.parametrize("params", [{}, {"id": ""}])
def test_delete_requires_id(client, params):
    response = client.delete(EXPENSES, params=params)
    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Expense ID is required"}


def test_max_plus_one_can_reissue_deleted_id(client):
    client.delete(EXPENSES, params={"id": "3"})
    response = client.post(EXPENSES, json={"description": "Cinema", "amount": 9, "category": "Entertainment"})
    assert response.json()["data"]["id"] == 3


def test_monotonic_ids_never_reissue():
    app = create_app(repository=InMemoryExpenseRepository(seed=True, id_strategy="monotonic"))
    with TestClient(app) as test_client:
        test_client.delete(EXPENSES, params={"id": "3"})
        response = test_client.post(
            EXPENSES, json={"description": "Cinema", "amount": 9, "category": "Entertainment"}
        )
    assert response.json()["data"]["id"] == 4


@pytest.mark.parametrize("path", [EXPENSES, "/", "/anything/else"])
def test_options_short_circuits(client, path):
    response = client.options(path)
    assert response.status_code == 200
    assert response.content == b""
    assert_cors(response)


@pytest.mark.parametrize("method", ["PUT", "PATCH"])
def test_other_methods_not_allowed(client, method):
    response = client.request(method, EXPENSES, json={})
    assert response.status_code == 405
    assert response.json() == {"error": "Method not allowed"}
    assert_cors(response)


def test_unexpected_fault_is_generic(client, repository, monkeypatch):
    def broken():
        raise RuntimeError("store exploded")

    monkeypatch.setattr(repository, "list_all", broken)
    response = client.get(EXPENSES)
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch expenses"}
    assert "exploded" not in response.text


@pytest.mark.parametrize("amount, stored", [("1.125", 1.13), (0.625, 0.63), ("1.005", 1.0)])
def test_create_rounds_half_up(client, amount, stored):
    response = client.post(EXPENSES, json={"description": "Snack", "amount": amount, "category": "Food"})
    assert response.status_code == 201
    assert response.json()["data"]["amount"] == stored


def test_add_fault_is_generic(client, repository, monkeypatch):
    def broken(**kwargs):
        raise RuntimeError("append exploded")

    monkeypatch.setattr(repository, "add", broken)
    response = client.post(EXPENSES, json={"description": "Coffee", "amount": "4.5", "category": "Food"})
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to add expense"}
    assert "exploded" not in response.text
    assert_cors(response)


def test_delete_fault_is_generic(client, repository, monkeypatch):
    def broken(expense_id):
        raise RuntimeError("filter exploded")

    monkeypatch.setattr(repository, "delete_by_id", broken)
    response = client.delete(EXPENSES, params={"id": "1"})
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to delete expense"}
    assert "exploded" not in response.text
    assert client.get(EXPENSES).json()["count"] == 3
