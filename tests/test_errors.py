import logging

import pytest
from fastapi.testclient import TestClient


@pytest.mark.parametrize(
    ("path", "message"),
    [
        ("/api/menu-items", "Error fetching menu items"),
        ("/api/order-history", "Error fetching order history"),
    ],
)
def test_reader_failures_are_plain_text(broken_client: TestClient, path: str, message: str) -> None:
    response = broken_client.get(path)
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == message


def test_order_failure_shape(broken_client: TestClient) -> None:
    response = broken_client.post(
        "/api/orders",
        json={
            "customer_name": "Asha",
            "order_type": "Dine-in",
            "payment_status": "Paid",
            "items": [{"item_name": "Dosa", "price": 40, "quantity": 1}],
        },
    )
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Error saving order"}


@pytest.mark.parametrize(
    "path",
    [
        "/api/dashboard/sales-by-item",
        "/api/dashboard/daily-sales",
        "/api/dashboard/payment-status-distribution",
        "/api/dashboard/top-pending-customers",
    ],
)
def test_dashboard_failures_are_generic(broken_client: TestClient, path: str) -> None:
    response = broken_client.get(path)
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_failure_is_logged_with_cause(broken_client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="order_ledger.errors"):
        broken_client.get("/api/menu-items")

    records = [r for r in caplog.records if r.name == "order_ledger.errors"]
    assert len(records) == 1
    assert "Error fetching menu items" in records[0].getMessage()
    assert records[0].exc_info is not None
    assert "no such table" in str(records[0].exc_info[1].__cause__)
