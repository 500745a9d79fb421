from decimal import Decimal

from fastapi.testclient import TestClient
from sqlmodel import Session

from order_ledger.models import MenuItem


def test_menu_items_listed_unfiltered(client: TestClient, session: Session) -> None:
    session.add_all(
        [
            MenuItem(item_name="Masala Dosa", rate=Decimal("120.00")),
            MenuItem(item_name="Filter Coffee", rate=Decimal("40.50")),
        ]
    )
    session.commit()

    response = client.get("/api/menu-items")
    assert response.status_code == 200, response.text
    rows = response.json()
    assert [(row["item_name"], row["rate"]) for row in rows] == [("Masala Dosa", 120.0), ("Filter Coffee", 40.5)]
    assert set(rows[0]) == {"id", "item_name", "rate"}


def test_empty_menu(client: TestClient) -> None:
    response = client.get("/api/menu-items")
    assert response.status_code == 200
    assert response.json() == []


def test_order_history_groups_customer_items(client: TestClient) -> None:
    base = {
        "customer_name": "Asha",
        "customer_phone": "9800000001",
        "table_number": 2,
        "order_type": "Takeaway",
        "payment_status": "Paid",
    }
    client.post("/api/orders", json={**base, "items": [{"item_name": "Idli", "price": 30, "quantity": 2}]})
    client.post("/api/orders", json={**base, "items": [{"item_name": "Idli", "price": 30, "quantity": 1}]})

    response = client.get("/api/order-history")
    assert response.status_code == 200, response.text
    assert response.json() == [
        {
            "customer_name": "Asha",
            "customer_phone": "9800000001",
            "item_name": "Idli",
            "total_quantity": 3,
            "order_type": "Takeaway",
            "total_spent_on_item": 90.0,
        }
    ]


def test_health(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}
