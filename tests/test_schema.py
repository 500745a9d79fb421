from fastapi.testclient import TestClient
from sqlalchemy import inspect, text

from order_ledger.db.session import drop_db, init_db
from order_ledger.main import create_application

_CUSTOM_VIEW = """
CREATE VIEW customer_order_items AS
SELECT 'Walk-in' AS customer_name,
       NULL AS customer_phone,
       'Tea' AS item_name,
       1 AS total_quantity,
       'Takeaway' AS order_type,
       10 AS total_spent_on_item
"""


def test_init_db_creates_history_view(db_engine) -> None:  # type: ignore[no-untyped-def]
    assert "customer_order_items" in inspect(db_engine).get_view_names()


def test_existing_history_view_survives_startup(db_engine) -> None:  # type: ignore[no-untyped-def]
    with db_engine.begin() as connection:
        connection.execute(text("DROP VIEW customer_order_items"))
        connection.execute(text(_CUSTOM_VIEW))

    init_db()
    with TestClient(create_application()) as client:
        response = client.get("/api/order-history")

    assert response.status_code == 200, response.text
    assert response.json() == [
        {
            "customer_name": "Walk-in",
            "customer_phone": None,
            "item_name": "Tea",
            "total_quantity": 1,
            "order_type": "Takeaway",
            "total_spent_on_item": 10.0,
        }
    ]


def test_history_table_is_left_alone(db_engine) -> None:  # type: ignore[no-untyped-def]
    with db_engine.begin() as connection:
        connection.execute(text("DROP VIEW customer_order_items"))
        connection.execute(
            text(
                "CREATE TABLE customer_order_items (customer_name TEXT, customer_phone TEXT, item_name TEXT,"
                " total_quantity INTEGER, order_type TEXT, total_spent_on_item NUMERIC)"
            )
        )
    try:
        init_db()
        drop_db()
        init_db()
        inspector = inspect(db_engine)
        assert inspector.has_table("customer_order_items")
        assert "customer_order_items" not in inspector.get_view_names()
    finally:
        with db_engine.begin() as connection:
            connection.execute(text("DROP TABLE IF EXISTS customer_order_items"))
