"""Database access helpers for the menu, order history and checkout."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import select as sa_select
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from . import billing
from .errors import StoreOperationFailed
from .models import BillNumberCounter, MenuItem, Order, OrderItem, bill_number_seq, customer_order_items
from .schemas.order import OrderCreate, OrderCreated

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def list_menu_items(db: Session) -> list[MenuItem]:
    statement = select(MenuItem).order_by(MenuItem.id)
    try:
        return list(db.exec(statement))
    except SQLAlchemyError as exc:
        raise StoreOperationFailed("Error fetching menu items") from exc


def list_order_history(db: Session) -> list[dict]:
    statement = sa_select(
        customer_order_items.c.customer_name,
        customer_order_items.c.customer_phone,
        customer_order_items.c.item_name,
        customer_order_items.c.total_quantity,
        customer_order_items.c.order_type,
        customer_order_items.c.total_spent_on_item,
    )
    try:
        return [dict(row) for row in db.exec(statement).mappings()]
    except SQLAlchemyError as exc:
        raise StoreOperationFailed("Error fetching order history") from exc


def next_bill_sequence(db: Session) -> int:
    """Draw the next bill counter value inside the caller's transaction.

    PostgreSQL hands out ``nextval('bill_number_seq')``; stores without
    sequences insert into ``bill_number_counter`` and use the new row id.
    """

    if db.get_bind().dialect.supports_sequences:
        return db.exec(sa_select(bill_number_seq.next_value())).scalar_one()
    counter = BillNumberCounter()
    db.add(counter)
    db.flush()
    return counter.id


def create_order(db: Session, payload: OrderCreate) -> OrderCreated:
    totals = billing.compute_totals(payload.items)
    try:
        bill_number = billing.format_bill_number(next_bill_sequence(db))
        now = _utcnow()
        order = Order(
            customer_name=payload.customer_name,
            customer_phone=payload.customer_phone,
            table_number=payload.table_number,
            subtotal=totals.subtotal,
            discount=totals.discount,
            gst=totals.gst,
            total_amount=totals.total_amount,
            order_type=payload.order_type,
            payment_status=payload.payment_status,
            bill_number=bill_number,
            created_at=now,
            updated_at=now,
        )
        db.add(order)
        db.flush()
        order_id = order.id

        for item in payload.items:
            db.add(
                OrderItem(
                    order_id=order_id,
                    item_name=item.item_name,
                    price=item.price,
                    quantity=item.quantity,
                    total=billing.line_total(item.price, item.quantity),
                    created_at=now,
                    updated_at=now,
                )
            )
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreOperationFailed("Error saving order") from exc

    logger.info("Saved order %s (%s) total=%s", order_id, bill_number, totals.total_amount)
    return OrderCreated(
        order_id=order_id,
        bill_number=bill_number,
        subtotal=totals.subtotal,
        discount=totals.discount,
        gst=totals.gst,
        total_amount=totals.total_amount,
    )


def seed_menu_items(db: Session, items: list[tuple[str, Decimal]], *, clear: bool = False) -> list[MenuItem]:
    """Insert ``(item_name, rate)`` pairs whose names are not already on the menu."""

    try:
        if clear:
            for existing in db.exec(select(MenuItem)):
                db.delete(existing)
            db.flush()
        known = set(db.exec(select(MenuItem.item_name)))
        created = [MenuItem(item_name=name, rate=rate) for name, rate in items if name not in known]
        db.add_all(created)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreOperationFailed("Error seeding menu items") from exc
    for item in created:
        db.refresh(item)
    logger.info("Seeded %d menu item(s)", len(created))
    return created
