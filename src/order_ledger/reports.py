"""Read-only dashboard aggregates over orders and their lines."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from .errors import StoreOperationFailed
from .models import Order, OrderItem

PENDING = "Pending"
TOP_PENDING_LIMIT = 5


def _utc_midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date bounds on ``orders.created_at``.

    ``None`` on either side means that side is unbounded. Days are UTC days,
    matching the timezone-aware timestamps orders are stored with.
    """

    start: Optional[date] = None
    end: Optional[date] = None

    def apply(self, statement: Any) -> Any:
        if self.start is not None:
            statement = statement.where(Order.created_at >= _utc_midnight(self.start))
        if self.end is not None:
            statement = statement.where(Order.created_at < _utc_midnight(self.end + timedelta(days=1)))
        return statement


ALL_TIME = DateRange()


def _rows(db: Session, statement: Any) -> list[dict]:
    try:
        return [dict(row) for row in db.exec(statement).mappings()]
    except SQLAlchemyError as exc:
        raise StoreOperationFailed("Error running dashboard query") from exc


def sales_by_item(db: Session, date_range: DateRange = ALL_TIME) -> list[dict]:
    total_sales = func.sum(OrderItem.total).label("total_sales")
    statement = (
        select(OrderItem.item_name, total_sales)
        .join(Order, Order.id == OrderItem.order_id)
        .group_by(OrderItem.item_name)
        .order_by(total_sales.desc())
    )
    return _rows(db, date_range.apply(statement))


def daily_sales(db: Session, date_range: DateRange = ALL_TIME) -> list[dict]:
    day = func.date(Order.created_at).label("date")
    statement = (
        select(day, func.sum(Order.total_amount).label("total_sales"))
        .group_by(day)
        .order_by(day)
    )
    return _rows(db, date_range.apply(statement))


def payment_status_distribution(db: Session, date_range: DateRange = ALL_TIME) -> list[dict]:
    statement = select(
        Order.payment_status,
        func.count().label("count_orders"),
        func.sum(Order.total_amount).label("total_amount"),
    ).group_by(Order.payment_status)
    return _rows(db, date_range.apply(statement))


def top_pending_customers(db: Session, limit: int = TOP_PENDING_LIMIT) -> list[dict]:
    total_pending = func.sum(Order.total_amount).label("total_pending_amount")
    statement = (
        select(
            Order.customer_name,
            Order.customer_phone,
            func.count().label("pending_bills_count"),
            total_pending,
        )
        .where(Order.payment_status == PENDING)
        .group_by(Order.customer_name, Order.customer_phone)
        .order_by(total_pending.desc())
        .limit(limit)
    )
    return _rows(db, statement)
