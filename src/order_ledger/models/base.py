from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Column, DateTime, Integer, Numeric, Sequence, String
from sqlalchemy.sql import column, table
from sqlmodel import Field, SQLModel

# Created by create_all only on dialects with sequence support (PostgreSQL).
bill_number_seq = Sequence("bill_number_seq", metadata=SQLModel.metadata)


class MenuItem(SQLModel, table=True):
    __tablename__ = "menu_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    item_name: str = Field(index=True)
    rate: Decimal = Field(max_digits=10, decimal_places=2)


class Order(SQLModel, table=True):
    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    customer_name: str = Field(index=True)
    customer_phone: Optional[str] = Field(default=None, index=True)
    table_number: Optional[int] = Field(default=None)
    subtotal: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=4)
    discount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    gst: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    total_amount: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    order_type: str
    payment_status: str = Field(index=True)
    bill_number: str = Field(index=True, unique=True)
    created_at: datetime = Field(sa_type=DateTime(timezone=True), index=True)
    updated_at: datetime = Field(sa_type=DateTime(timezone=True))


class OrderItem(SQLModel, table=True):
    __tablename__ = "order_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    order_id: int = Field(foreign_key="orders.id", index=True)
    item_name: str = Field(index=True)
    # Line amounts keep four places so total stays price x quantity of the stored price.
    price: Decimal = Field(max_digits=12, decimal_places=4)
    quantity: int
    total: Decimal = Field(max_digits=14, decimal_places=4)
    created_at: datetime = Field(sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(sa_type=DateTime(timezone=True))


class BillNumberCounter(SQLModel, table=True):
    """Autoincrement fallback for stores without sequences (SQLite)."""

    __tablename__ = "bill_number_counter"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, sa_column=Column(Integer, primary_key=True, autoincrement=True))


customer_order_items = table(
    "customer_order_items",
    column("customer_name", String),
    column("customer_phone", String),
    column("item_name", String),
    column("total_quantity", Integer),
    column("order_type", String),
    column("total_spent_on_item", Numeric),
)
