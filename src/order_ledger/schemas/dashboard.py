import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SalesByItem(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    item_name: str
    total_sales: float


class DailySales(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: dt.date
    total_sales: float


class PaymentStatusBucket(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    payment_status: Optional[str] = None
    count_orders: int
    total_amount: float


class PendingCustomer(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    pending_bills_count: int
    total_pending_amount: float
