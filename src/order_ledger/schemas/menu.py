from typing import Optional

from pydantic import BaseModel, ConfigDict


class MenuItemRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    item_name: str
    rate: float


class OrderHistoryRow(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    item_name: Optional[str] = None
    total_quantity: Optional[int] = None
    order_type: Optional[str] = None
    total_spent_on_item: Optional[float] = None
