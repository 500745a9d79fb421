from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OrderItemPayload(BaseModel):
    item_name: Optional[str] = None
    price: Decimal
    quantity: int


class OrderCreate(BaseModel):
    """Checkout payload.

    Only ``price`` and ``quantity`` of each line are required here; every other
    field is handed to the store as given, which enforces its own constraints.
    """

    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    table_number: Optional[int] = None
    order_type: Optional[str] = None
    payment_status: Optional[str] = None
    items: List[OrderItemPayload] = Field(default_factory=list)


class OrderCreated(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    order_id: int
    bill_number: str
    subtotal: float
    discount: float
    gst: float
    total_amount: float
