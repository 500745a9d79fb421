from .base import (
    BillNumberCounter,
    MenuItem,
    Order,
    OrderItem,
    bill_number_seq,
    customer_order_items,
)

__all__ = [
    "BillNumberCounter",
    "MenuItem",
    "Order",
    "OrderItem",
    "bill_number_seq",
    "customer_order_items",
]
