"""Order total arithmetic and bill number formatting.

All amounts are :class:`~decimal.Decimal`. Each derived amount is rounded to
two places (half-up) on its own before it feeds the next step, so the stored
total always equals ``subtotal - discount + gst`` of the stored parts.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Protocol

DISCOUNT_RATE = Decimal("0.10")
GST_RATE = Decimal("0.18")
BILL_PREFIX = "BILL-"
BILL_DIGITS = 6

_CENT = Decimal("0.01")


class PricedLine(Protocol):
    price: Decimal
    quantity: int


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Decimal
    discount: Decimal
    gst: Decimal
    total_amount: Decimal


def round2(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def line_total(price: Decimal, quantity: int) -> Decimal:
    return Decimal(price) * quantity


def compute_totals(items: Iterable[PricedLine]) -> OrderTotals:
    """Return subtotal, 10% discount, 18% GST on the discounted amount and the total.

    No validation happens here: negative prices or quantities flow straight
    through the arithmetic, and an empty iterable yields all zeros.
    """

    subtotal = sum((line_total(item.price, item.quantity) for item in items), Decimal("0"))
    discount = round2(subtotal * DISCOUNT_RATE)
    gst = round2((subtotal - discount) * GST_RATE)
    total_amount = round2(subtotal - discount + gst)
    return OrderTotals(subtotal=subtotal, discount=discount, gst=gst, total_amount=total_amount)


def format_bill_number(sequence_value: int) -> str:
    """Format a sequence value as ``BILL-000007``; wider values are kept whole."""

    return f"{BILL_PREFIX}{sequence_value:0{BILL_DIGITS}d}"
