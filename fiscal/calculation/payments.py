"""Payment settlement of a document.

Checks that the payments of a sale add up to its total and derives the
payment status stored with the sale.
"""

from decimal import Decimal
from enum import Enum
from typing import Iterable

from fiscal.core.math.money import ZERO, NumberLike, sum_money, to_decimal


class PaymentStatus(str, Enum):
    """Payment status of a document"""

    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"


def validate_payments(total_amount: NumberLike, payments: Iterable[NumberLike]) -> bool:
    """True if the payments add up exactly to the document total."""
    return sum_money(payments) == to_decimal(total_amount)


def calculate_payment_status(total_amount: NumberLike, paid_amount: NumberLike) -> PaymentStatus:
    """
    Payment status of a document.

    Args:
        total_amount: Document total
        paid_amount: Amount paid so far

    Returns:
        PENDING if nothing was paid, PARTIAL if less than the total was
        paid, PAID otherwise (overpayment included)
    """
    paid: Decimal = to_decimal(paid_amount)

    if paid == ZERO:
        return PaymentStatus.PENDING
    if paid < to_decimal(total_amount):
        return PaymentStatus.PARTIAL
    return PaymentStatus.PAID
