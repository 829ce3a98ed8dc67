"""
Core math modules

Decimal money primitives shared by every calculator.
"""

from fiscal.core.math.money import (
    # Constants
    CENT,
    HUNDRED,
    MONEY_PLACES,
    ONE,
    ZERO,
    # Coercion
    to_decimal,
    # Arithmetic
    money_add,
    money_div,
    money_mul,
    money_sub,
    percent_of,
    safe_divide,
    sum_money,
    vat_divisor,
    # Rounding and comparison
    is_within_tolerance,
    round_money,
    # Validation
    validate_in_range,
    validate_non_negative,
)

__all__ = [
    # Constants
    "CENT",
    "HUNDRED",
    "MONEY_PLACES",
    "ONE",
    "ZERO",
    # Coercion
    "to_decimal",
    # Arithmetic
    "money_add",
    "money_div",
    "money_mul",
    "money_sub",
    "percent_of",
    "safe_divide",
    "sum_money",
    "vat_divisor",
    # Rounding and comparison
    "is_within_tolerance",
    "round_money",
    # Validation
    "validate_in_range",
    "validate_non_negative",
]
