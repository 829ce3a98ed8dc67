"""
Money — Decimal arithmetic primitives

All monetary math in the package goes through this module:
- Coercion of int/str/float/Decimal into Decimal without binary float error
- Add/sub/mul/div over Decimal with full intermediate precision
- Rounding to cents (ROUND_HALF_UP, commercial rounding) at output boundaries
- Safe division and cent-level tolerance comparisons

CRITICAL INVARIANTS:
1. No float ever takes part in a monetary operation (floats are converted via repr)
2. Rounding happens only where the caller asks for it (round_money)
3. The VAT divisor is always >= 1 (negative rates are rejected)
4. All operations are pure and deterministic
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Final, Iterable, Union

# =============================================================================
# CONSTANTS
# =============================================================================

# Number of fractional digits stored for every monetary amount
MONEY_PLACES: Final[int] = 2

# One cent: the tolerance used when comparing rounded amounts
CENT: Final[Decimal] = Decimal("0.01")

ZERO: Final[Decimal] = Decimal("0")
ONE: Final[Decimal] = Decimal("1")
HUNDRED: Final[Decimal] = Decimal("100")

NumberLike = Union[Decimal, int, float, str]


# =============================================================================
# COERCION
# =============================================================================


def to_decimal(value: NumberLike) -> Decimal:
    """
    Convert a number-like value into Decimal.

    Floats are converted through their shortest repr, so 0.1 becomes
    Decimal("0.1") and not the binary expansion 0.1000000000000000055...

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Finite Decimal

    Raises:
        ValueError: If the value is not numeric, NaN or Infinity

    Examples:
        >>> to_decimal(0.1)
        Decimal('0.1')
        >>> to_decimal("1500.50")
        Decimal('1500.50')
    """
    if isinstance(value, bool):
        raise ValueError(f"boolean is not a monetary value: {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise ValueError(f"not a numeric string: {value!r}")
    else:
        raise ValueError(f"unsupported numeric type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"value must be finite (not NaN/Infinity), got {value!r}")

    return result


# =============================================================================
# ARITHMETIC
# =============================================================================


def money_add(*values: NumberLike) -> Decimal:
    """Exact sum of all arguments (no rounding)."""
    return sum_money(values)


def money_sub(minuend: NumberLike, subtrahend: NumberLike) -> Decimal:
    """Exact difference minuend - subtrahend."""
    return to_decimal(minuend) - to_decimal(subtrahend)


def money_mul(a: NumberLike, b: NumberLike) -> Decimal:
    """Exact product a * b."""
    return to_decimal(a) * to_decimal(b)


def money_div(numerator: NumberLike, denominator: NumberLike) -> Decimal:
    """
    Division with full context precision.

    Raises:
        ZeroDivisionError: If the denominator is zero
    """
    den = to_decimal(denominator)
    if den == ZERO:
        raise ZeroDivisionError("monetary division by zero")
    return to_decimal(numerator) / den


def safe_divide(
    numerator: NumberLike,
    denominator: NumberLike,
    fallback: NumberLike = ZERO,
) -> Decimal:
    """
    Division that returns a fallback instead of dividing by zero.

    Examples:
        >>> safe_divide(10, 4)
        Decimal('2.5')
        >>> safe_divide(10, 0)
        Decimal('0')
    """
    den = to_decimal(denominator)
    if den == ZERO:
        return to_decimal(fallback)
    return to_decimal(numerator) / den


def sum_money(values: Iterable[NumberLike]) -> Decimal:
    """Exact sum of an iterable of amounts; an empty iterable sums to 0."""
    total = ZERO
    for value in values:
        total += to_decimal(value)
    return total


def percent_of(amount: NumberLike, rate: NumberLike) -> Decimal:
    """
    Percentage of an amount: amount * rate / 100.

    Examples:
        >>> percent_of(200, 10)
        Decimal('20')
    """
    return to_decimal(amount) * to_decimal(rate) / HUNDRED


def vat_divisor(rate: NumberLike) -> Decimal:
    """
    Divisor that unbundles VAT from a VAT-inclusive price: 1 + rate / 100.

    Args:
        rate: VAT rate in percent (21 for 21%)

    Returns:
        Divisor >= 1

    Raises:
        ValueError: If the rate is negative
    """
    rate_dec = to_decimal(rate)
    if rate_dec < ZERO:
        raise ValueError(f"tax rate must be non-negative, got {rate_dec}")
    return ONE + rate_dec / HUNDRED


# =============================================================================
# ROUNDING AND COMPARISON
# =============================================================================


def round_money(value: NumberLike, places: int = MONEY_PLACES) -> Decimal:
    """
    Round to a fixed number of decimal places with ROUND_HALF_UP.

    Examples:
        >>> round_money(Decimal("148.7603305785"))
        Decimal('148.76')
        >>> round_money(Decimal("0.005"))
        Decimal('0.01')
        >>> round_money(50)
        Decimal('50.00')
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    exponent = Decimal(1).scaleb(-places)
    return to_decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def is_within_tolerance(
    a: NumberLike,
    b: NumberLike,
    tolerance: NumberLike = CENT,
) -> bool:
    """
    True if abs(a - b) <= tolerance (one cent by default).

    Used to check reconstruction invariants after rounding, e.g.
    net * (1 + rate/100) against the line total.
    """
    return abs(to_decimal(a) - to_decimal(b)) <= to_decimal(tolerance)


# =============================================================================
# VALIDATION
# =============================================================================


def validate_non_negative(value: NumberLike, name: str) -> None:
    """
    Raises:
        ValueError: If value < 0 or not numeric
    """
    if to_decimal(value) < ZERO:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: NumberLike,
    name: str,
    min_value: NumberLike | None = None,
    max_value: NumberLike | None = None,
) -> None:
    """
    Raises:
        ValueError: If value is outside [min_value, max_value]
    """
    dec = to_decimal(value)

    if min_value is not None and dec < to_decimal(min_value):
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and dec > to_decimal(max_value):
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
