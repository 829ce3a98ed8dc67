"""
Tests for the Decimal money primitives

Covers:
1. Coercion into Decimal (no binary float error)
2. Arithmetic and safe division
3. Rounding to cents (ROUND_HALF_UP)
4. VAT divisor and percentages
5. Tolerance comparison and validation
"""

from decimal import Decimal

import pytest

from fiscal.core.math.money import (
    CENT,
    MONEY_PLACES,
    is_within_tolerance,
    money_add,
    money_div,
    money_mul,
    money_sub,
    percent_of,
    round_money,
    safe_divide,
    sum_money,
    to_decimal,
    validate_in_range,
    validate_non_negative,
    vat_divisor,
)


# =============================================================================
# COERCION
# =============================================================================


class TestToDecimal:
    """Tests for to_decimal"""

    def test_float_uses_shortest_repr(self) -> None:
        """0.1 becomes Decimal('0.1'), not the binary expansion"""
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(1500.50) == Decimal("1500.5")

    def test_int_and_decimal_pass_through(self) -> None:
        assert to_decimal(7) == Decimal("7")
        assert to_decimal(Decimal("2.345")) == Decimal("2.345")

    def test_string_is_stripped(self) -> None:
        assert to_decimal(" 2.50 ") == Decimal("2.50")

    def test_non_numeric_string_raises(self) -> None:
        with pytest.raises(ValueError, match="not a numeric string"):
            to_decimal("abc")

    def test_nan_and_infinity_rejected(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            to_decimal(float("nan"))
        with pytest.raises(ValueError, match="finite"):
            to_decimal(float("inf"))
        with pytest.raises(ValueError, match="finite"):
            to_decimal("Infinity")

    def test_bool_and_unsupported_types_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_decimal(True)
        with pytest.raises(ValueError, match="unsupported numeric type"):
            to_decimal([1])  # type: ignore[arg-type]


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestArithmetic:
    """Tests for add/sub/mul/div"""

    def test_add_has_no_float_error(self) -> None:
        """0.1 + 0.2 == 0.3 exactly"""
        assert money_add(0.1, 0.2) == Decimal("0.3")
        assert money_add("0.1", "0.2", "0.3") == Decimal("0.6")

    def test_sub_and_mul(self) -> None:
        assert money_sub("200", "20") == Decimal("180")
        assert money_mul("0.1", 3) == Decimal("0.3")

    def test_div_keeps_full_precision(self) -> None:
        """180 / 1.21 is not rounded by the division"""
        result = money_div(180, Decimal("1.21"))
        assert result != round_money(result)
        assert round_money(result) == Decimal("148.76")

    def test_div_by_zero_raises(self) -> None:
        with pytest.raises(ZeroDivisionError):
            money_div(1, 0)

    def test_safe_divide(self) -> None:
        assert safe_divide(10, 4) == Decimal("2.5")
        assert safe_divide(10, 0) == Decimal("0")
        assert safe_divide(10, "0.00", fallback=5) == Decimal("5")

    def test_sum_money(self) -> None:
        assert sum_money([]) == Decimal("0")
        assert sum_money(["0.10"] * 10) == Decimal("1.00")
        assert sum_money(x for x in (1, "2.5", Decimal("0.5"))) == Decimal("4.0")

    def test_percent_of(self) -> None:
        assert percent_of(200, 10) == Decimal("20")
        assert percent_of("148.76", 21) == Decimal("31.2396")


# =============================================================================
# VAT DIVISOR
# =============================================================================


class TestVatDivisor:
    """Tests for vat_divisor"""

    def test_standard_rates(self) -> None:
        assert vat_divisor(21) == Decimal("1.21")
        assert vat_divisor("10.5") == Decimal("1.105")
        assert vat_divisor(27) == Decimal("1.27")

    def test_zero_rate_is_one(self) -> None:
        assert vat_divisor(0) == Decimal("1")

    def test_divisor_never_below_one(self) -> None:
        for rate in (0, "0.01", 2, 21, 100):
            assert vat_divisor(rate) >= 1

    def test_negative_rate_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            vat_divisor(-1)


# =============================================================================
# ROUNDING
# =============================================================================


class TestRoundMoney:
    """Tests for round_money"""

    def test_default_places(self) -> None:
        assert MONEY_PLACES == 2
        assert str(round_money(50)) == "50.00"
        assert str(round_money(Decimal("148.7603305785"))) == "148.76"

    def test_half_up(self) -> None:
        """Commercial rounding: ties go away from zero"""
        assert round_money("0.005") == Decimal("0.01")
        assert round_money("2.675") == Decimal("2.68")
        assert round_money("2.665") == Decimal("2.67")
        assert round_money("-0.005") == Decimal("-0.01")

    def test_float_input_rounds_like_its_repr(self) -> None:
        """round(2.675, 2) == 2.67 for floats; money rounding gives 2.68"""
        assert round_money(2.675) == Decimal("2.68")

    def test_custom_places(self) -> None:
        assert round_money("1.2345", 3) == Decimal("1.235")
        assert str(round_money("7.5", 0)) == "8"

    def test_negative_places_raises(self) -> None:
        with pytest.raises(ValueError, match="places must be non-negative"):
            round_money(1, -1)


# =============================================================================
# TOLERANCE AND VALIDATION
# =============================================================================


class TestToleranceAndValidation:
    """Tests for is_within_tolerance and validators"""

    def test_within_one_cent(self) -> None:
        assert CENT == Decimal("0.01")
        assert is_within_tolerance("180.00", "179.99")
        assert is_within_tolerance("180.00", "180.01")
        assert not is_within_tolerance("180.00", "179.98")

    def test_custom_tolerance(self) -> None:
        assert is_within_tolerance(100, "100.4", tolerance="0.5")
        assert not is_within_tolerance(100, "100.6", tolerance="0.5")

    def test_validate_non_negative(self) -> None:
        validate_non_negative(0, "quantity")
        with pytest.raises(ValueError, match="quantity must be non-negative"):
            validate_non_negative("-0.01", "quantity")

    def test_validate_in_range(self) -> None:
        validate_in_range(100, "discount_percent", 0, 100)
        with pytest.raises(ValueError, match="discount_percent must be <= 100"):
            validate_in_range("100.01", "discount_percent", 0, 100)
        with pytest.raises(ValueError, match="discount_percent must be >= 0"):
            validate_in_range(-1, "discount_percent", 0, 100)
