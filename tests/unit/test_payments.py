"""
Tests for payment settlement
"""

from decimal import Decimal

import pytest

from fiscal.calculation.payments import PaymentStatus, calculate_payment_status, validate_payments


class TestValidatePayments:
    """Tests for validate_payments"""

    def test_exact_sum(self) -> None:
        assert validate_payments(Decimal("230.00"), [Decimal("200.00"), Decimal("30.00")])

    def test_float_payments_sum_exactly(self) -> None:
        assert validate_payments("0.30", [0.1, 0.2])

    def test_short_or_over_payment(self) -> None:
        assert not validate_payments("230.00", ["200.00"])
        assert not validate_payments("230.00", ["200.00", "30.01"])

    def test_no_payments(self) -> None:
        assert validate_payments(0, [])
        assert not validate_payments("10", [])


class TestPaymentStatus:
    """Tests for calculate_payment_status"""

    @pytest.mark.parametrize(
        "total, paid, expected",
        [
            ("230.00", "0", PaymentStatus.PENDING),
            ("230.00", "0.00", PaymentStatus.PENDING),
            ("230.00", "100.00", PaymentStatus.PARTIAL),
            ("230.00", "229.99", PaymentStatus.PARTIAL),
            ("230.00", "230.00", PaymentStatus.PAID),
            ("230.00", "250.00", PaymentStatus.PAID),
        ],
    )
    def test_status(self, total, paid, expected) -> None:
        assert calculate_payment_status(total, paid) == expected

    def test_status_values(self) -> None:
        assert PaymentStatus.PAID.value == "paid"
        assert PaymentStatus("partial") is PaymentStatus.PARTIAL
