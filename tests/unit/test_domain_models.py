"""
Tests for the domain models

Checks:
1. VatCondition codes and normalization
2. TaxDefinition validation, immutability and applicability
3. Default tax catalog
4. VoucherType letters
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from fiscal.core.domain import (
    CUSTOMER_CONDITIONS,
    ISSUER_CONDITIONS,
    CalculationBase,
    IssuerCategory,
    TaxDefinition,
    TaxType,
    VatCondition,
    VoucherType,
    coerce_vat_condition,
    default_tax_definitions,
    to_issuer_category,
)


# =============================================================================
# VAT CONDITION TESTS
# =============================================================================


class TestVatCondition:
    """Tests for VatCondition"""

    def test_short_codes(self) -> None:
        assert VatCondition.RESPONSABLE_INSCRIPTO.code == "RI"
        assert VatCondition.MONOTRIBUTO.code == "MT"
        assert VatCondition.EXENTO.code == "EX"
        assert VatCondition.CONSUMIDOR_FINAL.code == "CF"
        assert VatCondition.NO_RESPONSABLE.code == "NR"

    def test_afip_codes(self) -> None:
        assert VatCondition.RESPONSABLE_INSCRIPTO.afip_code == 1
        assert VatCondition.EXENTO.afip_code == 4
        assert VatCondition.CONSUMIDOR_FINAL.afip_code == 5
        assert VatCondition.MONOTRIBUTO.afip_code == 6

    def test_can_issue(self) -> None:
        assert [c for c in VatCondition if c.can_issue] == list(ISSUER_CONDITIONS)
        assert VatCondition.NO_RESPONSABLE not in CUSTOMER_CONDITIONS

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("RI", VatCondition.RESPONSABLE_INSCRIPTO),
            ("mt", VatCondition.MONOTRIBUTO),
            (" exento ", VatCondition.EXENTO),
            ("CONSUMIDOR_FINAL", VatCondition.CONSUMIDOR_FINAL),
            (VatCondition.NO_RESPONSABLE, VatCondition.NO_RESPONSABLE),
            ("", None),
            (None, None),
            ("FOO", None),
        ],
    )
    def test_coerce(self, value, expected) -> None:
        assert coerce_vat_condition(value) is expected

    def test_to_issuer_category(self) -> None:
        assert to_issuer_category("RESPONSABLE_INSCRIPTO") == IssuerCategory.RI
        assert to_issuer_category(VatCondition.MONOTRIBUTO) == IssuerCategory.MT
        assert to_issuer_category(IssuerCategory.EX) == IssuerCategory.EX

    @pytest.mark.parametrize("value", ["CF", "NO_RESPONSABLE", "FOO", ""])
    def test_to_issuer_category_rejects_non_issuers(self, value) -> None:
        with pytest.raises(ValueError, match="expected RI, MT or EX"):
            to_issuer_category(value)


# =============================================================================
# TAX DEFINITION TESTS
# =============================================================================


class TestTaxDefinition:
    """Tests for TaxDefinition"""

    def test_valid_tax(self) -> None:
        tax = TaxDefinition(
            id="IVA21",
            code="IVA21",
            name="IVA 21%",
            rate=Decimal("21"),
            tax_type=TaxType.IVA,
            applies_to=["RI"],
        )

        assert tax.is_iva
        assert tax.is_active
        assert tax.calculation_base == CalculationBase.NET
        assert tax.applies_to == frozenset({IssuerCategory.RI})
        assert tax.applies_to_issuer(IssuerCategory.RI)
        assert not tax.applies_to_issuer(IssuerCategory.MT)

    def test_single_category_coerced(self) -> None:
        tax = TaxDefinition(id="P", code="P", name="P", rate=Decimal("3"), tax_type="PERCEPTION", applies_to="MT")

        assert tax.applies_to == frozenset({IssuerCategory.MT})
        assert not tax.is_iva

    def test_no_categories_applies_nowhere(self) -> None:
        tax = TaxDefinition(id="X", code="X", name="X", rate=Decimal("1"), tax_type=TaxType.OTHER)

        assert not any(tax.applies_to_issuer(c) for c in IssuerCategory)

    def test_negative_rate_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TaxDefinition(id="X", code="X", name="X", rate=Decimal("-1"), tax_type=TaxType.IVA)

    def test_unknown_category_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TaxDefinition(
                id="X", code="X", name="X", rate=Decimal("1"), tax_type=TaxType.IVA, applies_to=["CF"]
            )

    def test_code_length(self) -> None:
        with pytest.raises(ValidationError):
            TaxDefinition(id="X", code="X" * 21, name="X", rate=Decimal("1"), tax_type=TaxType.IVA)

    def test_immutable(self) -> None:
        tax = default_tax_definitions()[0]

        with pytest.raises(ValidationError):
            tax.rate = Decimal("99")


# =============================================================================
# DEFAULT CATALOG TESTS
# =============================================================================


class TestDefaultTaxDefinitions:
    """Tests for default_tax_definitions"""

    def test_codes_and_rates(self) -> None:
        taxes = {t.code: t for t in default_tax_definitions()}

        assert {code: t.rate for code, t in taxes.items()} == {
            "IVA0": Decimal("0"),
            "IVA105": Decimal("10.5"),
            "IVA21": Decimal("21"),
            "PERCIIBB": Decimal("3"),
            "PERCIVA": Decimal("2"),
        }
        assert taxes["PERCIIBB"].tax_type == TaxType.PERCEPTION
        assert taxes["IVA105"].tax_type == TaxType.IVA

    def test_ri_only(self) -> None:
        for tax in default_tax_definitions():
            assert tax.applies_to == frozenset({IssuerCategory.RI})

    def test_fresh_list_per_call(self) -> None:
        first = default_tax_definitions()
        first.pop()

        assert len(default_tax_definitions()) == 5


# =============================================================================
# VOUCHER TYPE TESTS
# =============================================================================


class TestVoucherType:
    """Tests for VoucherType"""

    def test_letters(self) -> None:
        assert [v.letter for v in VoucherType] == ["A", "B", "C"]
