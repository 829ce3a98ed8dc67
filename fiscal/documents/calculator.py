"""Fiscal document calculation

Composes the engine for one sale/purchase document:

1. Voucher determination (issuer × customer VAT condition)
2. Concrete voucher from the catalog (letter × document class)
3. Per line: applicable taxes → VAT rate → line item → taxes on the pre-VAT amount
4. Document totals (summed per field, rounded once)

VAT rate of a line, in priority order:
- explicit tax_rate on the line
- primary IVA among the applicable taxes
- config.default_vat_rate

Taxes are always computed on the pre-VAT amount of the line, also on
Factura B/C where the VAT stays inside the price: discrimination only
decides what the voucher shows. Other taxes (perceptions, internal taxes)
are reported separately in other_taxes_amount and are never folded into
total_amount.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from pydantic import BaseModel, Field

from fiscal.calculation.line_items import (
    calculate_document_totals,
    calculate_line_item,
    calculate_pre_vat_amount,
)
from fiscal.calculation.tax_resolver import (
    TaxApplicabilitySet,
    TaxResolution,
    compute_tax_amounts,
    select_applicable_taxes,
)
from fiscal.config import DEFAULT_CONFIG, FiscalConfig
from fiscal.core.domain.line_item import DocumentTotals, LineItemInput, LineItemResult
from fiscal.core.domain.tax import TaxDefinition
from fiscal.core.domain.vat import VatCondition, to_issuer_category
from fiscal.core.domain.voucher import DocumentClass, VoucherDecision
from fiscal.core.math.money import round_money, sum_money
from fiscal.vouchers.catalog import VoucherDefinition, voucher_for_document
from fiscal.vouchers.determination import determine_voucher_type


# =============================================================================
# INPUT
# =============================================================================


class DocumentLine(BaseModel):
    """One line of a document, with the taxes assigned to its product."""

    quantity: Decimal = Field(..., ge=0, description="Quantity")
    unit_price: Decimal = Field(..., ge=0, description="Unit price (VAT included)")
    discount_percent: Decimal = Field(Decimal("0"), ge=0, le=100, description="Discount in percent")
    unit_cost: Decimal | None = Field(None, ge=0, description="Unit cost")
    product_taxes: tuple[TaxDefinition, ...] = Field(default_factory=tuple, description="Product taxes")
    tax_rate: Decimal | None = Field(None, ge=0, description="Explicit VAT rate override")

    model_config = {"frozen": True}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class LineCalculation:
    """Result of one document line."""

    item: LineItemResult
    vat_rate: Decimal

    # Pre-VAT amount every tax is computed on, discriminated or not
    tax_base: Decimal
    applicable_taxes: TaxApplicabilitySet
    taxes: TaxResolution


@dataclass(frozen=True)
class DocumentCalculation:
    """Result of a whole document."""

    decision: VoucherDecision
    voucher: VoucherDefinition
    lines: tuple[LineCalculation, ...]
    totals: DocumentTotals
    other_taxes_amount: Decimal

    @property
    def discriminate_vat(self) -> bool:
        return self.decision.discriminate_vat


# =============================================================================
# CALCULATOR
# =============================================================================


class FiscalDocumentCalculator:
    """Stateless calculator of fiscal documents.

    Holds only its configuration; safe to share between threads.
    """

    def __init__(self, config: FiscalConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def calculate(
        self,
        issuer_condition: VatCondition | str | None,
        customer_condition: VatCondition | str | None,
        lines: Sequence[DocumentLine],
        entity_taxes: Sequence[TaxDefinition] | None = None,
        document_class: DocumentClass | str = DocumentClass.INVOICE,
    ) -> DocumentCalculation:
        """Calculate a document.

        Args:
            issuer_condition: issuer VAT condition (missing → config default)
            customer_condition: customer VAT condition, None for a counter sale
            lines: document lines
            entity_taxes: taxes assigned to the counterparty, None if there is none
            document_class: invoice, credit note, debit note or quote

        Returns:
            DocumentCalculation

        Raises:
            ValueError: if the issuer condition is not RI, MT or EX
        """
        decision = determine_voucher_type(issuer_condition, customer_condition, self.config)
        voucher = voucher_for_document(decision.voucher_type, document_class)

        # The decision falls back on unknown issuers; tax filtering cannot
        category = to_issuer_category(decision.issuer_condition or issuer_condition)

        places = self.config.money_places
        calculated = []

        for line in lines:
            applicable = select_applicable_taxes(line.product_taxes, entity_taxes, category)
            vat_rate = self._vat_rate(line, applicable)

            line_input = LineItemInput(
                quantity=line.quantity,
                unit_price=line.unit_price,
                discount_percent=line.discount_percent,
                tax_rate=vat_rate,
                discriminate_vat=decision.discriminate_vat,
                unit_cost=line.unit_cost,
            )
            item = calculate_line_item(line_input, places)
            tax_base = calculate_pre_vat_amount(line_input, places)

            calculated.append(
                LineCalculation(
                    item=item,
                    vat_rate=vat_rate,
                    tax_base=tax_base,
                    applicable_taxes=applicable,
                    taxes=compute_tax_amounts(applicable, tax_base, places),
                )
            )

        totals = calculate_document_totals((c.item for c in calculated), places)
        other_taxes = round_money(
            sum_money(c.taxes.other_taxes_amount for c in calculated), places
        )

        return DocumentCalculation(
            decision=decision,
            voucher=voucher,
            lines=tuple(calculated),
            totals=totals,
            other_taxes_amount=other_taxes,
        )

    def _vat_rate(self, line: DocumentLine, applicable: TaxApplicabilitySet) -> Decimal:
        if line.tax_rate is not None:
            return line.tax_rate

        primary = applicable.primary_iva
        if primary is not None:
            return primary.rate

        return self.config.default_vat_rate
