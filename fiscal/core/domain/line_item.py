"""
Line items — Inputs and results of the line-item tax calculator

LineItemInput is an immutable Pydantic model (validated at the boundary);
LineItemResult and DocumentTotals are frozen dataclasses produced by
fiscal.calculation.line_items.

Prices are VAT-inclusive. With discriminated VAT (Factura A) the VAT is
unbundled from the price; otherwise it stays bundled and is not shown.
"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel, Field


# =============================================================================
# INPUT
# =============================================================================


class LineItemInput(BaseModel):
    """
    One sale/purchase line to be calculated.

    Immutable (frozen=True), constructed fresh per calculation call.
    """

    quantity: Decimal = Field(..., ge=0, description="Quantity")
    unit_price: Decimal = Field(..., ge=0, description="Unit price (VAT included)")
    discount_percent: Decimal = Field(
        Decimal("0"), ge=0, le=100, description="Line discount in percent"
    )
    tax_rate: Decimal = Field(Decimal("0"), ge=0, description="VAT rate in percent")
    discriminate_vat: bool = Field(..., description="Unbundle VAT from the price")
    unit_cost: Decimal | None = Field(None, ge=0, description="Unit cost, if known")

    model_config = {"frozen": True}


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class LineItemResult:
    """
    Result of one line calculation. Every amount is rounded to 2 places.

    line_total == subtotal - discount_amount always;
    line_total == net_amount + tax_amount when VAT is discriminated;
    tax_amount == 0 and line_total == net_amount otherwise.
    """

    subtotal: Decimal
    discount_amount: Decimal
    net_amount: Decimal
    tax_amount: Decimal
    line_total: Decimal

    total_cost: Decimal | None = None

    # Only set when VAT is discriminated
    display_net_price: Decimal | None = None
    display_tax_amount: Decimal | None = None

    @property
    def is_vat_discriminated(self) -> bool:
        return self.display_net_price is not None


@dataclass(frozen=True)
class DocumentTotals:
    """Totals of a document, summed over line results and rounded once."""

    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    total_amount: Decimal
