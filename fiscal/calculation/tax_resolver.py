"""
Tax-Applicability Resolver

Decides which of a product's taxes apply to a transaction and computes
their amounts over the line's net amount.

Rules:
1. Counterparty with >= 1 assigned tax → intersection (by tax id) of
   product taxes and counterparty taxes: a tax must be on BOTH sides
2. No counterparty, or counterparty without taxes → all product taxes
3. Only taxes whose applies_to contains the issuer category survive
4. Exactly one IVA is applied: the highest rate (first one on a tie);
   any extra IVA is a configuration anomaly, ignored and logged
5. Every tax is computed on the net amount (no tax-on-tax)
6. total = iva + sum(other taxes), summed unrounded and rounded once;
   it can differ by a cent from the sum of the displayed amounts

Inactive taxes never apply. Absence of applicable taxes is a valid
zero-tax result, not an error.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence

from fiscal.core.domain.tax import TaxDefinition, TaxType
from fiscal.core.domain.vat import IssuerCategory, VatCondition, to_issuer_category
from fiscal.core.math.money import (
    MONEY_PLACES,
    ZERO,
    NumberLike,
    percent_of,
    round_money,
    sum_money,
)

logger = logging.getLogger(__name__)


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class TaxApplicabilitySet:
    """Taxes that apply to one line, in product order."""

    taxes: tuple[TaxDefinition, ...]
    issuer_category: IssuerCategory

    # True when the counterparty intersection was used, False on product-only fallback
    used_entity_intersection: bool

    @property
    def iva_taxes(self) -> tuple[TaxDefinition, ...]:
        return tuple(t for t in self.taxes if t.tax_type == TaxType.IVA)

    @property
    def other_taxes(self) -> tuple[TaxDefinition, ...]:
        return tuple(t for t in self.taxes if t.tax_type != TaxType.IVA)

    @property
    def primary_iva(self) -> TaxDefinition | None:
        """Highest-rate IVA; the first one wins a tie."""
        return _pick_primary_iva(self.iva_taxes)


@dataclass(frozen=True)
class AppliedTax:
    """A non-IVA tax computed for one line."""

    tax_id: str
    code: str
    name: str
    rate: Decimal
    amount: Decimal
    tax_type: TaxType


@dataclass(frozen=True)
class TaxResolution:
    """Effective taxes of one line."""

    iva_rate: Decimal
    iva_amount: Decimal
    other_taxes: tuple[AppliedTax, ...]
    total_tax_amount: Decimal

    iva_tax_id: str | None = None
    ignored_iva_tax_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def other_taxes_amount(self) -> Decimal:
        return sum_money(t.amount for t in self.other_taxes)


# =============================================================================
# RESOLVER
# =============================================================================


def select_applicable_taxes(
    product_taxes: Sequence[TaxDefinition],
    entity_taxes: Sequence[TaxDefinition] | None,
    issuer: IssuerCategory | VatCondition | str,
) -> TaxApplicabilitySet:
    """
    Filter a product's taxes down to the ones that apply (rules 1-3).

    Args:
        product_taxes: Taxes assigned to the product
        entity_taxes: Taxes assigned to the counterparty, None if there is none
        issuer: Issuer VAT category (RI, MT or EX)

    Returns:
        TaxApplicabilitySet

    Raises:
        ValueError: If issuer is not RI, MT or EX
    """
    category = to_issuer_category(issuer)

    product_active = [t for t in product_taxes if t.is_active]
    entity_active = [t for t in entity_taxes or () if t.is_active]

    if entity_active:
        entity_ids = {t.id for t in entity_active}
        applicable = [t for t in product_active if t.id in entity_ids]
        used_intersection = True
    else:
        applicable = product_active
        used_intersection = False

    return TaxApplicabilitySet(
        taxes=tuple(t for t in applicable if t.applies_to_issuer(category)),
        issuer_category=category,
        used_entity_intersection=used_intersection,
    )


def resolve_applicable_taxes(
    product_taxes: Sequence[TaxDefinition],
    entity_taxes: Sequence[TaxDefinition] | None,
    issuer: IssuerCategory | VatCondition | str,
    net_amount: NumberLike,
    places: int = MONEY_PLACES,
) -> TaxResolution:
    """
    Compute the effective taxes of a line (rules 1-6).

    Args:
        product_taxes: Taxes assigned to the product
        entity_taxes: Taxes assigned to the counterparty, None if there is none
        issuer: Issuer VAT category (RI, MT or EX)
        net_amount: Net (pre-VAT) line amount every tax is computed on
        places: Decimal places of the returned amounts

    Returns:
        TaxResolution with amounts rounded to `places`

    Examples:
        IVA 21% + Percepción IIBB 3% over a net of 100.00:
        iva_amount=21.00, other_taxes=[3.00], total_tax_amount=24.00
    """
    applicable = select_applicable_taxes(product_taxes, entity_taxes, issuer)
    return compute_tax_amounts(applicable, net_amount, places)


def compute_tax_amounts(
    applicable: TaxApplicabilitySet,
    net_amount: NumberLike,
    places: int = MONEY_PLACES,
) -> TaxResolution:
    """Amounts of an already selected tax set over a net amount (rules 4-6)."""
    iva_taxes = applicable.iva_taxes
    primary = _pick_primary_iva(iva_taxes)

    iva_rate = ZERO
    iva_amount = ZERO
    ignored: tuple[str, ...] = ()

    if primary is not None:
        iva_rate = primary.rate
        iva_amount = percent_of(net_amount, iva_rate)
        ignored = tuple(t.id for t in iva_taxes if t is not primary)

        if ignored:
            logger.warning(
                "Multiple IVA taxes applicable, using highest rate %s (%s); ignoring %s",
                primary.rate,
                primary.code,
                ", ".join(ignored),
                extra={
                    "primary_iva_tax_id": primary.id,
                    "ignored_iva_tax_ids": list(ignored),
                },
            )

    other_exact = [(tax, percent_of(net_amount, tax.rate)) for tax in applicable.other_taxes]
    other_taxes = tuple(
        AppliedTax(
            tax_id=tax.id,
            code=tax.code,
            name=tax.name,
            rate=tax.rate,
            amount=round_money(amount, places),
            tax_type=tax.tax_type,
        )
        for tax, amount in other_exact
    )

    # Exact amounts, rounded once
    total = iva_amount + sum_money(amount for _, amount in other_exact)

    return TaxResolution(
        iva_rate=iva_rate,
        iva_amount=round_money(iva_amount, places),
        other_taxes=other_taxes,
        total_tax_amount=round_money(total, places),
        iva_tax_id=primary.id if primary is not None else None,
        ignored_iva_tax_ids=ignored,
    )


def _pick_primary_iva(iva_taxes: Sequence[TaxDefinition]) -> TaxDefinition | None:
    primary = None
    for tax in iva_taxes:
        if primary is None or tax.rate > primary.rate:
            primary = tax
    return primary
