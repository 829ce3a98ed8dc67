"""Calculators — line items, tax applicability, payments."""

from .line_items import calculate_document_totals, calculate_line_item, calculate_pre_vat_amount
from .payments import PaymentStatus, calculate_payment_status, validate_payments
from .tax_resolver import (
    AppliedTax,
    TaxApplicabilitySet,
    TaxResolution,
    compute_tax_amounts,
    resolve_applicable_taxes,
    select_applicable_taxes,
)

__all__ = [
    "calculate_line_item",
    "calculate_document_totals",
    "calculate_pre_vat_amount",
    "select_applicable_taxes",
    "resolve_applicable_taxes",
    "compute_tax_amounts",
    "TaxApplicabilitySet",
    "TaxResolution",
    "AppliedTax",
    "PaymentStatus",
    "validate_payments",
    "calculate_payment_status",
]
