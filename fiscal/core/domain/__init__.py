"""
Domain models and value objects.

VAT conditions, tax definitions, line items, vouchers and QR input.
"""

from fiscal.core.domain.line_item import DocumentTotals, LineItemInput, LineItemResult
from fiscal.core.domain.qr import FiscalQRInput
from fiscal.core.domain.tax import (
    CalculationBase,
    TaxDefinition,
    TaxType,
    default_tax_definitions,
)
from fiscal.core.domain.vat import (
    CUSTOMER_CONDITIONS,
    ISSUER_CONDITIONS,
    IssuerCategory,
    VatCondition,
    coerce_vat_condition,
    to_issuer_category,
)
from fiscal.core.domain.voucher import (
    DocumentClass,
    VoucherDecision,
    VoucherType,
    VoucherTypeRule,
)

__all__ = [
    # VAT conditions
    "VatCondition",
    "IssuerCategory",
    "ISSUER_CONDITIONS",
    "CUSTOMER_CONDITIONS",
    "coerce_vat_condition",
    "to_issuer_category",
    # Taxes
    "TaxDefinition",
    "TaxType",
    "CalculationBase",
    "default_tax_definitions",
    # Line items
    "LineItemInput",
    "LineItemResult",
    "DocumentTotals",
    # Vouchers
    "VoucherType",
    "DocumentClass",
    "VoucherTypeRule",
    "VoucherDecision",
    # QR
    "FiscalQRInput",
]
