"""
Voucher — Legal voucher types and determination rules

VoucherType is the outcome of the determination table (Factura A/B/C);
DocumentClass selects the concrete voucher within a letter (invoice,
credit note, debit note, quote).
"""

from dataclasses import dataclass
from enum import Enum

from .vat import VatCondition


# =============================================================================
# ENUMS
# =============================================================================


class VoucherType(str, Enum):
    """Invoice type from the determination table"""

    FC_A = "FC_A"  # Factura A: VAT discriminated
    FC_B = "FC_B"  # Factura B: VAT included, not shown
    FC_C = "FC_C"  # Factura C: issuer not registered for VAT

    @property
    def letter(self) -> str:
        return self.value[-1]


class DocumentClass(str, Enum):
    """Document class"""

    INVOICE = "INVOICE"
    CREDIT_NOTE = "CREDIT_NOTE"
    DEBIT_NOTE = "DEBIT_NOTE"
    QUOTE = "QUOTE"


# =============================================================================
# RULES AND DECISIONS
# =============================================================================


@dataclass(frozen=True)
class VoucherTypeRule:
    """One row of the voucher determination table.

    customer_condition None means "no customer" (counter sale).
    """

    issuer_condition: VatCondition
    customer_condition: VatCondition | None
    voucher_type: VoucherType
    discriminate_vat: bool


@dataclass(frozen=True)
class VoucherDecision:
    """Result of the voucher determination.

    is_fallback is True when the (issuer, customer) pair was not in the
    table and the configured default was used instead.
    """

    voucher_type: VoucherType
    discriminate_vat: bool
    is_fallback: bool

    # Normalized inputs (None when not recognized)
    issuer_condition: VatCondition | None
    customer_condition: VatCondition | None

    details: str
