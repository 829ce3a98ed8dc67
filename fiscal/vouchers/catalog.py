"""Voucher catalog.

Concrete voucher types (Factura, Nota de Crédito, Nota de Débito,
Presupuesto) with their authority codes, and the numbering format
"PPPPP-NNNNNNNN" printed on every voucher.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from fiscal.core.domain.voucher import DocumentClass, VoucherType


class UnknownVoucherError(KeyError):
    """Voucher code not present in the catalog."""


@dataclass(frozen=True)
class VoucherDefinition:
    """Concrete voucher type (Factura A, Nota de Crédito B, ...)."""

    code: str
    name: str
    letter: str
    document_class: DocumentClass
    afip_code: int | None  # None: not reported to the authority
    requires_cae: bool
    discriminates_vat: bool


_DEFINITIONS: tuple[VoucherDefinition, ...] = (
    VoucherDefinition("FA", "Factura A", "A", DocumentClass.INVOICE, 1, True, True),
    VoucherDefinition("FB", "Factura B", "B", DocumentClass.INVOICE, 6, True, False),
    VoucherDefinition("FC", "Factura C", "C", DocumentClass.INVOICE, 11, True, False),
    VoucherDefinition("NCA", "Nota de Crédito A", "A", DocumentClass.CREDIT_NOTE, 3, True, True),
    VoucherDefinition("NCB", "Nota de Crédito B", "B", DocumentClass.CREDIT_NOTE, 8, True, False),
    VoucherDefinition("NCC", "Nota de Crédito C", "C", DocumentClass.CREDIT_NOTE, 13, True, False),
    VoucherDefinition("NDA", "Nota de Débito A", "A", DocumentClass.DEBIT_NOTE, 2, True, True),
    VoucherDefinition("NDB", "Nota de Débito B", "B", DocumentClass.DEBIT_NOTE, 7, True, False),
    VoucherDefinition("NDC", "Nota de Débito C", "C", DocumentClass.DEBIT_NOTE, 12, True, False),
    VoucherDefinition("PR", "Presupuesto", "X", DocumentClass.QUOTE, None, False, False),
)

VOUCHER_CATALOG: Mapping[str, VoucherDefinition] = MappingProxyType(
    {d.code: d for d in _DEFINITIONS}
)

_CODE_PREFIX = {
    DocumentClass.INVOICE: "F",
    DocumentClass.CREDIT_NOTE: "NC",
    DocumentClass.DEBIT_NOTE: "ND",
}

QUOTE_CODE = "PR"


def get_voucher_definition(code: str) -> VoucherDefinition:
    """
    Raises:
        UnknownVoucherError: If the code is not in the catalog
    """
    try:
        return VOUCHER_CATALOG[code.strip().upper()]
    except KeyError:
        raise UnknownVoucherError(code) from None


def letter_of(voucher_type: VoucherType | str) -> str:
    """Letter (A, B, C) of a determined voucher type."""
    return VoucherType(voucher_type).letter


def voucher_for_document(
    voucher_type: VoucherType | str,
    document_class: DocumentClass | str = DocumentClass.INVOICE,
) -> VoucherDefinition:
    """
    Concrete voucher for a determined type and a document class.

    Examples:
        FC_A + CREDIT_NOTE → NCA (authority code 3)
        FC_B + INVOICE → FB (authority code 6)
        any + QUOTE → PR
    """
    document_class = DocumentClass(document_class)

    if document_class == DocumentClass.QUOTE:
        return VOUCHER_CATALOG[QUOTE_CODE]

    code = f"{_CODE_PREFIX[document_class]}{letter_of(voucher_type)}"
    return get_voucher_definition(code)


# =============================================================================
# NUMBERING
# =============================================================================


def format_voucher_number(sales_point: int, number: int) -> str:
    """
    Printed voucher number: 5-digit sales point, 8-digit sequence.

    Examples:
        >>> format_voucher_number(1, 123)
        '00001-00000123'
    """
    if sales_point < 0 or number < 0:
        raise ValueError(f"sales point and number must be non-negative, got {sales_point}, {number}")
    return f"{sales_point:05d}-{number:08d}"


def parse_voucher_number(formatted: str) -> tuple[int, int]:
    """
    Inverse of format_voucher_number.

    Raises:
        ValueError: If the string is not "<digits>-<digits>"
    """
    parts = formatted.strip().split("-")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"malformed voucher number: {formatted!r}")
    return int(parts[0]), int(parts[1])
