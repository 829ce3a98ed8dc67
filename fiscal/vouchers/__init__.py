"""Vouchers — type determination table and voucher catalog."""

from .catalog import (
    VOUCHER_CATALOG,
    UnknownVoucherError,
    VoucherDefinition,
    format_voucher_number,
    get_voucher_definition,
    letter_of,
    parse_voucher_number,
    voucher_for_document,
)
from .determination import VOUCHER_TYPE_RULES, determine_voucher_type

__all__ = [
    "VOUCHER_TYPE_RULES",
    "determine_voucher_type",
    "VOUCHER_CATALOG",
    "VoucherDefinition",
    "UnknownVoucherError",
    "get_voucher_definition",
    "voucher_for_document",
    "letter_of",
    "format_voucher_number",
    "parse_voucher_number",
]
