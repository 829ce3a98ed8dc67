"""Fiscal QR — payload of the tax authority's voucher QR code."""

from .encoder import (
    DOC_TYPE_CUIT,
    DOC_TYPE_DNI,
    DOC_TYPE_UNIDENTIFIED,
    amount_to_minor_units,
    build_fiscal_qr_payload,
    build_fiscal_qr_url,
    can_generate_qr,
    decode_fiscal_qr_url,
    digits_only,
    encode_fiscal_qr_payload,
    format_qr_date,
    infer_customer_doc_type,
)

__all__ = [
    "DOC_TYPE_CUIT",
    "DOC_TYPE_DNI",
    "DOC_TYPE_UNIDENTIFIED",
    "can_generate_qr",
    "build_fiscal_qr_payload",
    "encode_fiscal_qr_payload",
    "build_fiscal_qr_url",
    "decode_fiscal_qr_url",
    "infer_customer_doc_type",
    "digits_only",
    "format_qr_date",
    "amount_to_minor_units",
]
