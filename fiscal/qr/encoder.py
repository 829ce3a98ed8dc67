"""
Fiscal QR Payload Encoder

Builds the URL printed as a QR code on every electronically authorized
voucher:

    https://www.afip.gob.ar/fe/qr/?p=<base64(JSON)>

The JSON object has a fixed shape (format version 1):

    {"ver":1,"fecha":"2025-01-15","cuit":20123456789,"ptoVta":1,
     "tipoCmp":1,"nroCmp":123,"importe":150050,"moneda":"PES","ctz":1,
     "tipoDocRec":80,"nroDocRec":20987654321,"tipoCodAut":"E",
     "codAut":71234567890123}

- cuit / nroDocRec: digits only, as integers (nroDocRec 0 when absent)
- fecha: calendar date of the voucher, never shifted to UTC
- importe: amount * 100 rounded to an integer (1500.50 → 150050)
- JSON is compact (no spaces), UTF-8, standard base64

Callers must check can_generate_qr(cae, cuit) first and skip the QR when
it returns False; the encoder does not guard that precondition.
"""

import base64
import json
import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict
from urllib.parse import parse_qs, urlsplit

from fiscal.config import DEFAULT_CONFIG, FiscalConfig
from fiscal.core.contracts import validate_fiscal_qr_payload
from fiscal.core.domain.qr import FiscalQRInput
from fiscal.core.math.money import HUNDRED, to_decimal

# =============================================================================
# DOCUMENT TYPES
# =============================================================================

DOC_TYPE_CUIT = 80
DOC_TYPE_DNI = 96
DOC_TYPE_UNIDENTIFIED = 99

_NON_DIGITS = re.compile(r"\D")


def digits_only(value: str | None) -> str:
    """Strip every non-digit character ("20-12345678-9" → "20123456789")."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def infer_customer_doc_type(doc_number: str | None) -> int:
    """
    Receiver document type from the shape of the number.

    Returns:
        80 (CUIT) for 11 digits, 96 (DNI) for 7-8 digits, 99 otherwise
    """
    digits = digits_only(doc_number)
    if len(digits) == 11:
        return DOC_TYPE_CUIT
    if 7 <= len(digits) <= 8:
        return DOC_TYPE_DNI
    return DOC_TYPE_UNIDENTIFIED


# =============================================================================
# PRECONDITION
# =============================================================================


def can_generate_qr(cae: str | None, cuit: str | None) -> bool:
    """True if both the CAE and the issuer CUIT are present."""
    return bool(cae and cae.strip()) and bool(cuit and cuit.strip())


# =============================================================================
# ENCODER
# =============================================================================


def format_qr_date(value: date) -> str:
    """YYYY-MM-DD from the calendar components (datetimes are not converted)."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def amount_to_minor_units(amount: Decimal | int | float | str) -> int:
    """
    Integer amount in cents, rounded half-up.

    Examples:
        >>> amount_to_minor_units("1500.50")
        150050
        >>> amount_to_minor_units(0.125)
        13
    """
    cents = to_decimal(amount) * HUNDRED
    return int(cents.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def build_fiscal_qr_payload(
    data: FiscalQRInput,
    config: FiscalConfig | None = None,
) -> Dict[str, Any]:
    """
    QR payload as an ordered dict with the authority's key names.

    Args:
        data: Voucher data
        config: Fiscal configuration (version, currency, exchange rate...)

    Returns:
        Dict with keys ver, fecha, cuit, ptoVta, tipoCmp, nroCmp, importe,
        moneda, ctz, tipoDocRec, nroDocRec, tipoCodAut, codAut (in that order)

    Raises:
        jsonschema.ValidationError: If config.validate_qr_payload is set and
            the payload does not match the contract
    """
    config = config or DEFAULT_CONFIG

    customer_doc = digits_only(data.customer_doc_number)

    payload: Dict[str, Any] = {
        "ver": config.qr_version,
        "fecha": format_qr_date(data.document_date),
        "cuit": int(digits_only(data.cuit)),
        "ptoVta": data.sales_point_number,
        "tipoCmp": data.voucher_type_code,
        "nroCmp": data.voucher_number,
        "importe": amount_to_minor_units(data.amount),
        "moneda": config.qr_currency,
        "ctz": config.qr_exchange_rate,
        "tipoDocRec": data.customer_doc_type,
        "nroDocRec": int(customer_doc) if customer_doc else 0,
        "tipoCodAut": config.qr_auth_code_type,
        "codAut": int(data.cae.strip()),
    }

    if config.validate_qr_payload:
        validate_fiscal_qr_payload(payload)

    return payload


def encode_fiscal_qr_payload(payload: Dict[str, Any]) -> str:
    """Compact JSON → UTF-8 → base64."""
    json_string = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    return base64.b64encode(json_string.encode("utf-8")).decode("ascii")


def build_fiscal_qr_url(
    data: FiscalQRInput,
    config: FiscalConfig | None = None,
) -> str:
    """
    URL to print as the voucher's QR code.

    Examples:
        cuit "20-12345678-9", amount 1500.50 → the decoded payload has
        "cuit": 20123456789 and "importe": 150050
    """
    config = config or DEFAULT_CONFIG
    payload = build_fiscal_qr_payload(data, config)
    return f"{config.qr_base_url}?p={encode_fiscal_qr_payload(payload)}"


def decode_fiscal_qr_url(url: str) -> Dict[str, Any]:
    """
    Decode the payload of a QR URL (inverse of build_fiscal_qr_url).

    Raises:
        ValueError: If the URL has no p parameter
    """
    query = urlsplit(url).query
    # base64 may contain '+', which parse_qs would turn into a space
    params = parse_qs(query.replace("+", "%2B"))
    if "p" not in params:
        raise ValueError(f"QR URL has no p parameter: {url}")
    raw = base64.b64decode(params["p"][0])
    return json.loads(raw.decode("utf-8"))

