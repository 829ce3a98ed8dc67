"""
VatCondition — VAT registration categories

Registration category of a party with the tax authority. The issuer's
category decides which taxes apply (IssuerCategory) and, together with
the customer's, which legal voucher is issued.
"""

from enum import Enum
from typing import Final

# =============================================================================
# ENUMS
# =============================================================================


class VatCondition(str, Enum):
    """VAT registration condition of a party"""

    RESPONSABLE_INSCRIPTO = "RESPONSABLE_INSCRIPTO"
    MONOTRIBUTO = "MONOTRIBUTO"
    EXENTO = "EXENTO"
    CONSUMIDOR_FINAL = "CONSUMIDOR_FINAL"
    NO_RESPONSABLE = "NO_RESPONSABLE"

    @property
    def code(self) -> str:
        """Short code (RI, MT, EX, CF, NR)"""
        return _SHORT_CODES[self]

    @property
    def afip_code(self) -> int:
        """Receiver VAT condition code used by the electronic invoicing service"""
        return _AFIP_CODES[self]

    @property
    def can_issue(self) -> bool:
        """True if a party in this condition can issue fiscal vouchers"""
        return self in ISSUER_CONDITIONS


class IssuerCategory(str, Enum):
    """Categories a tax can be configured to apply to"""

    RI = "RI"
    MT = "MT"
    EX = "EX"


# =============================================================================
# LOOKUP TABLES
# =============================================================================

_SHORT_CODES: Final[dict] = {
    VatCondition.RESPONSABLE_INSCRIPTO: "RI",
    VatCondition.MONOTRIBUTO: "MT",
    VatCondition.EXENTO: "EX",
    VatCondition.CONSUMIDOR_FINAL: "CF",
    VatCondition.NO_RESPONSABLE: "NR",
}

_AFIP_CODES: Final[dict] = {
    VatCondition.RESPONSABLE_INSCRIPTO: 1,
    VatCondition.EXENTO: 4,
    VatCondition.CONSUMIDOR_FINAL: 5,
    VatCondition.MONOTRIBUTO: 6,
    VatCondition.NO_RESPONSABLE: 7,
}

_BY_SHORT_CODE: Final[dict] = {code: cond for cond, code in _SHORT_CODES.items()}

# Conditions allowed on the issuing side
ISSUER_CONDITIONS: Final[tuple] = (
    VatCondition.RESPONSABLE_INSCRIPTO,
    VatCondition.MONOTRIBUTO,
    VatCondition.EXENTO,
)

# Conditions covered by the voucher determination table on the customer side
CUSTOMER_CONDITIONS: Final[tuple] = (
    VatCondition.RESPONSABLE_INSCRIPTO,
    VatCondition.MONOTRIBUTO,
    VatCondition.CONSUMIDOR_FINAL,
    VatCondition.EXENTO,
)


# =============================================================================
# CONVERTERS
# =============================================================================


def coerce_vat_condition(value: "VatCondition | str | None") -> VatCondition | None:
    """
    Normalize a VAT condition given as enum, full name or short code.

    Args:
        value: VatCondition, "RESPONSABLE_INSCRIPTO", "ri", "MT", None...

    Returns:
        VatCondition, or None if value is empty or not recognized

    Examples:
        >>> coerce_vat_condition("RI")
        <VatCondition.RESPONSABLE_INSCRIPTO: 'RESPONSABLE_INSCRIPTO'>
        >>> coerce_vat_condition("unknown") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, VatCondition):
        return value

    normalized = str(value).strip().upper()
    if not normalized:
        return None

    if normalized in _BY_SHORT_CODE:
        return _BY_SHORT_CODE[normalized]

    try:
        return VatCondition(normalized)
    except ValueError:
        return None


def to_issuer_category(value: "IssuerCategory | VatCondition | str") -> IssuerCategory:
    """
    Issuer category for tax applicability filtering.

    Raises:
        ValueError: If value does not denote RI, MT or EX
    """
    if isinstance(value, IssuerCategory):
        return value

    condition = coerce_vat_condition(value)
    if condition is None or condition not in ISSUER_CONDITIONS:
        raise ValueError(f"not an issuer VAT category: {value!r} (expected RI, MT or EX)")

    return IssuerCategory(condition.code)
