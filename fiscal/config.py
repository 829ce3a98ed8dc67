"""Fiscal engine configuration.

Constants of the Argentine invoicing rules that callers may need to
override (tests, sandbox environments, a changed authority URL). All
components accept an optional FiscalConfig and fall back to DEFAULT_CONFIG.
"""

from dataclasses import dataclass
from decimal import Decimal

from fiscal.core.domain.vat import VatCondition
from fiscal.core.domain.voucher import VoucherType


@dataclass(frozen=True)
class FiscalConfig:
    """Fiscal engine configuration."""

    # Money
    money_places: int = 2
    default_vat_rate: Decimal = Decimal("21")  # IVA general

    # Voucher determination
    default_issuer_condition: VatCondition = VatCondition.RESPONSABLE_INSCRIPTO
    fallback_voucher_type: VoucherType = VoucherType.FC_B
    fallback_discriminate_vat: bool = False

    # QR code (authority format, version 1)
    qr_base_url: str = "https://www.afip.gob.ar/fe/qr/"
    qr_version: int = 1
    qr_currency: str = "PES"
    qr_exchange_rate: int = 1
    qr_auth_code_type: str = "E"  # E = CAE, A = CAEA
    validate_qr_payload: bool = True


DEFAULT_CONFIG = FiscalConfig()
