"""
Contract Validation Module

JSON Schema validation of the payloads the fiscal engine emits.
"""

from .validators import (
    QR_PAYLOAD_SCHEMA,
    SCHEMA_DIR,
    ContractValidator,
    fiscal_qr_payload_validator,
    load_schema,
    validate_fiscal_qr_payload,
)

__all__ = [
    "SCHEMA_DIR",
    "QR_PAYLOAD_SCHEMA",
    "ContractValidator",
    "load_schema",
    "fiscal_qr_payload_validator",
    "validate_fiscal_qr_payload",
]
