"""
FiscalQRInput — Data printed in the tax authority's QR code

Immutable Pydantic model holding the voucher identifiers, amount and CAE
needed to build the QR URL. CUIT and document numbers may contain
separators ("20-12345678-9"); the encoder strips them.
"""

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class FiscalQRInput(BaseModel):
    """
    QR code input for one authorized voucher.

    Every field is required except customer_doc_number, which means
    "no document" (encoded as 0) when absent.
    """

    cuit: str = Field(..., description="Issuer CUIT, separators allowed")
    voucher_type_code: int = Field(..., ge=1, description="Authority voucher type code (1=FA, 6=FB, 11=FC...)")
    sales_point_number: int = Field(..., ge=1, le=99999, description="Sales point number")
    voucher_number: int = Field(..., ge=1, description="Voucher number")
    amount: Decimal = Field(..., ge=0, description="Voucher total with decimals")
    document_date: datetime | date = Field(..., description="Voucher date (calendar date is used)")
    customer_doc_type: int = Field(..., description="Receiver document type (80=CUIT, 96=DNI, 99=none)")
    customer_doc_number: str | None = Field(None, description="Receiver document number")
    cae: str = Field(..., description="Electronic authorization code")

    model_config = {"frozen": True}
