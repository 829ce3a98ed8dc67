"""
TaxDefinition — Tax configured for a tenant

Immutable Pydantic model. Taxes are configured once per tenant and are
read-only during calculation; products and counterparties reference them
by id.

Rates are percentages (21 means 21%), not fractions.
"""

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from .vat import IssuerCategory


# =============================================================================
# ENUMS
# =============================================================================


class TaxType(str, Enum):
    """Tax type"""

    IVA = "IVA"
    PERCEPTION = "PERCEPTION"  # Withheld perceptions (IIBB, IVA)
    INTERNAL = "INTERNAL"  # Internal excise taxes
    OTHER = "OTHER"


class CalculationBase(str, Enum):
    """Base over which the tax is computed"""

    NET = "NET"
    TOTAL = "TOTAL"


# =============================================================================
# TAX MODEL
# =============================================================================


class TaxDefinition(BaseModel):
    """
    Tax configured for a tenant.

    applies_to lists the issuer categories for which the tax is applicable;
    a tax that does not list the issuer's category never applies.
    """

    id: str = Field(..., min_length=1, description="Tax identity")
    code: str = Field(..., min_length=1, max_length=20, description="Short code (e.g. 'IVA21')")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    rate: Decimal = Field(..., ge=0, description="Rate in percent (21 for 21%)")
    tax_type: TaxType = Field(..., description="Tax type")
    applies_to: frozenset[IssuerCategory] = Field(
        default_factory=frozenset, description="Issuer categories the tax applies to"
    )
    calculation_base: CalculationBase = Field(CalculationBase.NET, description="Calculation base")
    display_in_invoice: bool = Field(True, description="Shown on the printed voucher")
    description: str | None = Field(None, description="Free text")
    is_active: bool = Field(True, description="Inactive taxes are never applied")

    model_config = {"frozen": True}

    @field_validator("applies_to", mode="before")
    @classmethod
    def coerce_applies_to(cls, v: Any) -> Any:
        """Accept any iterable of category codes ("RI", "MT", "EX")"""
        if isinstance(v, (str, IssuerCategory)):
            return frozenset([v])
        return v

    @property
    def is_iva(self) -> bool:
        return self.tax_type == TaxType.IVA

    def applies_to_issuer(self, category: IssuerCategory) -> bool:
        return category in self.applies_to


# =============================================================================
# DEFAULT CATALOG
# =============================================================================


def default_tax_definitions() -> list[TaxDefinition]:
    """
    Standard Argentine taxes a new tenant starts with.

    Returns:
        IVA 0%, IVA 10.5%, IVA 21%, Percepción IIBB 3%, Percepción IVA 2%,
        all applicable to RI issuers only and computed over the net amount.
    """
    rows = [
        ("IVA0", "IVA 0%", "Sin IVA", "0", TaxType.IVA),
        ("IVA105", "IVA 10.5%", "IVA Reducido 10.5%", "10.5", TaxType.IVA),
        ("IVA21", "IVA 21%", "IVA General 21%", "21", TaxType.IVA),
        ("PERCIIBB", "Percepción IIBB", "Percepción de Ingresos Brutos", "3", TaxType.PERCEPTION),
        ("PERCIVA", "Percepción IVA", "Percepción de IVA", "2", TaxType.PERCEPTION),
    ]
    return [
        TaxDefinition(
            id=code,
            code=code,
            name=name,
            description=description,
            rate=Decimal(rate),
            tax_type=tax_type,
            applies_to=frozenset({IssuerCategory.RI}),
        )
        for code, name, description, rate, tax_type in rows
    ]
