"""Documents — end-to-end calculation of a fiscal document."""

from .calculator import (
    DocumentCalculation,
    DocumentLine,
    FiscalDocumentCalculator,
    LineCalculation,
)

__all__ = [
    "FiscalDocumentCalculator",
    "DocumentLine",
    "DocumentCalculation",
    "LineCalculation",
]
