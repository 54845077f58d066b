"""Domain models for the project price calculator."""

from .constants import (
    Currency,
    BASE_CURRENCY,
    FOREIGN_CURRENCIES,
    CURRENCY_FORMATS,
)  # re-export
from .figures import (
    ProjectInputs,
    ProjectFigures,
    CalculationIn,
    CalculationOut,
    FormattedFigures,
)

__all__ = [
    "Currency",
    "BASE_CURRENCY",
    "FOREIGN_CURRENCIES",
    "CURRENCY_FORMATS",
    "ProjectInputs",
    "ProjectFigures",
    "CalculationIn",
    "CalculationOut",
    "FormattedFigures",
]
