from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Union

from pydantic import BaseModel, Field

from .constants import Currency


@dataclass(frozen=True)
class ProjectInputs:
    """Snapshot of the form taken on each calculate action."""

    price_raw: str
    cost_raw: str
    hours: Union[str, float, int]
    currency: Currency = Currency.BRL


@dataclass(frozen=True)
class ProjectFigures:
    price: float
    cost: float
    profit: float
    currency: Currency
    rate: float

    def as_dict(self) -> Dict[str, Union[float, str]]:
        return {
            "price": self.price,
            "cost": self.cost,
            "profit": self.profit,
            "currency": self.currency.value,
            "rate": self.rate,
        }


class CalculationIn(BaseModel):
    price_per_hour: str = Field("", description="Price per hour, decimal comma (e.g. '50,50')")
    cost_per_hour: str = Field("", description="Cost per hour, decimal comma (e.g. '15,50')")
    hours: Union[float, str] = Field(0, description="Number of hours; invalid input counts as 0")
    currency: Currency = Currency.BRL

    def to_inputs(self) -> ProjectInputs:
        return ProjectInputs(
            price_raw=self.price_per_hour,
            cost_raw=self.cost_per_hour,
            hours=self.hours,
            currency=self.currency,
        )


class FormattedFigures(BaseModel):
    price: str
    cost: str
    profit: str


class CalculationOut(BaseModel):
    currency: Currency
    rate: float
    price: float
    cost: float
    profit: float
    formatted: FormattedFigures
    notice: str | None = None
