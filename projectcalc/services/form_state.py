"""Mutable state of the calculator form.

The form owns everything the user can change between two calculations. The
calculation core only ever sees the immutable snapshot from ``to_inputs``.
Two hour widgets exist: a slider that only commits whole hours inside
``[hours_min, hours_max]`` and a free text field parsed at calculation time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from projectcalc.models.constants import Currency
from projectcalc.models.figures import ProjectInputs

HOURS_MIN = 1
HOURS_MAX = 160


@dataclass
class FormState:
    price_raw: str = "50,50"
    cost_raw: str = "15,50"
    hours: Union[int, str] = HOURS_MIN
    currency: Currency = Currency.BRL
    hours_input: str = "slider"
    hours_min: int = HOURS_MIN
    hours_max: int = HOURS_MAX

    def set_hours(self, value: Union[str, float, int, None]) -> bool:
        """Commit a new hours value; returns False if it was ignored.

        In slider mode values outside the range, fractional values and
        garbage leave the previous value untouched.
        """
        if self.hours_input == "text":
            self.hours = "" if value is None else str(value).strip()
            return True
        candidate = _whole_number(value)
        if candidate is None or not (self.hours_min <= candidate <= self.hours_max):
            return False
        self.hours = candidate
        return True

    def select_currency(self, code: Union[Currency, str]) -> bool:
        if isinstance(code, Currency):
            self.currency = code
            return True
        try:
            self.currency = Currency(str(code).strip().upper())
        except ValueError:
            return False
        return True

    def to_inputs(self) -> ProjectInputs:
        return ProjectInputs(
            price_raw=self.price_raw,
            cost_raw=self.cost_raw,
            hours=self.hours,
            currency=self.currency,
        )


def _whole_number(value: Union[str, float, int, None]) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not math.isfinite(value) or value != int(value):
        return None
    return int(value)
