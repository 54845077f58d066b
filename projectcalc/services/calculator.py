"""Project figures: price, cost and net profit for an hourly engagement.

All inputs are taken in BRL. The selected currency only changes the
multiplier applied at the end; a foreign currency whose rate is not known
yields ``None`` instead of a misleading figure.
"""

from __future__ import annotations

from typing import Dict, Optional, Union

from projectcalc.models.constants import Currency
from projectcalc.models.figures import ProjectFigures, ProjectInputs
from projectcalc.services.money import format_currency
from projectcalc.services.parsing import parse_amount, parse_hours
from projectcalc.services.rates.base import SupportsRateLookup


def compute(
    price_raw: str,
    cost_raw: str,
    hours: Union[str, float, int, None],
    currency: Union[Currency, str],
    rate_provider: SupportsRateLookup,
) -> Optional[ProjectFigures]:
    currency = Currency(currency)
    hours_num = parse_hours(hours)

    price_brl = parse_amount(price_raw) * hours_num
    cost_brl = parse_amount(cost_raw) * hours_num
    profit_brl = price_brl - cost_brl

    rate = rate_provider.get_rate(currency)
    if rate is None:
        return None
    return ProjectFigures(
        price=price_brl * rate,
        cost=cost_brl * rate,
        profit=profit_brl * rate,
        currency=currency,
        rate=rate,
    )


def compute_inputs(
    inputs: ProjectInputs, rate_provider: SupportsRateLookup
) -> Optional[ProjectFigures]:
    return compute(
        inputs.price_raw, inputs.cost_raw, inputs.hours, inputs.currency, rate_provider
    )


def format_figures(figures: ProjectFigures) -> Dict[str, str]:
    return {
        "price": format_currency(figures.price, figures.currency),
        "cost": format_currency(figures.cost, figures.currency),
        "profit": format_currency(figures.profit, figures.currency),
    }
