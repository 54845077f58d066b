"""Calculator API.

Endpoints:
    - POST /api/calculate   -> figures for {price_per_hour, cost_per_hour, hours, currency}
    - GET  /api/rates       -> provider kind, loading status and known rates
    - GET  /api/currencies  -> supported currencies with display locale

A foreign currency requested before its rate is known answers 503
(error 'rates_unavailable') rather than a zero result.
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request

from projectcalc.core.errors import RatesUnavailableError
from projectcalc.models.constants import Currency, CURRENCY_FORMATS
from projectcalc.models.figures import CalculationIn, CalculationOut, FormattedFigures
from projectcalc.services.calculator import compute_inputs, format_figures
from projectcalc.services.rates.base import RateProvider

router = APIRouter(prefix="/api", tags=["calculator"])


def get_rate_provider(request: Request) -> RateProvider:
    return request.app.state.rate_provider


@router.post("/calculate", response_model=CalculationOut, summary="Compute project figures")
async def calculate(
    payload: CalculationIn,
    provider: RateProvider = Depends(get_rate_provider),
):
    figures = compute_inputs(payload.to_inputs(), provider)
    if figures is None:
        raise RatesUnavailableError(payload.currency.value, provider.status)
    return CalculationOut(
        currency=figures.currency,
        rate=figures.rate,
        price=figures.price,
        cost=figures.cost,
        profit=figures.profit,
        formatted=FormattedFigures(**format_figures(figures)),
        notice=provider.describe(figures.currency),
    )


@router.get("/rates", summary="Exchange rate status")
async def rates(provider: RateProvider = Depends(get_rate_provider)) -> Dict[str, Any]:
    return {
        "provider": provider.kind,
        "status": provider.status,
        "base": provider.base_currency.value,
        "rates": {c.value: r for c, r in provider.rates().items()},
    }


@router.get("/currencies", summary="Supported currencies")
async def currencies() -> List[Dict[str, str]]:
    return [
        {"code": c.value, "locale": CURRENCY_FORMATS[c].locale, "symbol": CURRENCY_FORMATS[c].symbol}
        for c in Currency
    ]
