"""Money rounding and currency formatting helpers.

Centralized so the calculator, the JSON API and the HTML form use identical
rounding and display semantics.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Union

from projectcalc.models.constants import Currency, CURRENCY_FORMATS


def round2(value: float) -> float:
    if not math.isfinite(value):
        return value
    return float(_quantize2(value))


def _quantize2(value: float) -> Decimal:
    exact = Decimal(str(value))
    # Enough digits for the integer part plus two decimals at any float magnitude
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + 4)
        return exact.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _group(digits: str, sep: str) -> str:
    return f"{int(digits):,}".replace(",", sep)


def format_currency(amount: float, currency: Union[Currency, str]) -> str:
    """Render ``amount`` as a currency string in the currency's locale.

    BRL -> ``R$ 1.234,50`` (pt-BR), USD -> ``$1,234.50`` (en-US),
    EUR -> ``1.234,50 €`` (de-DE). Always two fraction digits, rounded half
    away from zero. Negative values get a leading minus; values that round to
    zero are shown unsigned.
    """
    fmt = CURRENCY_FORMATS[Currency(currency)]
    if math.isnan(amount):
        return fmt.pattern.replace("¤", fmt.symbol).replace("#", "NaN")
    if math.isinf(amount):
        body = fmt.pattern.replace("¤", fmt.symbol).replace("#", "∞")
        return f"-{body}" if amount < 0 else body

    quantized = _quantize2(amount)
    whole, frac = f"{quantized.copy_abs():f}".split(".")
    number = f"{_group(whole, fmt.group_sep)}{fmt.decimal_sep}{frac}"
    body = fmt.pattern.replace("¤", fmt.symbol).replace("#", number)
    return f"-{body}" if quantized < 0 else body
