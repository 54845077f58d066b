"""Concrete rate providers and factory.

'fixed' converts with a constant (FIXED_RATE BRL buy 1 USD or 1 EUR).
'live' fetches BRL-based rates once per process and keeps them for the
session; until the fetch succeeds, foreign rates are unavailable.
"""

from __future__ import annotations

import asyncio
import logging
import math
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from projectcalc.core.config import Settings
from projectcalc.models.constants import Currency, FOREIGN_CURRENCIES
from projectcalc.services.http_client import get_json, HttpError
from .base import RateProvider, STATUS_FAILED, STATUS_PENDING, STATUS_READY

logger = logging.getLogger("projectcalc.rates")

DEFAULT_FIXED_RATE = 5.0
# Extra seconds on top of the socket timeout before the fetch is abandoned
_FETCH_GRACE_SECONDS = 1.0


class FixedRateProvider(RateProvider):
    kind = "fixed"

    def __init__(self, fixed_rate: float = DEFAULT_FIXED_RATE):
        if fixed_rate <= 0:
            raise ValueError("fixed rate must be positive")
        self.fixed_rate = fixed_rate
        self._rates: Mapping[Currency, float] = MappingProxyType(
            {
                Currency.BRL: 1.0,
                **{c: 1 / fixed_rate for c in FOREIGN_CURRENCIES},
            }
        )

    @property
    def status(self) -> str:
        return STATUS_READY

    def rates(self) -> Dict[Currency, float]:
        return dict(self._rates)

    def describe(self, target: Union[Currency, str]) -> Optional[str]:
        target = Currency(target)
        if target == self.base_currency:
            return None
        return f"Taxa de conversão fixa: 1 {target.value} = {self.fixed_rate:g} BRL"


class LiveRateProvider(RateProvider):
    """Rates fetched once from an exchangerate-api style endpoint.

    The endpoint is queried with base BRL and answers
    ``{"rates": {"USD": 0.18, "EUR": 0.17, ...}}``, i.e. foreign units per BRL,
    which is exactly the multiplier applied to BRL figures.
    """

    kind = "live"

    def __init__(self, url: str, timeout: float = 5.0):
        self.url = url
        self.timeout = timeout
        self._rates: Optional[Mapping[Currency, float]] = None
        self._status = STATUS_PENDING
        self._task: Optional[asyncio.Task] = None

    @property
    def status(self) -> str:
        return self._status

    def rates(self) -> Dict[Currency, float]:
        if self._rates is None:
            return {Currency.BRL: 1.0}
        return dict(self._rates)

    def describe(self, target: Union[Currency, str]) -> Optional[str]:
        target = Currency(target)
        rate = self.get_rate(target)
        if target == self.base_currency or rate is None:
            return None
        return f"Taxa de câmbio atual: 1 BRL = {rate:.4f} {target.value}"

    # Loading ----------------------------------------------------
    def start(self) -> Optional[asyncio.Task]:
        """Schedule the one-shot fetch on the running loop; no-op if already started."""
        if self._task is not None or self._status != STATUS_PENDING:
            return self._task
        self._task = asyncio.get_running_loop().create_task(
            self.load(), name="live-rate-fetch"
        )
        return self._task

    async def wait(self) -> str:
        if self._task is not None:
            await self._task
        return self._status

    async def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

    async def load(self) -> None:
        if self._status != STATUS_PENDING:
            return
        try:
            data = await asyncio.wait_for(
                asyncio.to_thread(get_json, self.url, timeout=self.timeout, retries=0),
                timeout=self.timeout + _FETCH_GRACE_SECONDS,
            )
            rates = self.extract_rates(data)
        except asyncio.CancelledError:
            logger.info("live rate fetch cancelled")
            self._status = STATUS_FAILED
            raise
        except (HttpError, asyncio.TimeoutError, ValueError) as e:
            self._status = STATUS_FAILED
            logger.warning(
                "live rate fetch failed; foreign currencies unavailable for this session",
                exc_info=e,
                extra={"context": {"url": self.url}},
            )
            return
        self._rates = MappingProxyType(rates)
        self._status = STATUS_READY
        logger.info(
            "live rates loaded",
            extra={"context": {c.value: r for c, r in rates.items()}},
        )

    @staticmethod
    def extract_rates(data: Any) -> Dict[Currency, float]:
        """Pick USD and EUR out of the response; anything missing is a failure."""
        if not isinstance(data, dict):
            raise ValueError("rate response is not a JSON object")
        raw = data.get("rates")
        if not isinstance(raw, dict):
            raise ValueError("rate response has no 'rates' object")
        out: Dict[Currency, float] = {Currency.BRL: 1.0}
        for currency in FOREIGN_CURRENCIES:
            value = raw.get(currency.value)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"missing or invalid rate for {currency.value}")
            try:
                rate = float(value)
            except OverflowError:
                raise ValueError(f"rate for {currency.value} out of range") from None
            if not math.isfinite(rate) or rate <= 0:
                raise ValueError(f"missing or invalid rate for {currency.value}")
            out[currency] = rate
        return out


_PROVIDER_REGISTRY = {
    "fixed": lambda s: FixedRateProvider(s.fixed_rate),
    "live": lambda s: LiveRateProvider(s.rates_url, timeout=s.http_timeout_seconds),
}


def make_rate_provider(kind: str, settings: Settings) -> RateProvider:
    factory = _PROVIDER_REGISTRY.get(kind)
    if not factory:
        raise ValueError(f"Unknown rate provider kind '{kind}'")
    return factory(settings)
