"""Rate provider abstraction.

A provider answers "how many units of the target currency does 1 BRL buy".
``None`` means the rate is unknown right now; callers must not treat it as 1.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Protocol, Union

from projectcalc.models.constants import Currency, BASE_CURRENCY

STATUS_READY = "ready"
STATUS_PENDING = "pending"
STATUS_FAILED = "failed"


class RateProvider(ABC):
    kind: str = ""
    base_currency: Currency = BASE_CURRENCY

    @property
    @abstractmethod
    def status(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def rates(self) -> Dict[Currency, float]:
        """Snapshot of the currently known rates (always includes BRL)."""
        raise NotImplementedError

    def get_rate(self, target: Union[Currency, str]) -> Optional[float]:
        """Return target units per 1 BRL, or None while unavailable."""
        target = Currency(target)
        if target == self.base_currency:
            return 1.0
        return self.rates().get(target)

    def describe(self, target: Union[Currency, str]) -> Optional[str]:
        """Short note shown next to converted figures."""
        return None


class SupportsRateLookup(Protocol):
    status: str

    def get_rate(self, target: Union[Currency, str]) -> Optional[float]: ...
