from .base import (
    RateProvider,
    STATUS_FAILED,
    STATUS_PENDING,
    STATUS_READY,
)
from .providers import FixedRateProvider, LiveRateProvider, make_rate_provider

__all__ = [
    "RateProvider",
    "FixedRateProvider",
    "LiveRateProvider",
    "make_rate_provider",
    "STATUS_READY",
    "STATUS_PENDING",
    "STATUS_FAILED",
]
