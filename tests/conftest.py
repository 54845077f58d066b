"""
Pytest fixtures for the calculator app.

Provides:
- Settings factory isolated from the environment's .env
- Test clients wired to a fixed, a pending live and a loaded live provider
"""

import asyncio
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from projectcalc.core.config import Settings
from projectcalc.main import create_app
from projectcalc.services.rates.providers import FixedRateProvider, LiveRateProvider

LIVE_RESPONSE = {
    "base": "BRL",
    "date": "2024-05-02",
    "rates": {"BRL": 1, "USD": 0.2, "EUR": 0.25, "GBP": 0.16},
}


def make_settings(**overrides) -> Settings:
    values = {"rate_provider": "fixed", "debug": False}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def fixed_client(settings):
    app = create_app(settings_override=settings, rate_provider=FixedRateProvider(5))
    return TestClient(app)


@pytest.fixture
def pending_provider():
    return LiveRateProvider("http://rates.invalid/latest/BRL", timeout=0.5)


@pytest.fixture
def pending_client(pending_provider):
    # No lifespan (client used without `with`), so the fetch never starts
    app = create_app(settings_override=make_settings(rate_provider="live"), rate_provider=pending_provider)
    return TestClient(app)


@pytest.fixture
def loaded_provider():
    provider = LiveRateProvider("http://rates.invalid/latest/BRL", timeout=0.5)
    with patch("projectcalc.services.rates.providers.get_json", return_value=LIVE_RESPONSE):
        asyncio.run(provider.load())
    return provider


@pytest.fixture
def live_client(loaded_provider):
    app = create_app(settings_override=make_settings(rate_provider="live"), rate_provider=loaded_provider)
    return TestClient(app)
