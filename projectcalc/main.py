import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import calculator, health, ui
from .services.rates.base import RateProvider
from .services.rates.providers import LiveRateProvider, make_rate_provider

logger = logging.getLogger("projectcalc")


def create_app(
    settings_override: Settings | None = None,
    rate_provider: RateProvider | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    rate_provider: inject a provider instead of building one from settings.
    """
    settings = settings_override or get_settings()
    if settings_override is not None:
        settings.init_post_load()
    # Initialize logging early
    init_logging(debug=settings.debug)

    provider = rate_provider or make_rate_provider(settings.rate_provider, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Live rates load in the background; requests never wait for them
        if isinstance(provider, LiveRateProvider):
            if provider.start() is not None:
                logger.info("live rate fetch started", extra={"context": {"url": provider.url}})
        yield
        if isinstance(provider, LiveRateProvider):
            await provider.cancel()

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.rate_provider = provider

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(errors.RatesUnavailableError, errors.rates_unavailable_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(calculator.router)
    app.include_router(ui.router)

    return app


app = create_app()
