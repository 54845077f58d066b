from functools import lru_cache

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    RATE_PROVIDER, FIXED_RATE, HTTP_TIMEOUT_SECONDS, HOURS_INPUT).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Calculadora de Projeto"
    debug: bool = False
    version: str = "0.1.0"

    # Exchange rates
    # Allowed: 'fixed' (constant FIXED_RATE BRL per foreign unit), 'live' (one fetch at startup)
    rate_provider: str = "live"
    fixed_rate: float = 5.0
    exchange_api_base_url: AnyHttpUrl = "https://api.exchangerate-api.com/v4/latest"  # base currency is appended
    http_timeout_seconds: float = 5.0

    # Form behaviour
    # 'slider' commits only whole hours inside [hours_min, hours_max]; 'text' accepts free numeric text
    hours_input: str = "slider"
    hours_min: int = 1
    hours_max: int = 160
    default_price_per_hour: str = "50,50"
    default_cost_per_hour: str = "15,50"

    def init_post_load(self) -> None:
        """Validate cross-field constraints."""
        allowed = {"fixed", "live"}
        if self.rate_provider not in allowed:
            raise ValueError(
                f"Unsupported rate_provider '{self.rate_provider}'. Allowed: {allowed}"
            )
        if self.hours_input not in {"slider", "text"}:
            raise ValueError(f"Unsupported hours_input '{self.hours_input}'")
        if self.fixed_rate <= 0:
            raise ValueError("fixed_rate must be positive")
        if self.http_timeout_seconds <= 0:
            raise ValueError("http_timeout_seconds must be positive")
        if not (0 <= self.hours_min <= self.hours_max):
            raise ValueError("require 0 <= hours_min <= hours_max")

    @property
    def rates_url(self) -> str:
        return f"{str(self.exchange_api_base_url).rstrip('/')}/BRL"


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
