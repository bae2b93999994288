from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wheels_router_mcp import __version__


class RouterConfig(BaseSettings):
    """Configuration for the upstream provider endpoints.

    Automatically loads from environment variables and .env file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    wheels_base_url: str = Field(
        default="https://engine.justusewheels.com", alias="WHEELS_BASE_URL"
    )
    transitous_base_url: str = Field(
        default="https://api.transitous.org", alias="TRANSITOUS_BASE_URL"
    )
    nominatim_url: str = Field(
        default="https://nominatim.openstreetmap.org/search", alias="NOMINATIM_URL"
    )
    http_timeout_seconds: float = Field(default=30.0, alias="WHEELS_HTTP_TIMEOUT")
    user_agent: str = f"wheels-router-mcp/{__version__}"

    @property
    def wheels_plan_url(self) -> str:
        return f"{self.wheels_base_url.rstrip('/')}/v1/plan"

    @property
    def transitous_plan_url(self) -> str:
        return f"{self.transitous_base_url.rstrip('/')}/api/v5/plan"


@lru_cache
def get_router_config() -> RouterConfig:
    """Get router configuration (cached singleton).

    Returns:
        RouterConfig with values from .env file or environment variables.
    """
    return RouterConfig()


def reset_router_config() -> None:
    """Drop the cached configuration so the next call re-reads the environment."""
    get_router_config.cache_clear()
