"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class RestCountriesSettings(BaseModel):
    """
    RestCountries API settings used for demonym enrichment.

    timeout_seconds bounds every lookup; a timeout counts as a failed lookup.
    language: Demonym language key in the RestCountries payload ("eng", "fra", ...).
    """

    base_url: str = "https://restcountries.com/v3.1"
    timeout_seconds: float = 5.0
    language: str = "eng"


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: REST_COUNTRIES__BASE_URL=http://localhost:9000/v3.1
    """

    # Application metadata
    app_name: str = "Maple Clients API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/maple"
    database_echo: bool = False

    # Nested settings groups
    rest_countries: RestCountriesSettings = RestCountriesSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
