"""Application configuration with structured settings groups."""
import logging
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# =============================================================================
# Nested Settings Models
# =============================================================================


class PaginationSettings(BaseModel):
    """
    Client listing pagination.

    Requests with a missing or invalid page/limit fall back to the defaults.
    max_limit caps the page size a caller may ask for.
    """

    default_page: int = Field(default=1, ge=1)
    default_limit: int = Field(default=10, ge=1)
    max_limit: int = Field(default=100, ge=1)


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: PAGINATION__MAX_LIMIT=50, DATABASE_URL=sqlite+aiosqlite:///./data/toystore.db
    """

    # Application metadata
    app_name: str = "Toy Store API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./toystore.db"
    database_echo: bool = False
    seed_sample_data: bool = False

    # Nested settings groups
    pagination: PaginationSettings = PaginationSettings()

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
