"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TranschainSettings(BaseSettings):
    """Configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="TRANSCHAIN_",
    )

    # Database
    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy URL of the editable translation store; unset means no database provider",
    )
    database_echo: bool = Field(
        default=False,
        description="Log SQL statements",
    )

    # Chain
    provider_order: list[str] = Field(
        default_factory=lambda: ["memory"],
        min_length=1,
        description="Provider names in lookup order; the first one receives writes",
    )
    key_separator: str = Field(
        default=".",
        min_length=1,
        description="Separator between segments of a translation key",
    )


@lru_cache
def get_settings() -> TranschainSettings:
    """Get cached settings instance."""
    return TranschainSettings()
