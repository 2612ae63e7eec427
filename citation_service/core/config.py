"""Application configuration using Pydantic Settings.

Environment variables are loaded with the CITATION_SERVICE_ prefix.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from citation_service.schemas.enums import Style


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service configuration
    service_name: str = "citation-service"
    port: int = 8090
    environment: str = Field(default="development", description="Runtime environment")
    log_level: str = Field(default="INFO", description="Logging level")

    # Citation behaviour
    default_style: Style = Field(
        default=Style.APA,
        description="Style used when a request does not name one",
    )
    reject_unparsable_dates: bool = Field(
        default=True,
        description="Fail website citations whose access date cannot be parsed",
    )
    include_plain_text: bool = Field(
        default=True,
        description="Include a markup-free rendering in citation responses",
    )

    model_config = SettingsConfigDict(
        env_prefix="CITATION_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings singleton
    """
    return Settings()
