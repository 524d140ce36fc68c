"""Raindrop MCP server configuration using pydantic-settings."""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "https://api.raindrop.io/rest/v1"


class Settings(BaseSettings):
    """Server settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Static bearer token for the Raindrop REST API (test token or OAuth access token)
    raindrop_api_token: str = Field(min_length=1, validation_alias="RAINDROP_API_TOKEN")

    api_url: str = Field(default=DEFAULT_API_URL, validation_alias="RAINDROP_API_URL")
    api_timeout: float = Field(default=30.0, gt=0, validation_alias="RAINDROP_API_TIMEOUT")

    log_level: str = Field(default="INFO", validation_alias="RAINDROP_MCP_LOG_LEVEL")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
