"""Application configuration using Pydantic settings."""

from functools import lru_cache
from typing import Literal

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True

    # API
    api_v1_prefix: str = "/api/v1"
    project_name: str = "Storefront Commerce API"
    version: str = "1.0.0"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Squarespace Commerce API
    squarespace_base_url: str = "https://api.squarespace.com"
    squarespace_site_id: str = ""
    squarespace_api_key: str = ""
    squarespace_access_token: str = ""

    # Error reporting
    sentry_dsn: str = ""

    # CORS
    cors_origins: list[str] = [
        "https://adrienbird.net",
        "http://localhost:3000",
    ]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def squarespace_auth_configured(self) -> bool:
        """Whether any upstream credential (token or API key) is set."""
        return bool(self.squarespace_access_token or self.squarespace_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
