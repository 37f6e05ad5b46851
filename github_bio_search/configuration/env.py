"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False
    THEME: str = "light"

    # GitHub API settings
    GITHUB_API_URL: str = "https://api.github.com"
    REQUEST_TIMEOUT: float = 10.0

    # Optional GitHub PAT, requests are unauthenticated without it
    GITHUB_PAT_TOKEN: str | None = None

    # Enrichment settings
    MAX_CONCURRENT_ENRICHMENTS: int = 5
