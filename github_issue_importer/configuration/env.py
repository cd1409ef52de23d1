"""Pydantic Settings model for application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from github_issue_importer.utils.constants import DEFAULT_GITHUB_API_URL, DEFAULT_MARKDOWN_DIR, DEFAULT_REQUEST_INTERVAL


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

    # GitHub API settings
    GITHUB_API_URL: str = DEFAULT_GITHUB_API_URL
    GITHUB_REPO: str | None = None
    GITHUB_TOKEN: str | None = None

    # Import settings
    MARKDOWN_DIR: Path = Path(DEFAULT_MARKDOWN_DIR)
    REQUEST_INTERVAL: float = DEFAULT_REQUEST_INTERVAL


settings = Settings()
