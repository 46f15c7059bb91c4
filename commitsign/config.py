"""Configuration management with Pydantic settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """commitsign configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="COMMITSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    repo_path: Path | None = Field(
        default=None,
        description="Repository whose git configuration is read (defaults to the working directory)",
    )

    git_binary: str = Field(
        default="git",
        description="git executable used to query configuration",
    )

    sign_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Kill the signing program after this many seconds (unset = wait indefinitely)",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level applied by the CLI",
    )

    def get_repo_path(self) -> Path:
        """Return the repository directory, defaulting to the working directory."""
        if self.repo_path is not None:
            return self.repo_path
        return Path.cwd()


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
