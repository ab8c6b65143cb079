"""Environment-based configuration loader using pydantic BaseSettings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Everything has a default, so the demo starts with an empty environment.
    Values can be overridden from the environment or a .env file.
    """

    # Server binding used by cli_entry
    host: str = "127.0.0.1"
    port: int = 8080

    # Application
    log_level: str = "INFO"
    expose_vulnerable_search: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


def get_settings() -> Settings:
    """Create and return a validated Settings instance."""
    return Settings()
