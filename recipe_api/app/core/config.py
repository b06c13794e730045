"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so that
the service starts without any configuration; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _default_database_url() -> str:
    # Keep test runs away from the development database unless a path
    # is given explicitly.
    if os.getenv("APP_ENV", "development").lower() == "test":
        return "recipes_test.db"
    return "recipes.db"


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Recipe API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    environment: str = os.getenv("APP_ENV", "development").lower()
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  A relative path is resolved
    # against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", _default_database_url())

    # Comma‑separated list of origins allowed by the CORS middleware.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*"))
    )

    host: str = os.getenv("API_HOST", "0.0.0.0")
    port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
