"""
Library Catalog — Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the database layer and the routes.
When:  Loaded once at module import time.

Defaults reproduce a plain local deployment: an SQLite file next to the
working directory, port 3000, and a single allowed browser origin.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Format: sqlite+aiosqlite:///<path to file>
    database_url: str = Field(
        default="sqlite+aiosqlite:///./library.db",
        description="Async SQLAlchemy URL of the embedded catalog database",
    )

    # Echo every SQL statement to the log (verbose driver mode)
    sql_echo: bool = Field(default=False)

    # Create tables and insert reference data during startup
    seed_on_startup: bool = Field(default=True)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated values (parsed by the properties below)
    cors_origins: str = Field(default="http://localhost:3000")
    cors_methods: str = Field(default="GET,POST,PUT,DELETE")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def cors_methods_list(self) -> List[str]:
        """Splits comma-separated CORS methods into an upper-cased list."""
        return [m.strip().upper() for m in self.cors_methods.split(",") if m.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pagination ────────────────────────────────────────────────────────
    # Upper bound for ?limit= on GET /books
    max_page_size: int = Field(default=100, ge=1, le=1000)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # DATABASE_URL and database_url both work
    }


# Singleton instance, imported throughout the application
settings = Settings()
