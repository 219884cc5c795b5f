"""
HelloRest — Application Configuration
======================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Type-safe environment variable loading with validation on startup.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by the app factory, the route table and the error normalizer.
When:  Loaded once at module import time.

Environment variables map 1:1 onto field names (case-insensitive), e.g.
CONTEXT_PATH=/api, BINDING_MODE=off, ERROR_STATUS_CODE=500.
"""

from enum import Enum
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class BindingMode(str, Enum):
    """
    Process-wide policy for rendering a route's return value when the route
    does not declare what it produces.

        off       → str(value) as text/plain
        auto      → JSON
        json      → JSON
        json_xml  → XML if the client's Accept header prefers it, else JSON
    """

    OFF = "off"
    AUTO = "auto"
    JSON = "json"
    JSON_XML = "json_xml"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    """

    # ── REST ──────────────────────────────────────────────────────────────
    # What: Base path every route in the route table is mounted under
    context_path: str = Field(default="/camel")

    binding_mode: BindingMode = Field(default=BindingMode.JSON)

    # What: Status code the error normalizer forces on every failed exchange
    error_status_code: int = Field(default=503, ge=400, le=599)

    @field_validator("context_path")
    @classmethod
    def validate_context_path(cls, v: str) -> str:
        """Context path must be absolute; a trailing slash is dropped."""
        if not v.startswith("/"):
            raise ValueError(f"Invalid context_path '{v}'. Must start with '/'")
        return v.rstrip("/")

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    server_host: str = Field(default="0.0.0.0")
    server_port: int = Field(default=8080, ge=1024, le=65535)

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance, imported throughout the application
settings = Settings()
