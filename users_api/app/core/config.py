"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  Values
are read when ``Settings`` is instantiated, so tests can build their
own instance with explicit keyword arguments instead of patching the
environment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Users API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)
    # uvicorn access lines duplicate the request log; off unless asked for.
    access_log: bool = field(default_factory=lambda: _env_flag("ACCESS_LOG", "false"))

    # Listening address.  ``PORT`` is the variable most hosting platforms
    # inject; an empty value falls back to the default as well.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT") or "8080"))

    # Value sent in ``Access-Control-Allow-Origin`` on every response.
    cors_allow_origin: str = field(default_factory=lambda: os.getenv("CORS_ALLOW_ORIGIN", "*"))

    # Populate a fresh store with the two sample users.
    seed_users: bool = field(default_factory=lambda: _env_flag("SEED_USERS", "true"))

    # When enabled, PUT requires non-empty name and email just like POST.
    # Disable to let updates store whatever the client sent.
    validate_updates: bool = field(default_factory=lambda: _env_flag("VALIDATE_UPDATES", "true"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
