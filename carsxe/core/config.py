"""
core/config.py
----------------

Client configuration module.

Defines strongly-typed settings loaded from the environment using
``pydantic-settings``.  These settings supply the API key when the
client is built without one, the request timeout and the log level
used by :func:`carsxe.logging_config.configure_logging`.  The base URL
and the ``source`` tag are fixed constants and cannot be overridden.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_URL = "https://api.carsxe.com"

# Identifies this client implementation to the API on every request.
SOURCE = "python"


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Environment variables are prefixed with ``CARSXE_``.  For example, to
    supply the API key set ``CARSXE_API_KEY=...``; to change the request
    timeout set ``CARSXE_HTTP_TIMEOUT=15``.
    """

    api_key: Optional[str] = Field(None, description="CarsXE API key used when none is passed to the client.")
    http_timeout: float = Field(30.0, gt=0, description="Hard timeout for HTTP requests in seconds.")
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        "WARNING", description="Level applied by configure_logging()."
    )

    model_config = SettingsConfigDict(env_prefix="CARSXE_", env_file=None, case_sensitive=False)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache()
def get_settings() -> Settings:
    """Return a cached instance of the client settings.

    Call ``get_settings.cache_clear()`` after changing the environment to
    pick up new values.
    """
    return Settings()
