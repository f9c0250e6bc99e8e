"""Mini README: Centralised configuration models and helpers for clinab.

Structure:
    * ClinabSettings - pydantic-settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Settings are read from ``YNAB_*`` environment variables (and an optional
    ``.env`` file). Command-line options take precedence: the CLI combines
    them as ``option or settings.value``. The accessor is cached so the cost
    of validation is incurred only once per process.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://api.ynab.com/v1"
DEFAULT_BUDGET = "last-used"


class ClinabSettings(BaseSettings):
    """Runtime configuration for the clinab command-line client."""

    model_config = SettingsConfigDict(
        env_prefix="YNAB_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    token: Optional[str] = Field(
        None,
        description="Personal access token used as the API bearer credential.",
    )
    base_url: str = Field(
        DEFAULT_BASE_URL,
        description="Root URL of the budgeting REST API.",
    )
    budget: str = Field(
        DEFAULT_BUDGET,
        description="Budget name or identifier used when --budget is not given.",
    )
    timeout_seconds: float = Field(
        30.0,
        description="Per-request timeout applied by the HTTP transport.",
        gt=0,
        le=300,
    )
    log_level: str = Field(
        "WARNING",
        description="Logging level name for diagnostics written to stderr.",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        """Endpoint paths start with '/', so the base must not end with one."""

        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """Accept any standard logging level name regardless of casing."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unsupported log level: {value}")
        return normalised


@lru_cache()
def get_settings() -> ClinabSettings:
    """Return cached settings, ensuring consistent configuration across modules.

    Invalid environment values raise ``ConfigurationError`` naming the
    offending ``YNAB_*`` variable.
    """

    try:
        return ClinabSettings()
    except ValidationError as error:
        problems = "; ".join(
            f"YNAB_{str(issue['loc'][0]).upper()}: {issue['msg']}" if issue["loc"] else issue["msg"]
            for issue in error.errors()
        )
        raise ConfigurationError(f"Invalid configuration: {problems}") from error
