"""Runtime settings for tutor.

The lesson runner's command surface takes exactly one selector token and
nothing else, so settings only govern diagnostics: how loud the structlog
output on stderr is and whether it is rendered as JSON.

Manifesto:
    - **Pydantic validation:** bad values fail at startup, not mid-run
    - **Environment-driven:** ``TUTOR_*`` variables and an optional ``.env``
    - **Extra ignore:** unknown variables never break the CLI

Examples:
    >>> import os
    >>> os.environ["TUTOR_LOG_LEVEL"] = "debug"
    >>> get_settings(_force_reload=True).log_level
    'DEBUG'

Tags:
    settings, configuration, pydantic, environment, tutor-core

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class TutorSettings(BaseSettings):
    """Tutor configuration.

    Fields
    ──────
    log_level : structlog level for stderr diagnostics
    log_json  : JSON rendering; ``None`` picks JSON when stderr is not a tty
    """

    model_config = SettingsConfigDict(
        env_prefix="TUTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = Field(default="WARNING", description="Diagnostic log level")
    log_json: bool | None = Field(default=None, description="Render logs as JSON")

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level


_settings_cache: dict[str, TutorSettings] = {}


def get_settings(*, _force_reload: bool = False) -> TutorSettings:
    """Load, validate, and cache a :class:`TutorSettings` instance."""
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]

    settings = TutorSettings()
    _settings_cache["default"] = settings
    return settings


def clear_settings_cache() -> None:
    """Drop the cached settings (for testing)."""
    _settings_cache.clear()


__all__ = ["TutorSettings", "get_settings", "clear_settings_cache"]
