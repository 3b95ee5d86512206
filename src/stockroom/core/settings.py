"""Runtime settings for stockroom drivers.

The core itself is configuration-free; settings only shape the ambient
layers (logging) of whatever driver hosts it, such as the CLI.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked at startup, not runtime
    - **Environment-driven:** Reads ``STOCKROOM_*`` env vars and ``.env``
    - **Sensible defaults:** Works out of the box for development

Examples:
    >>> from stockroom.core.settings import get_settings
    >>> settings = get_settings()
    >>> settings.log_level
    'INFO'

Tags:
    settings, configuration, pydantic, environment, stockroom
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stockroom.core.errors import ConfigError
from stockroom.core.logging import LOG_LEVELS


class StockroomSettings(BaseSettings):
    """Settings shared by stockroom drivers.

    Fields
    ──────
    log_level    : structlog log level
    log_json     : JSON log lines; unset means auto-detect from the tty
    service_name : service field stamped on every log line
    """

    model_config = SettingsConfigDict(
        env_prefix="STOCKROOM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    log_json: bool | None = Field(
        default=None,
        description="Render JSON log lines (None = auto-detect)",
    )
    service_name: str = "stockroom"

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


# ── Settings factory with caching ────────────────────────────────────────

_settings_cache: dict[str, StockroomSettings] = {}


def get_settings(*, _force_reload: bool = False) -> StockroomSettings:
    """Load, validate, and cache the process-wide settings.

    Parameters
    ----------
    _force_reload:
        Bypass cache and re-read the environment.

    Raises
    ------
    ConfigError
        An environment value failed validation.
    """
    if not _force_reload and "default" in _settings_cache:
        return _settings_cache["default"]
    try:
        settings = StockroomSettings()
    except ValidationError as exc:
        raise ConfigError(
            f"Invalid stockroom settings: {exc.error_count()} error(s)",
            cause=exc,
        ).with_context(fields=[".".join(map(str, e["loc"])) for e in exc.errors()]) from exc
    _settings_cache["default"] = settings
    return settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    _settings_cache.clear()


__all__ = [
    "StockroomSettings",
    "get_settings",
    "reset_settings",
]
