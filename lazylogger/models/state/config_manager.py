"""Application settings model and its YAML persistence."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from lazylogger.constants.defaults import (
    CACHE_TTL_SECONDS_DEFAULT,
    LOG_LEVEL_DEFAULT,
    LOG_LOOKBACK_MINUTES_DEFAULT,
    MAX_LOG_EVENTS_DEFAULT,
    REGION_DEFAULT,
    THEME_DEFAULT,
)
from lazylogger.constants.enums import EventSource
from lazylogger.constants.limits import (
    MAX_LOG_EVENTS_MAX,
    MAX_LOG_EVENTS_MIN,
    TICK_INTERVAL_MS_MAX,
    TICK_INTERVAL_MS_MIN,
)
from lazylogger.constants.timeouts import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LAZYLOGGER_CONFIG"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # AWS
    region: str = REGION_DEFAULT
    event_source: EventSource = EventSource.SERVICE_EVENTS
    max_log_events: int = Field(
        default=MAX_LOG_EVENTS_DEFAULT,
        ge=MAX_LOG_EVENTS_MIN,
        le=MAX_LOG_EVENTS_MAX,
    )
    cache_ttl_seconds: int = Field(default=CACHE_TTL_SECONDS_DEFAULT, ge=0)
    log_lookback_minutes: int = Field(default=LOG_LOOKBACK_MINUTES_DEFAULT, ge=1)

    # Scheduler
    tick_interval_ms: int = Field(
        default=TICK_INTERVAL_MS,
        ge=TICK_INTERVAL_MS_MIN,
        le=TICK_INTERVAL_MS_MAX,
    )
    background_fetch: bool = True

    # UI preferences
    theme: str = THEME_DEFAULT

    # Logging
    log_file: str = ""
    log_level: str = LOG_LEVEL_DEFAULT

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = str(value or "").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""


class ConfigManager:
    """Reads and writes ``AppSettings`` as YAML."""

    DEFAULT_PATH = Path("~/.config/lazylogger/settings.yaml")

    @classmethod
    def config_path(cls, path: str | Path | None = None) -> Path:
        """Resolve the settings file location.

        Precedence: explicit path, then ``$LAZYLOGGER_CONFIG``, then the default.
        """
        if path:
            return Path(path).expanduser()
        env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
        if env_path:
            return Path(env_path).expanduser()
        return cls.DEFAULT_PATH.expanduser()

    @classmethod
    def load(cls, path: str | Path | None = None) -> AppSettings:
        """Load settings; a missing file yields defaults."""
        config_path = cls.config_path(path)
        if not config_path.exists():
            logger.debug("No settings file at %s, using defaults", config_path)
            return AppSettings()

        try:
            raw: Any = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read {config_path}: {exc}") from exc

        if raw is None:
            return AppSettings()
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{config_path} must contain a mapping")

        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {config_path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: str | Path | None = None) -> Path:
        """Write settings to disk and return the path written."""
        config_path = cls.config_path(path)
        payload = settings.model_dump(mode="json")
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            config_path.write_text(
                yaml.safe_dump(payload, sort_keys=True),
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {config_path}: {exc}") from exc
        logger.info("Saved settings to %s", config_path)
        return config_path

    @classmethod
    def reset(cls, path: str | Path | None = None) -> AppSettings:
        """Overwrite the settings file with defaults."""
        settings = AppSettings()
        cls.save(settings, path)
        return settings


__all__ = [
    "CONFIG_ENV_VAR",
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
