"""Constants module for LazyLogger.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings)
- timeouts.py: Tick interval and AWS timeouts
- limits.py: Validation ranges and API batch sizes
- defaults.py: Default values for settings

Note: Key maps are defined in lazylogger.keyboard.
"""

from lazylogger.constants.defaults import (
    CACHE_TTL_SECONDS_DEFAULT,
    EVENT_SOURCE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    LOG_LOOKBACK_MINUTES_DEFAULT,
    MAX_LOG_EVENTS_DEFAULT,
    REGION_DEFAULT,
    THEME_DEFAULT,
)
from lazylogger.constants.enums import (
    STAGE_TARGETS,
    ConfigStage,
    EventSource,
    InputKey,
    KeyEventKind,
    LoadState,
    LoadTarget,
    ScreenKind,
)
from lazylogger.constants.timeouts import TICK_INTERVAL_MS
from lazylogger.constants.values import APP_TITLE

__all__ = [
    # Application
    "APP_TITLE",
    # Defaults
    "CACHE_TTL_SECONDS_DEFAULT",
    "EVENT_SOURCE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "LOG_LOOKBACK_MINUTES_DEFAULT",
    "MAX_LOG_EVENTS_DEFAULT",
    "REGION_DEFAULT",
    "STAGE_TARGETS",
    "THEME_DEFAULT",
    # Timing
    "TICK_INTERVAL_MS",
    # Enums
    "ConfigStage",
    "EventSource",
    "InputKey",
    "KeyEventKind",
    "LoadState",
    "LoadTarget",
    "ScreenKind",
]
