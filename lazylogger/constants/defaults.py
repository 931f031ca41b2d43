"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "dracula"

# ============================================================================
# AWS defaults
# ============================================================================

REGION_DEFAULT: Final = "us-east-1"
EVENT_SOURCE_DEFAULT: Final = "service-events"
MAX_LOG_EVENTS_DEFAULT: Final = 500
CACHE_TTL_SECONDS_DEFAULT: Final = 120
LOG_LOOKBACK_MINUTES_DEFAULT: Final = 60

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"

__all__ = [
    "CACHE_TTL_SECONDS_DEFAULT",
    "EVENT_SOURCE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "LOG_LOOKBACK_MINUTES_DEFAULT",
    "MAX_LOG_EVENTS_DEFAULT",
    "REGION_DEFAULT",
    "THEME_DEFAULT",
]
