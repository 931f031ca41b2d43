"""Limit and threshold constants for the TUI.

All limit values and validation ranges.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

TICK_INTERVAL_MS_MIN: Final = 50
TICK_INTERVAL_MS_MAX: Final = 5000
MAX_LOG_EVENTS_MIN: Final = 1
MAX_LOG_EVENTS_MAX: Final = 10000

# ============================================================================
# AWS API batch limits
# ============================================================================

DESCRIBE_CLUSTERS_BATCH: Final = 100
DESCRIBE_SERVICES_BATCH: Final = 10

__all__ = [
    "DESCRIBE_CLUSTERS_BATCH",
    "DESCRIBE_SERVICES_BATCH",
    "MAX_LOG_EVENTS_MAX",
    "MAX_LOG_EVENTS_MIN",
    "TICK_INTERVAL_MS_MAX",
    "TICK_INTERVAL_MS_MIN",
]
