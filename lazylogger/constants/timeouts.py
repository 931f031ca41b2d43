"""Timeout constants for the TUI.

All timeout and interval values for the scheduler and AWS requests.
"""

from typing import Final

# ============================================================================
# Scheduler timing (milliseconds)
# ============================================================================

TICK_INTERVAL_MS: Final = 250

# ============================================================================
# AWS client timeouts (seconds)
# ============================================================================

AWS_CONNECT_TIMEOUT: Final = 5
AWS_READ_TIMEOUT: Final = 20
AWS_MAX_ATTEMPTS: Final = 3

__all__ = [
    "AWS_CONNECT_TIMEOUT",
    "AWS_MAX_ATTEMPTS",
    "AWS_READ_TIMEOUT",
    "TICK_INTERVAL_MS",
]
