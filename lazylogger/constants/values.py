"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "LazyLogger"

# ============================================================================
# Status line text
# ============================================================================

MODE_LOGGING: Final = "Logging Mode"
MODE_SET_SOURCE: Final = "Set Data Source"
MODE_EXITING: Final = "Exiting"
MODE_ENTRY_DETAIL: Final = "Entry Detail"
NOT_SETTING_ANYTHING: Final = "Not Setting Anything"

# ============================================================================
# Placeholders
# ============================================================================

PLACEHOLDER_CONFIGURE: Final = "Configure Data Source to View Logs"
PLACEHOLDER_LOADING_EVENTS: Final = "Loading Service Events..."
PLACEHOLDER_NO_ENTRY: Final = "No entry selected"
EXIT_PROMPT: Final = "Are you sure you want to exit? (y/n)"

__all__ = [
    "APP_TITLE",
    "EXIT_PROMPT",
    "MODE_ENTRY_DETAIL",
    "MODE_EXITING",
    "MODE_LOGGING",
    "MODE_SET_SOURCE",
    "NOT_SETTING_ANYTHING",
    "PLACEHOLDER_CONFIGURE",
    "PLACEHOLDER_LOADING_EVENTS",
    "PLACEHOLDER_NO_ENTRY",
]
