"""Raw key names to symbolic input keys, per screen.

The same physical key means different things on different screens ("q" quits
while browsing but declines the exit prompt), so lookups always take the
screen that is active when the key is dispatched.
"""

from __future__ import annotations

from typing import Final

from lazylogger.constants.enums import InputKey, ScreenKind

# ============================================================================
# Per-screen key maps (Textual key names)
# ============================================================================

BROWSING_KEYMAP: Final[dict[str, InputKey]] = {
    "c": InputKey.OPEN_CONFIGURATION,
    "q": InputKey.QUIT,
    "e": InputKey.TOGGLE_LOG_FOCUS,
    "r": InputKey.REFRESH,
    "down": InputKey.NAVIGATE_DOWN,
    "up": InputKey.NAVIGATE_UP,
    "enter": InputKey.OPEN_DETAIL,
}

CONFIGURING_KEYMAP: Final[dict[str, InputKey]] = {
    "escape": InputKey.CANCEL,
    "q": InputKey.CANCEL,
    "tab": InputKey.SWITCH_STAGE,
    "enter": InputKey.CONFIRM,
    "down": InputKey.NAVIGATE_DOWN,
    "up": InputKey.NAVIGATE_UP,
}

CONFIRM_EXIT_KEYMAP: Final[dict[str, InputKey]] = {
    "y": InputKey.CONFIRM_EXIT,
    "n": InputKey.DECLINE_EXIT,
    "q": InputKey.DECLINE_EXIT,
    "escape": InputKey.CANCEL,
}

ENTRY_DETAIL_KEYMAP: Final[dict[str, InputKey]] = {
    "q": InputKey.CLOSE_DETAIL,
    "escape": InputKey.CANCEL,
}

KEYMAPS: Final[dict[ScreenKind, dict[str, InputKey]]] = {
    ScreenKind.BROWSING: BROWSING_KEYMAP,
    ScreenKind.CONFIGURING_SOURCE: CONFIGURING_KEYMAP,
    ScreenKind.CONFIRM_EXIT: CONFIRM_EXIT_KEYMAP,
    ScreenKind.VIEWING_ENTRY_DETAIL: ENTRY_DETAIL_KEYMAP,
}

# ============================================================================
# Footer hints
# ============================================================================

KEY_HINTS: Final[dict[ScreenKind, str]] = {
    ScreenKind.BROWSING: "(q) to quit / (c) to config data source / (e) to focus events",
    ScreenKind.CONFIGURING_SOURCE: "(ESC) to cancel / (Tab) to switch boxes / (Enter) to complete",
    ScreenKind.CONFIRM_EXIT: "(y) to exit / (n) to stay",
    ScreenKind.VIEWING_ENTRY_DETAIL: "(q) / (ESC) to close",
}


def resolve_key(screen: ScreenKind, key: str) -> InputKey | None:
    """Translate a raw key name for the given screen, or None if unbound."""
    return KEYMAPS[screen].get(key)


__all__ = [
    "BROWSING_KEYMAP",
    "CONFIGURING_KEYMAP",
    "CONFIRM_EXIT_KEYMAP",
    "ENTRY_DETAIL_KEYMAP",
    "KEYMAPS",
    "KEY_HINTS",
    "resolve_key",
]
