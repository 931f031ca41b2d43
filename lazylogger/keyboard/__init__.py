"""Keyboard module.

This module provides key handling for the LazyLogger TUI:

- keymaps: raw key names to symbolic InputKey values per screen (KEYMAPS)
- navigation: the screen/stage state machine driven by those keys
"""

from lazylogger.keyboard.keymaps import KEY_HINTS, KEYMAPS, resolve_key
from lazylogger.keyboard.navigation import KeyOutcome, commit_stage, handle_key

__all__ = [
    "KEYMAPS",
    "KEY_HINTS",
    "KeyOutcome",
    "commit_stage",
    "handle_key",
    "resolve_key",
]
