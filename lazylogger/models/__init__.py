"""Data models for LazyLogger."""

from lazylogger.models.display.frame import Frame, ListPanel, ListRow, Tone
from lazylogger.models.state.app_state import (
    AppState,
    ConfigSelection,
    LoadStatus,
    ScreenState,
)
from lazylogger.models.state.selectable_list import ScrollState, SelectableList

__all__ = [
    "AppState",
    "ConfigSelection",
    "Frame",
    "ListPanel",
    "ListRow",
    "LoadStatus",
    "ScreenState",
    "ScrollState",
    "SelectableList",
    "Tone",
]
