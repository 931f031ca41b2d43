"""Render models shared by the presenter and the widgets."""

from lazylogger.models.display.frame import (
    Frame,
    ListPanel,
    ListRow,
    Tone,
    visible_window,
)

__all__ = ["Frame", "ListPanel", "ListRow", "Tone", "visible_window"]
