"""Frame model - what one repaint of the events screen shows."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Tone(Enum):
    """How a placeholder should be styled."""

    NORMAL = "normal"
    LOADING = "loading"
    ERROR = "error"


@dataclass(frozen=True)
class ListRow:
    text: str
    selected: bool = False
    committed: bool = False


@dataclass(frozen=True)
class ListPanel:
    """One bordered list: either rows or a placeholder message."""

    title: str
    rows: tuple[ListRow, ...] = ()
    selected: int | None = None
    offset: int = 0
    placeholder: str = ""
    tone: Tone = Tone.NORMAL
    active: bool = False


@dataclass(frozen=True)
class Frame:
    title: str
    events: ListPanel
    mode: str
    editing: str
    key_hint: str
    config_panels: tuple[ListPanel, ...] = ()
    exit_prompt: str | None = None
    detail: str | None = None


def visible_window(total: int, selected: int | None, offset: int, height: int) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of rows to draw in ``height`` lines.

    The scroll offset is only a hint: the window starts there when possible and
    is shifted just enough to keep the selected row on screen.
    """
    if height <= 0 or total <= 0:
        return (0, 0)
    if total <= height:
        return (0, total)
    start = max(0, min(offset, total - height))
    if selected is not None:
        if selected < start:
            start = selected
        elif selected >= start + height:
            start = selected - height + 1
    return (start, start + height)


__all__ = ["Frame", "ListPanel", "ListRow", "Tone", "visible_window"]
