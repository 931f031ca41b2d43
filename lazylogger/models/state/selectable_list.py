"""Scrollable single-selection list used by every panel of the TUI.

A ``SelectableList`` is never edited element by element: fresh fetch results
replace its contents wholesale through :meth:`SelectableList.install`, and
upstream invalidation swaps in an empty instance.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class ScrollState:
    """Advisory viewport hint for a list panel.

    ``offset`` stays within ``[0, content_length]``; it says nothing about
    whether the selection is valid.
    """

    offset: int = 0
    content_length: int = 0

    def reset(self, content_length: int) -> None:
        """Rewind to the top and track a new content length."""
        self.offset = 0
        self.content_length = max(0, content_length)

    def step(self, delta: int) -> None:
        """Move the offset by ``delta``, saturating at both ends."""
        self.offset = min(max(self.offset + delta, 0), self.content_length)

    def position(self, offset: int) -> None:
        """Place the offset at an absolute position, saturating at both ends."""
        self.offset = min(max(offset, 0), self.content_length)


class SelectableList(Generic[T]):
    """Ordered items with at most one selected index and a scroll offset.

    Navigation clamps at both ends instead of wrapping around.
    """

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._items: list[T] = []
        self._selected: int | None = None
        self.scroll = ScrollState()
        if items is not None:
            self.install(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return (
            f"SelectableList(items={len(self._items)}, selected={self._selected}, "
            f"offset={self.scroll.offset})"
        )

    @property
    def items(self) -> tuple[T, ...]:
        """Read-only view of the installed items."""
        return tuple(self._items)

    @property
    def selected(self) -> int | None:
        """Index of the selected item, or None."""
        return self._selected

    def is_empty(self) -> bool:
        return not self._items

    def install(self, items: Iterable[T]) -> None:
        """Replace the contents, selecting the first item when there is one."""
        self._items = list(items)
        self._selected = 0 if self._items else None
        self.scroll.reset(len(self._items))

    def advance(self) -> bool:
        """Select the next item.

        Returns:
            True if the selection changed.
        """
        if not self._items:
            return False
        previous = self._selected
        if previous is None:
            self._selected = 0
        elif previous < len(self._items) - 1:
            self._selected = previous + 1
        return self._selected != previous

    def retreat(self) -> bool:
        """Select the previous item.

        Returns:
            True if the selection changed.
        """
        if not self._items:
            return False
        previous = self._selected
        if previous is None:
            self._selected = 0
        elif previous > 0:
            self._selected = previous - 1
        return self._selected != previous

    def move_down(self) -> bool:
        """Advance and scroll the viewport by one on an actual change."""
        changed = self.advance()
        if changed:
            self.scroll.step(1)
        return changed

    def move_up(self) -> bool:
        """Retreat and scroll the viewport back by one on an actual change."""
        changed = self.retreat()
        if changed:
            self.scroll.step(-1)
        return changed

    def select_last(self) -> None:
        """Select the newest (last) item and park the viewport on it."""
        if not self._items:
            self._selected = None
            return
        self._selected = len(self._items) - 1
        self.scroll.position(self._selected)

    def current(self) -> T | None:
        """Return the selected item, or None."""
        if self._selected is None:
            return None
        return self._items[self._selected]


__all__ = [
    "ScrollState",
    "SelectableList",
]
