"""Fixed-tick scheduler that owns the application state.

Every iteration waits for one key event, bounded by what is left of the tick
interval. A pressed key is dispatched to the active screen's handler. Once the
interval has elapsed the loader runs. The frame is repainted only when something
marked it dirty.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from lazylogger.constants.enums import InputKey, KeyEventKind, ScreenKind
from lazylogger.constants.timeouts import TICK_INTERVAL_MS
from lazylogger.controllers.loader.cascading_loader import CascadingResourceLoader
from lazylogger.keyboard.keymaps import resolve_key
from lazylogger.keyboard.navigation import KeyOutcome, handle_key
from lazylogger.models.state.app_state import AppState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyEvent:
    """A raw key event as delivered by the terminal."""

    key: str
    kind: KeyEventKind = KeyEventKind.PRESS


class InputSource(Protocol):
    """Anything the scheduler can poll for key events."""

    async def next_event(self, timeout: float) -> KeyEvent | None:
        """Return the next event, or None once ``timeout`` seconds pass."""
        ...


class QueueInputSource:
    """Input source fed by the Textual app's key handler."""

    def __init__(self) -> None:
        self._queue: asyncio.Queue[KeyEvent] = asyncio.Queue()

    def push(self, event: KeyEvent) -> None:
        self._queue.put_nowait(event)

    async def next_event(self, timeout: float) -> KeyEvent | None:
        try:
            return self._queue.get_nowait()
        except asyncio.QueueEmpty:
            if timeout <= 0:
                return None
        try:
            return await asyncio.wait_for(self._queue.get(), timeout)
        except asyncio.TimeoutError:
            return None


class Scheduler:
    """Runs the input -> loader -> render loop until the user confirms exit."""

    def __init__(
        self,
        state: AppState,
        loader: CascadingResourceLoader,
        render: Callable[[AppState], None],
        input_source: InputSource,
        *,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        resolve: Callable[[ScreenKind, str], InputKey | None] = resolve_key,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive")
        self._state = state
        self._loader = loader
        self._render = render
        self._input = input_source
        self._interval = tick_interval_ms / 1000
        self._resolve = resolve
        self._clock = clock
        self._dirty = True
        self._running = False
        self._ticks = 0

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def ticks(self) -> int:
        return self._ticks

    def stop(self) -> None:
        """Ask the loop to end after the current iteration."""
        self._running = False

    def dispatch(self, event: KeyEvent) -> KeyOutcome:
        """Route one raw event to the active screen's handler."""
        if event.kind is not KeyEventKind.PRESS:
            return KeyOutcome.CONTINUE
        self._dirty = True
        key = self._resolve(self._state.screen.kind, event.key)
        if key is None:
            return KeyOutcome.CONTINUE
        logger.debug("Key %r -> %s on %s", event.key, key.value, self._state.screen.kind.value)
        return handle_key(self._state, key)

    async def run(self) -> bool:
        """Drive the loop.

        Returns:
            True when the user confirmed exit, False when stopped externally.
        """
        self._running = True
        last_tick = self._clock()
        while self._running:
            if self._dirty:
                self._render(self._state)
                self._dirty = False

            remaining = max(0.0, self._interval - (self._clock() - last_tick))
            event = await self._input.next_event(remaining)
            if event is not None and self.dispatch(event) is KeyOutcome.EXIT:
                logger.info("Exit confirmed")
                return True

            if self._clock() - last_tick >= self._interval:
                await self._loader.tick(self._state)
                self._ticks += 1
                self._dirty = True
                last_tick = self._clock()

        logger.debug("Scheduler stopped after %s ticks", self._ticks)
        return False


__all__ = [
    "InputSource",
    "KeyEvent",
    "QueueInputSource",
    "Scheduler",
]
