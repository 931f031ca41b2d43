"""Tick-driven event loop."""

from lazylogger.runtime.scheduler import (
    InputSource,
    KeyEvent,
    QueueInputSource,
    Scheduler,
)

__all__ = ["InputSource", "KeyEvent", "QueueInputSource", "Scheduler"]
