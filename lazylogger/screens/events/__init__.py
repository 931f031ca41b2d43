"""Events screen: presenter and Textual screen."""

from lazylogger.screens.events.events_screen import EventsScreen
from lazylogger.screens.events.presenter import build_frame, failure_text

__all__ = ["EventsScreen", "build_frame", "failure_text"]
