"""Screens for the LazyLogger TUI."""

from lazylogger.screens.events import EventsScreen

__all__ = ["EventsScreen"]
