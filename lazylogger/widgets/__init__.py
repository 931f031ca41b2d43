"""Widgets module for the LazyLogger TUI.

- display: CustomStatic and the presenter-driven OptionPanel
"""

from lazylogger.widgets.display import CustomStatic, OptionPanel

__all__ = ["CustomStatic", "OptionPanel"]
