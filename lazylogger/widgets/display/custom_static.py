"""CustomStatic widget for the TUI application.

Standard Wrapper Pattern:
- Wraps Textual's Static with standardized styling
- Markup is off unless asked for, since log lines contain brackets

CSS Classes: widget-custom-static
"""

from __future__ import annotations

from textual.widgets import Static as TextualStatic


class CustomStatic(TextualStatic):
    """Static text with the application's default classes.

    Example:
        >>> title = CustomStatic("LazyLogger", id="title")
        >>> yield title
    """

    DEFAULT_CLASSES = "widget-custom-static"

    def __init__(
        self,
        content: object = "",
        *,
        markup: bool = False,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(content, markup=markup, id=id, classes=classes)

    def set_visible(self, visible: bool) -> None:
        """Toggle the ``hidden`` class used by the stylesheet."""
        self.set_class(not visible, "hidden")
