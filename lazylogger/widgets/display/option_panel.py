"""OptionPanel widget - a bordered, scroll-windowed list painted from a ListPanel.

The panel keeps no selection of its own. Each repaint takes the rows,
selection and scroll hint from the presenter and draws only the rows that fit.

CSS Classes: widget-option-panel, -active, -loading, -error
"""

from __future__ import annotations

from rich.text import Text
from textual.events import Resize

from lazylogger.models.display.frame import ListPanel, ListRow, Tone, visible_window
from lazylogger.widgets.display.custom_static import CustomStatic

_HIGHLIGHT_SYMBOL = ">> "
_ROW_STYLE = ""
_SELECTED_STYLE = "bold reverse"
_COMMITTED_STYLE = "bold black on green"
_TONE_STYLES: dict[Tone, str] = {
    Tone.NORMAL: "",
    Tone.LOADING: "yellow",
    Tone.ERROR: "bold red",
}


class OptionPanel(CustomStatic):
    """Bordered list whose contents come entirely from the presenter."""

    DEFAULT_CLASSES = "widget-option-panel"

    def __init__(self, *, id: str | None = None, classes: str | None = None) -> None:
        super().__init__("", id=id, classes=classes)
        self._panel: ListPanel | None = None

    @property
    def panel(self) -> ListPanel | None:
        return self._panel

    def show(self, panel: ListPanel) -> None:
        """Repaint from ``panel`` unless it is identical to the one on screen."""
        if panel == self._panel:
            return
        self._panel = panel
        self.border_title = panel.title
        self.set_class(panel.active, "-active")
        self.set_class(not panel.rows and panel.tone is Tone.LOADING, "-loading")
        self.set_class(not panel.rows and panel.tone is Tone.ERROR, "-error")
        self.update(self.render_panel(panel, self.content_size.height))

    def on_resize(self, _: Resize) -> None:
        if self._panel is not None:
            self.update(self.render_panel(self._panel, self.content_size.height))

    @staticmethod
    def render_panel(panel: ListPanel, height: int) -> Text:
        """Build the rich Text for ``panel`` in ``height`` visible lines."""
        if not panel.rows:
            return Text(panel.placeholder, style=_TONE_STYLES[panel.tone])

        # Before the first layout pass the height is unknown; draw everything.
        visible = height if height > 0 else len(panel.rows)
        start, end = visible_window(len(panel.rows), panel.selected, panel.offset, visible)
        text = Text(no_wrap=True, overflow="ellipsis")
        for position, row in enumerate(panel.rows[start:end]):
            if position:
                text.append("\n")
            text.append_text(_row_text(row))
        return text


def _row_text(row: ListRow) -> Text:
    prefix = _HIGHLIGHT_SYMBOL if row.selected else " " * len(_HIGHLIGHT_SYMBOL)
    if row.committed:
        style = _COMMITTED_STYLE
    elif row.selected:
        style = _SELECTED_STYLE
    else:
        style = _ROW_STYLE
    return Text.assemble(prefix, (row.text, style))
