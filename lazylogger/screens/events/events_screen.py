"""Events screen - paints Frames produced by the presenter.

The screen owns no application state. Raw keys are handed to the callback the
app supplies, and ``apply_frame`` is the only way its widgets change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import Screen

from lazylogger.constants.enums import ConfigStage
from lazylogger.constants.values import (
    APP_TITLE,
    MODE_ENTRY_DETAIL,
    MODE_EXITING,
    MODE_LOGGING,
    MODE_SET_SOURCE,
)
from lazylogger.models.display.frame import Frame
from lazylogger.screens.events.config import (
    CONFIG_POPUP_TITLE,
    DETAIL_POPUP_TITLE,
    EXIT_POPUP_TITLE,
)
from lazylogger.widgets import CustomStatic, OptionPanel

logger = logging.getLogger(__name__)

_MODE_STYLES: dict[str, str] = {
    MODE_LOGGING: "bold green",
    MODE_SET_SOURCE: "bold yellow",
    MODE_EXITING: "bold red",
    MODE_ENTRY_DETAIL: "bold cyan",
}


class EventsScreen(Screen[None]):
    """Event log view with the data-source picker and dialogs below it."""

    def __init__(self, on_raw_key: Callable[[str], None]) -> None:
        super().__init__()
        self._on_raw_key = on_raw_key

    def compose(self) -> ComposeResult:
        yield CustomStatic(APP_TITLE, id="title")
        yield OptionPanel(id="events-panel")
        with Vertical(id="config-popup", classes="hidden"):
            with Horizontal(id="config-panels"):
                for stage in ConfigStage:
                    yield OptionPanel(id=f"config-{stage.value}", classes="config-panel")
        yield CustomStatic("", id="exit-popup", classes="hidden")
        yield CustomStatic("", id="detail-popup", classes="hidden")
        with Horizontal(id="status-bar"):
            yield CustomStatic("", id="status-mode")
            yield CustomStatic("", id="status-hint")

    def on_mount(self) -> None:
        with suppress(NoMatches):
            self.query_one("#config-popup", Vertical).border_title = CONFIG_POPUP_TITLE
            self.query_one("#exit-popup", CustomStatic).border_title = EXIT_POPUP_TITLE
            self.query_one("#detail-popup", CustomStatic).border_title = DETAIL_POPUP_TITLE

    def on_key(self, event: Key) -> None:
        # Every key goes to the scheduler; the keymaps decide what it means.
        event.stop()
        event.prevent_default()
        self._on_raw_key(event.key)

    # =========================================================================
    # Painting
    # =========================================================================

    def apply_frame(self, frame: Frame) -> None:
        """Bring every widget in line with ``frame``."""
        try:
            self.query_one("#title", CustomStatic).update(frame.title)
            self.query_one("#events-panel", OptionPanel).show(frame.events)
            self._apply_status(frame)
            self._apply_config_popup(frame)
            self._apply_dialogs(frame)
        except NoMatches:
            # Not composed yet; the next dirty tick paints again.
            logger.debug("Skipped frame before compose finished")

    def _apply_status(self, frame: Frame) -> None:
        mode = Text.assemble(
            (frame.mode, _MODE_STYLES.get(frame.mode, "")),
            " | ",
            (frame.editing, "italic"),
        )
        self.query_one("#status-mode", CustomStatic).update(mode)
        self.query_one("#status-hint", CustomStatic).update(frame.key_hint)

    def _apply_config_popup(self, frame: Frame) -> None:
        popup = self.query_one("#config-popup", Vertical)
        popup.set_class(not frame.config_panels, "hidden")
        for stage, panel in zip(ConfigStage, frame.config_panels):
            self.query_one(f"#config-{stage.value}", OptionPanel).show(panel)

    def _apply_dialogs(self, frame: Frame) -> None:
        exit_popup = self.query_one("#exit-popup", CustomStatic)
        exit_popup.set_visible(frame.exit_prompt is not None)
        if frame.exit_prompt is not None:
            exit_popup.update(frame.exit_prompt)

        detail_popup = self.query_one("#detail-popup", CustomStatic)
        detail_popup.set_visible(frame.detail is not None)
        if frame.detail is not None:
            detail_popup.update(frame.detail)


__all__ = ["EventsScreen"]
