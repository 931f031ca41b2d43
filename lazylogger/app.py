"""Main application class for the LazyLogger TUI."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from textual.app import App

from lazylogger.constants import APP_TITLE, THEME_DEFAULT
from lazylogger.controllers.aws import AwsProvider
from lazylogger.controllers.base import BaseProvider
from lazylogger.controllers.loader import CascadingResourceLoader
from lazylogger.models.state.app_state import AppState
from lazylogger.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)
from lazylogger.runtime import KeyEvent, QueueInputSource, Scheduler
from lazylogger.screens import EventsScreen
from lazylogger.screens.events.presenter import build_frame

logger = logging.getLogger(__name__)


class LazyLoggerApp(App[bool]):
    """Terminal UI for tailing ECS service events.

    The app is a thin shell: the scheduler owns ``state`` and decides when to
    fetch and repaint, and the screen only paints what the presenter builds.
    """

    TITLE = APP_TITLE
    CSS_PATH = "css/app.tcss"

    settings: AppSettings
    state: AppState

    def __init__(
        self,
        config_path: str | Path | None = None,
        overrides: Mapping[str, Any] | None = None,
        provider: BaseProvider | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.config_path = config_path
        self.overrides = dict(overrides or {})
        self.settings_error: str | None = None

        self.state = AppState()
        self._load_settings()

        self.provider = provider or AwsProvider(self.settings)
        self.loader = CascadingResourceLoader(
            self.provider,
            background=self.settings.background_fetch,
        )
        self.input_source = QueueInputSource()
        self.scheduler: Scheduler | None = None
        self.events_screen: EventsScreen | None = None

    def _load_settings(self) -> None:
        """Load settings from disk, then apply command-line overrides."""
        try:
            settings = ConfigManager.load(self.config_path)
        except ConfigLoadError as exc:
            # Use defaults if loading fails
            logger.warning("Falling back to default settings: %s", exc)
            self.settings_error = str(exc)
            settings = AppSettings()

        if self.overrides:
            settings = AppSettings.model_validate(
                {**settings.model_dump(), **self.overrides}
            )
        self.settings = settings
        self._apply_theme()

    def _apply_theme(self) -> None:
        """Apply the stored theme, falling back when Textual does not know it."""
        theme_name = str(self.settings.theme or "").strip()
        if theme_name not in self.available_themes:
            logger.warning("Unknown theme %r, using %s", theme_name, THEME_DEFAULT)
            theme_name = THEME_DEFAULT
        self.settings.theme = theme_name
        self.theme = theme_name

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.events_screen = EventsScreen(on_raw_key=self.forward_key)
        self.push_screen(self.events_screen)
        if self.settings_error:
            self.notify(f"Settings not loaded: {self.settings_error}", severity="warning")
        self.run_worker(self._run_scheduler(), name="scheduler", exclusive=True)

    def forward_key(self, key: str) -> None:
        """Queue a raw key for the scheduler."""
        self.input_source.push(KeyEvent(key))

    def _render_state(self, state: AppState) -> None:
        if self.events_screen is not None:
            self.events_screen.apply_frame(build_frame(state))

    async def _run_scheduler(self) -> None:
        self.scheduler = Scheduler(
            self.state,
            self.loader,
            self._render_state,
            self.input_source,
            tick_interval_ms=self.settings.tick_interval_ms,
        )
        confirmed = await self.scheduler.run()
        self.exit(confirmed)

    def action_quit(self) -> None:  # type: ignore[override]
        """Quit without the confirmation prompt (Ctrl+Q)."""
        if self.scheduler is not None:
            self.scheduler.stop()
        self.exit(False)

    async def on_unmount(self) -> None:
        """Cancel outstanding fetches and release AWS clients."""
        await self.loader.aclose()
        await self.provider.aclose()


__all__ = [
    "LazyLoggerApp",
]
