"""Events screen presenter - turns AppState into a paintable Frame.

``build_frame`` only reads the state. The screen applies the resulting Frame
to its widgets, so everything shown on screen can be asserted on without
starting Textual.
"""

from __future__ import annotations

from lazylogger.constants.enums import (
    STAGE_TARGETS,
    ConfigStage,
    LoadState,
    LoadTarget,
    ScreenKind,
)
from lazylogger.constants.values import (
    APP_TITLE,
    EXIT_PROMPT,
    NOT_SETTING_ANYTHING,
    PLACEHOLDER_CONFIGURE,
    PLACEHOLDER_LOADING_EVENTS,
    PLACEHOLDER_NO_ENTRY,
)
from lazylogger.keyboard.keymaps import KEY_HINTS
from lazylogger.models.display.frame import Frame, ListPanel, ListRow, Tone
from lazylogger.models.state.app_state import AppState, LoadStatus
from lazylogger.models.state.selectable_list import SelectableList
from lazylogger.screens.events.config import (
    EVENTS_EMPTY,
    EVENTS_TITLE_FOCUSED,
    EVENTS_TITLE_FOCUSED_EMPTY,
    EVENTS_TITLE_UNFOCUSED,
    SCREEN_MODES,
    STAGE_EDITING,
    STAGE_EMPTY,
    STAGE_LOADING,
    STAGE_TITLES,
)

# =============================================================================
# Helpers
# =============================================================================


def failure_text(status: LoadStatus) -> str:
    return f"Failed: {status.error or 'unknown error'} (retrying)"


def _rows(items: SelectableList[str], committed: str = "") -> tuple[ListRow, ...]:
    selected = items.selected
    return tuple(
        ListRow(
            text=item,
            selected=index == selected,
            committed=bool(committed) and item == committed,
        )
        for index, item in enumerate(items)
    )


def _placeholder(status: LoadStatus, loading: str, empty: str) -> tuple[str, Tone]:
    if status.state is LoadState.FAILED:
        return (failure_text(status), Tone.ERROR)
    if status.state is LoadState.LOADED:
        return (empty, Tone.NORMAL)
    return (loading, Tone.LOADING)


# =============================================================================
# Panels
# =============================================================================


def _events_panel(state: AppState) -> ListPanel:
    log = state.event_log
    on_main = state.screen.kind is ScreenKind.BROWSING
    focused = state.log_focused and on_main

    if not focused:
        title = EVENTS_TITLE_UNFOCUSED
    elif log:
        title = EVENTS_TITLE_FOCUSED
    else:
        title = EVENTS_TITLE_FOCUSED_EMPTY

    if log:
        return ListPanel(
            title=title,
            rows=_rows(log),
            selected=log.selected,
            offset=log.scroll.offset,
            active=focused,
        )

    if on_main and state.selection.is_complete():
        text, tone = _placeholder(
            state.load_status[LoadTarget.EVENTS],
            PLACEHOLDER_LOADING_EVENTS,
            EVENTS_EMPTY,
        )
        return ListPanel(title=title, placeholder=text, tone=tone, active=focused)
    return ListPanel(title=title, placeholder=PLACEHOLDER_CONFIGURE, active=focused)


def _upstream_committed(state: AppState, stage: ConfigStage) -> bool:
    selection = state.selection
    if stage is ConfigStage.CLUSTER:
        return bool(selection.profile)
    if stage is ConfigStage.SERVICE:
        return bool(selection.profile and selection.cluster)
    return True


def _stage_panel(state: AppState, stage: ConfigStage) -> ListPanel:
    items = state.stage_list(stage)
    committed = getattr(state.selection, stage.value)
    active = state.active_stage is stage

    if items:
        return ListPanel(
            title=STAGE_TITLES[stage],
            rows=_rows(items, committed),
            selected=items.selected,
            offset=items.scroll.offset,
            active=active,
        )

    status = state.load_status[STAGE_TARGETS[stage]]
    if status.state is LoadState.IDLE and not _upstream_committed(state, stage):
        return ListPanel(title=STAGE_TITLES[stage], active=active)
    text, tone = _placeholder(status, STAGE_LOADING[stage], STAGE_EMPTY[stage])
    return ListPanel(title=STAGE_TITLES[stage], placeholder=text, tone=tone, active=active)


def _detail_text(state: AppState) -> str:
    index = state.screen.entry_index
    items = state.event_log.items
    if index is None or not 0 <= index < len(items):
        return PLACEHOLDER_NO_ENTRY
    return items[index]


# =============================================================================
# Frame
# =============================================================================


def build_frame(state: AppState) -> Frame:
    """Describe everything the screen should show for ``state``."""
    kind = state.screen.kind
    stage = state.active_stage

    config_panels: tuple[ListPanel, ...] = ()
    if kind is ScreenKind.CONFIGURING_SOURCE:
        config_panels = tuple(_stage_panel(state, each) for each in ConfigStage)

    return Frame(
        title=APP_TITLE,
        events=_events_panel(state),
        mode=SCREEN_MODES[kind],
        editing=STAGE_EDITING[stage] if stage is not None else NOT_SETTING_ANYTHING,
        key_hint=KEY_HINTS[kind],
        config_panels=config_panels,
        exit_prompt=EXIT_PROMPT if kind is ScreenKind.CONFIRM_EXIT else None,
        detail=_detail_text(state) if kind is ScreenKind.VIEWING_ENTRY_DETAIL else None,
    )


__all__ = [
    "build_frame",
    "failure_text",
]
