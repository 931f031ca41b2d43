"""Screen and configuration-stage state machine.

Each handler receives the single ``AppState`` and one symbolic key, mutates the
state in place, and returns a ``KeyOutcome``. Keys a screen does not handle are
ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from lazylogger.constants.enums import ConfigStage, InputKey, ScreenKind
from lazylogger.models.state.app_state import AppState, ScreenState

logger = logging.getLogger(__name__)


class KeyOutcome(Enum):
    """What the scheduler should do after a key was handled."""

    CONTINUE = "continue"
    EXIT = "exit"


# ============================================================================
# Browsing
# ============================================================================


def handle_browsing_key(state: AppState, key: InputKey) -> KeyOutcome:
    """Keys available on the main log view."""
    if key is InputKey.OPEN_CONFIGURATION:
        state.screen = ScreenState.configuring(ConfigStage.PROFILE)
    elif key is InputKey.QUIT:
        state.screen = ScreenState.confirm_exit()
    elif key is InputKey.TOGGLE_LOG_FOCUS:
        state.log_focused = not state.log_focused
    elif not state.log_focused:
        return KeyOutcome.CONTINUE
    elif key is InputKey.REFRESH:
        logger.debug("Refreshing events for %s", state.selection.as_tuple())
        state.clear_event_log()
    elif key is InputKey.NAVIGATE_DOWN:
        state.event_log.move_down()
    elif key is InputKey.NAVIGATE_UP:
        state.event_log.move_up()
    elif key is InputKey.OPEN_DETAIL:
        index = state.event_log.selected
        if index is not None:
            state.screen = ScreenState.viewing_entry(index)
    return KeyOutcome.CONTINUE


# ============================================================================
# Confirm exit / entry detail
# ============================================================================


def handle_confirm_exit_key(state: AppState, key: InputKey) -> KeyOutcome:
    if key is InputKey.CONFIRM_EXIT:
        return KeyOutcome.EXIT
    if key in (InputKey.DECLINE_EXIT, InputKey.CANCEL):
        state.screen = ScreenState.browsing()
    return KeyOutcome.CONTINUE


def handle_entry_detail_key(state: AppState, key: InputKey) -> KeyOutcome:
    if key in (InputKey.CLOSE_DETAIL, InputKey.CANCEL):
        state.screen = ScreenState.browsing()
    return KeyOutcome.CONTINUE


# ============================================================================
# Configuring the data source
# ============================================================================


def commit_stage(state: AppState, stage: ConfigStage) -> bool:
    """Commit the selection of ``stage`` and invalidate everything downstream.

    Returns:
        False when the stage's list has no selection (nothing changes).
    """
    choice = state.stage_list(stage).current()
    if choice is None:
        return False

    if stage is ConfigStage.PROFILE:
        state.selection.commit_profile(choice)
        state.clear_stage_list(ConfigStage.CLUSTER)
        state.clear_stage_list(ConfigStage.SERVICE)
        state.clear_event_log()
        state.screen = ScreenState.configuring(ConfigStage.CLUSTER)
    elif stage is ConfigStage.CLUSTER:
        state.selection.commit_cluster(choice)
        state.clear_stage_list(ConfigStage.SERVICE)
        state.screen = ScreenState.configuring(ConfigStage.SERVICE)
    else:
        state.selection.commit_service(choice)
        state.screen = ScreenState.browsing()

    logger.debug("Committed %s=%r", stage.value, choice)
    return True


def handle_configuring_key(state: AppState, key: InputKey) -> KeyOutcome:
    """Keys available while the data-source picker is open."""
    stage = state.screen.stage or ConfigStage.PROFILE
    if key is InputKey.CANCEL:
        state.screen = ScreenState.browsing()
    elif key is InputKey.SWITCH_STAGE:
        state.screen = ScreenState.configuring(stage.next())
    elif key is InputKey.CONFIRM:
        commit_stage(state, stage)
    elif key is InputKey.NAVIGATE_DOWN:
        state.stage_list(stage).move_down()
    elif key is InputKey.NAVIGATE_UP:
        state.stage_list(stage).move_up()
    return KeyOutcome.CONTINUE


SCREEN_HANDLERS: dict[ScreenKind, Callable[[AppState, InputKey], KeyOutcome]] = {
    ScreenKind.BROWSING: handle_browsing_key,
    ScreenKind.CONFIGURING_SOURCE: handle_configuring_key,
    ScreenKind.CONFIRM_EXIT: handle_confirm_exit_key,
    ScreenKind.VIEWING_ENTRY_DETAIL: handle_entry_detail_key,
}


def handle_key(state: AppState, key: InputKey) -> KeyOutcome:
    """Dispatch ``key`` to the handler of the active screen."""
    return SCREEN_HANDLERS[state.screen.kind](state, key)


__all__ = [
    "SCREEN_HANDLERS",
    "KeyOutcome",
    "commit_stage",
    "handle_browsing_key",
    "handle_configuring_key",
    "handle_confirm_exit_key",
    "handle_entry_detail_key",
    "handle_key",
]
