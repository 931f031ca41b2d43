"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, auto

# =============================================================================
# Navigation Enums
# =============================================================================


class ScreenKind(Enum):
    """Top-level screens the application can be on."""

    BROWSING = "browsing"
    CONFIGURING_SOURCE = "configuring_source"
    CONFIRM_EXIT = "confirm_exit"
    VIEWING_ENTRY_DETAIL = "viewing_entry_detail"


class ConfigStage(Enum):
    """Sequential data-source configuration steps."""

    PROFILE = "profile"
    CLUSTER = "cluster"
    SERVICE = "service"

    def next(self) -> "ConfigStage":
        """Return the stage after this one, cycling back to PROFILE."""
        members = list(ConfigStage)
        return members[(members.index(self) + 1) % len(members)]


# =============================================================================
# Fetch State Enums
# =============================================================================


class LoadTarget(Enum):
    """Lists the loader can populate."""

    PROFILES = "profiles"
    CLUSTERS = "clusters"
    SERVICES = "services"
    EVENTS = "events"


STAGE_TARGETS: dict[ConfigStage, LoadTarget] = {
    ConfigStage.PROFILE: LoadTarget.PROFILES,
    ConfigStage.CLUSTER: LoadTarget.CLUSTERS,
    ConfigStage.SERVICE: LoadTarget.SERVICES,
}


class LoadState(Enum):
    """Load state values for a single list."""

    IDLE = auto()  # Not yet requested
    LOADING = auto()  # Fetch outstanding
    LOADED = auto()  # Data installed
    FAILED = auto()  # Last fetch failed, retried next tick


class EventSource(Enum):
    """Where the event panel reads its lines from."""

    SERVICE_EVENTS = "service-events"
    CLOUDWATCH_LOGS = "cloudwatch-logs"


# =============================================================================
# Input Enums
# =============================================================================


class InputKey(Enum):
    """Symbolic key-press signals understood by the navigation handlers."""

    NAVIGATE_UP = "navigate_up"
    NAVIGATE_DOWN = "navigate_down"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    SWITCH_STAGE = "switch_stage"
    OPEN_CONFIGURATION = "open_configuration"
    QUIT = "quit"
    CONFIRM_EXIT = "confirm_exit"
    DECLINE_EXIT = "decline_exit"
    TOGGLE_LOG_FOCUS = "toggle_log_focus"
    REFRESH = "refresh"
    OPEN_DETAIL = "open_detail"
    CLOSE_DETAIL = "close_detail"


class KeyEventKind(Enum):
    """Transition reported by the input source for a key."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


__all__ = [
    "STAGE_TARGETS",
    "ConfigStage",
    "EventSource",
    "InputKey",
    "KeyEventKind",
    "LoadState",
    "LoadTarget",
    "ScreenKind",
]
