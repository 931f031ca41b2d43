"""Events screen configuration - titles, labels and placeholder text."""

from __future__ import annotations

from typing import Final

from lazylogger.constants.enums import ConfigStage, ScreenKind
from lazylogger.constants.values import (
    MODE_ENTRY_DETAIL,
    MODE_EXITING,
    MODE_LOGGING,
    MODE_SET_SOURCE,
)

# ============================================================================
# Event panel
# ============================================================================

EVENTS_TITLE_UNFOCUSED: Final = " Service Events - (e) to focus "
EVENTS_TITLE_FOCUSED: Final = " Service Events - (e) to unfocus - (r) to refresh "
EVENTS_TITLE_FOCUSED_EMPTY: Final = " Service Events - (e) to unfocus "
EVENTS_EMPTY: Final = "No service events found"

# ============================================================================
# Status line
# ============================================================================

SCREEN_MODES: Final[dict[ScreenKind, str]] = {
    ScreenKind.BROWSING: MODE_LOGGING,
    ScreenKind.CONFIGURING_SOURCE: MODE_SET_SOURCE,
    ScreenKind.CONFIRM_EXIT: MODE_EXITING,
    ScreenKind.VIEWING_ENTRY_DETAIL: MODE_ENTRY_DETAIL,
}

STAGE_EDITING: Final[dict[ConfigStage, str]] = {
    ConfigStage.PROFILE: "Setting AWS Profile",
    ConfigStage.CLUSTER: "Setting ECS Cluster",
    ConfigStage.SERVICE: "Setting ECS Service",
}

# ============================================================================
# Data source popup
# ============================================================================

CONFIG_POPUP_TITLE: Final = "Setting Data Source"

STAGE_TITLES: Final[dict[ConfigStage, str]] = {
    ConfigStage.PROFILE: "AWS Profile",
    ConfigStage.CLUSTER: "ECS Cluster",
    ConfigStage.SERVICE: "ECS Service",
}

STAGE_LOADING: Final[dict[ConfigStage, str]] = {
    ConfigStage.PROFILE: "Loading Profiles...",
    ConfigStage.CLUSTER: "Loading Clusters...",
    ConfigStage.SERVICE: "Loading Services...",
}

STAGE_EMPTY: Final[dict[ConfigStage, str]] = {
    ConfigStage.PROFILE: "No profiles found",
    ConfigStage.CLUSTER: "No clusters found",
    ConfigStage.SERVICE: "No services found",
}

# ============================================================================
# Dialogs
# ============================================================================

EXIT_POPUP_TITLE: Final = " Exit LazyLogger "
DETAIL_POPUP_TITLE: Final = " Entry Detail "
