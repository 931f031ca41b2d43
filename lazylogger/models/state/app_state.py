"""Application state owned by the scheduler.

One ``AppState`` instance exists per run. It is passed by reference into the
navigation handlers, the loader and the presenter; nothing keeps a global copy.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lazylogger.constants.enums import (
    STAGE_TARGETS,
    ConfigStage,
    LoadState,
    LoadTarget,
    ScreenKind,
)
from lazylogger.models.state.selectable_list import SelectableList


@dataclass
class ConfigSelection:
    """Committed data-source choices; empty string means not committed."""

    profile: str = ""
    cluster: str = ""
    service: str = ""

    def is_complete(self) -> bool:
        return bool(self.profile and self.cluster and self.service)

    def commit_profile(self, profile: str) -> None:
        """Commit a profile, clearing the cluster and service that depended on it."""
        self.profile = profile
        self.cluster = ""
        self.service = ""

    def commit_cluster(self, cluster: str) -> None:
        """Commit a cluster, clearing the service that depended on it."""
        self.cluster = cluster
        self.service = ""

    def commit_service(self, service: str) -> None:
        self.service = service

    def as_tuple(self) -> tuple[str, str, str]:
        return (self.profile, self.cluster, self.service)


@dataclass(frozen=True)
class ScreenState:
    """Active screen plus the data that only some screens carry."""

    kind: ScreenKind = ScreenKind.BROWSING
    stage: ConfigStage | None = None
    entry_index: int | None = None

    @classmethod
    def browsing(cls) -> ScreenState:
        return cls(ScreenKind.BROWSING)

    @classmethod
    def configuring(cls, stage: ConfigStage = ConfigStage.PROFILE) -> ScreenState:
        return cls(ScreenKind.CONFIGURING_SOURCE, stage=stage)

    @classmethod
    def confirm_exit(cls) -> ScreenState:
        return cls(ScreenKind.CONFIRM_EXIT)

    @classmethod
    def viewing_entry(cls, index: int) -> ScreenState:
        return cls(ScreenKind.VIEWING_ENTRY_DETAIL, entry_index=index)


@dataclass
class LoadStatus:
    """Fetch status of one list, so failures read differently from loading."""

    state: LoadState = LoadState.IDLE
    error: str | None = None


def _empty_stage_lists() -> dict[ConfigStage, SelectableList[str]]:
    return {stage: SelectableList() for stage in ConfigStage}


def _idle_load_status() -> dict[LoadTarget, LoadStatus]:
    return {target: LoadStatus() for target in LoadTarget}


@dataclass
class AppState:
    """Everything the TUI displays and the loader decides on."""

    screen: ScreenState = field(default_factory=ScreenState.browsing)
    selection: ConfigSelection = field(default_factory=ConfigSelection)
    stage_lists: dict[ConfigStage, SelectableList[str]] = field(
        default_factory=_empty_stage_lists
    )
    event_log: SelectableList[str] = field(default_factory=SelectableList)
    log_focused: bool = False
    load_status: dict[LoadTarget, LoadStatus] = field(default_factory=_idle_load_status)

    @property
    def active_stage(self) -> ConfigStage | None:
        """Stage being edited, only while configuring the source."""
        if self.screen.kind is ScreenKind.CONFIGURING_SOURCE:
            return self.screen.stage
        return None

    def stage_list(self, stage: ConfigStage) -> SelectableList[str]:
        return self.stage_lists[stage]

    def clear_stage_list(self, stage: ConfigStage) -> None:
        """Replace a stage's list with an empty one and forget its fetch status."""
        self.stage_lists[stage] = SelectableList()
        self.load_status[STAGE_TARGETS[stage]] = LoadStatus()

    def clear_event_log(self) -> None:
        self.event_log = SelectableList()
        self.load_status[LoadTarget.EVENTS] = LoadStatus()

    def list_for(self, target: LoadTarget) -> SelectableList[str]:
        """Return the list a load target fills."""
        if target is LoadTarget.EVENTS:
            return self.event_log
        for stage, stage_target in STAGE_TARGETS.items():
            if stage_target is target:
                return self.stage_lists[stage]
        raise KeyError(target)

    def set_load_state(
        self,
        target: LoadTarget,
        state: LoadState,
        error: str | None = None,
    ) -> None:
        self.load_status[target] = LoadStatus(state=state, error=error)


__all__ = [
    "AppState",
    "ConfigSelection",
    "LoadStatus",
    "ScreenState",
]
