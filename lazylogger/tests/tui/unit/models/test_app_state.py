"""Tests for AppState, ConfigSelection and ScreenState."""

from __future__ import annotations

from lazylogger.constants.enums import ConfigStage, LoadState, LoadTarget, ScreenKind
from lazylogger.models.state.app_state import (
    AppState,
    ConfigSelection,
    ScreenState,
)


class TestConfigSelection:
    """Tests for cascading clears on commit."""

    def test_empty_selection_is_incomplete(self) -> None:
        assert ConfigSelection().is_complete() is False

    def test_commit_profile_clears_downstream(self) -> None:
        selection = ConfigSelection(profile="dev", cluster="web", service="api")
        selection.commit_profile("prod")
        assert selection.as_tuple() == ("prod", "", "")

    def test_commit_cluster_clears_service(self) -> None:
        selection = ConfigSelection(profile="dev", cluster="web", service="api")
        selection.commit_cluster("batch")
        assert selection.as_tuple() == ("dev", "batch", "")

    def test_commit_service_completes(self) -> None:
        selection = ConfigSelection(profile="dev", cluster="web")
        selection.commit_service("api")
        assert selection.is_complete() is True


class TestScreenState:
    """Tests for the screen constructors."""

    def test_default_is_browsing(self) -> None:
        screen = ScreenState()
        assert screen.kind is ScreenKind.BROWSING
        assert screen.stage is None

    def test_configuring_defaults_to_profile(self) -> None:
        screen = ScreenState.configuring()
        assert screen.kind is ScreenKind.CONFIGURING_SOURCE
        assert screen.stage is ConfigStage.PROFILE

    def test_viewing_entry_records_index(self) -> None:
        screen = ScreenState.viewing_entry(7)
        assert screen.kind is ScreenKind.VIEWING_ENTRY_DETAIL
        assert screen.entry_index == 7


class TestAppState:
    """Tests for the owned application state."""

    def test_defaults(self) -> None:
        state = AppState()
        assert state.screen.kind is ScreenKind.BROWSING
        assert state.active_stage is None
        assert state.event_log.is_empty()
        assert state.log_focused is False
        assert set(state.stage_lists) == set(ConfigStage)
        assert all(status.state is LoadState.IDLE for status in state.load_status.values())

    def test_active_stage_only_while_configuring(self) -> None:
        state = AppState(screen=ScreenState.configuring(ConfigStage.SERVICE))
        assert state.active_stage is ConfigStage.SERVICE
        state.screen = ScreenState.confirm_exit()
        assert state.active_stage is None

    def test_list_for_maps_targets(self) -> None:
        state = AppState()
        assert state.list_for(LoadTarget.EVENTS) is state.event_log
        assert state.list_for(LoadTarget.CLUSTERS) is state.stage_list(ConfigStage.CLUSTER)

    def test_clear_stage_list_resets_status(self) -> None:
        state = AppState()
        state.stage_list(ConfigStage.CLUSTER).install(["web"])
        state.set_load_state(LoadTarget.CLUSTERS, LoadState.LOADED)

        state.clear_stage_list(ConfigStage.CLUSTER)

        assert state.stage_list(ConfigStage.CLUSTER).is_empty()
        assert state.load_status[LoadTarget.CLUSTERS].state is LoadState.IDLE

    def test_clear_event_log_resets_status(self) -> None:
        state = AppState()
        state.event_log.install(["line"])
        state.set_load_state(LoadTarget.EVENTS, LoadState.FAILED, "boom")

        state.clear_event_log()

        assert state.event_log.is_empty()
        status = state.load_status[LoadTarget.EVENTS]
        assert status.state is LoadState.IDLE
        assert status.error is None

    def test_instances_do_not_share_lists(self) -> None:
        first, second = AppState(), AppState()
        first.stage_list(ConfigStage.PROFILE).install(["dev"])
        assert second.stage_list(ConfigStage.PROFILE).is_empty()
