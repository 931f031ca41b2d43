"""Tests for the screen and configuration-stage state machine."""

from __future__ import annotations

from lazylogger.constants.enums import ConfigStage, InputKey, LoadState, LoadTarget, ScreenKind
from lazylogger.keyboard.navigation import KeyOutcome, commit_stage, handle_key
from lazylogger.models.state.app_state import AppState, ScreenState


def _configuring(stage: ConfigStage = ConfigStage.PROFILE) -> AppState:
    return AppState(screen=ScreenState.configuring(stage))


class TestBrowsingKeys:
    """Tests for keys on the main log view."""

    def test_open_configuration_starts_at_profile(self) -> None:
        state = AppState()
        handle_key(state, InputKey.OPEN_CONFIGURATION)
        assert state.screen.kind is ScreenKind.CONFIGURING_SOURCE
        assert state.screen.stage is ConfigStage.PROFILE

    def test_quit_asks_for_confirmation(self) -> None:
        state = AppState()
        assert handle_key(state, InputKey.QUIT) is KeyOutcome.CONTINUE
        assert state.screen.kind is ScreenKind.CONFIRM_EXIT

    def test_toggle_log_focus(self) -> None:
        state = AppState()
        handle_key(state, InputKey.TOGGLE_LOG_FOCUS)
        assert state.log_focused is True
        handle_key(state, InputKey.TOGGLE_LOG_FOCUS)
        assert state.log_focused is False

    def test_navigation_ignored_without_focus(self) -> None:
        state = AppState()
        state.event_log.install(["a", "b"])
        handle_key(state, InputKey.NAVIGATE_DOWN)
        assert state.event_log.selected == 0

    def test_navigation_moves_event_log_when_focused(self) -> None:
        state = AppState(log_focused=True)
        state.event_log.install(["a", "b", "c"])
        state.event_log.select_last()
        handle_key(state, InputKey.NAVIGATE_UP)
        assert state.event_log.selected == 1
        handle_key(state, InputKey.NAVIGATE_DOWN)
        handle_key(state, InputKey.NAVIGATE_DOWN)
        assert state.event_log.selected == 2

    def test_refresh_requires_focus(self) -> None:
        state = AppState()
        state.event_log.install(["a"])
        handle_key(state, InputKey.REFRESH)
        assert not state.event_log.is_empty()

    def test_refresh_empties_event_log(self, browsing_state: AppState) -> None:
        browsing_state.log_focused = True
        browsing_state.event_log.install(["a", "b"])
        browsing_state.set_load_state(LoadTarget.EVENTS, LoadState.LOADED)

        handle_key(browsing_state, InputKey.REFRESH)

        assert browsing_state.event_log.is_empty()
        assert browsing_state.load_status[LoadTarget.EVENTS].state is LoadState.IDLE

    def test_open_detail_records_selected_index(self) -> None:
        state = AppState(log_focused=True)
        state.event_log.install(["a", "b", "c"])
        state.event_log.select_last()
        handle_key(state, InputKey.OPEN_DETAIL)
        assert state.screen.kind is ScreenKind.VIEWING_ENTRY_DETAIL
        assert state.screen.entry_index == 2

    def test_open_detail_without_entry_is_noop(self) -> None:
        state = AppState(log_focused=True)
        handle_key(state, InputKey.OPEN_DETAIL)
        assert state.screen.kind is ScreenKind.BROWSING


class TestConfirmExitAndDetailKeys:
    """Tests for the exit prompt and the detail view."""

    def test_confirm_exit_signals_exit(self) -> None:
        state = AppState(screen=ScreenState.confirm_exit())
        assert handle_key(state, InputKey.CONFIRM_EXIT) is KeyOutcome.EXIT

    def test_decline_and_cancel_return_to_browsing(self) -> None:
        for key in (InputKey.DECLINE_EXIT, InputKey.CANCEL):
            state = AppState(screen=ScreenState.confirm_exit())
            assert handle_key(state, key) is KeyOutcome.CONTINUE
            assert state.screen.kind is ScreenKind.BROWSING

    def test_close_detail_returns_to_browsing(self) -> None:
        for key in (InputKey.CLOSE_DETAIL, InputKey.CANCEL):
            state = AppState(screen=ScreenState.viewing_entry(0))
            handle_key(state, key)
            assert state.screen.kind is ScreenKind.BROWSING

    def test_browsing_keys_ignored_on_exit_prompt(self) -> None:
        state = AppState(screen=ScreenState.confirm_exit())
        handle_key(state, InputKey.OPEN_CONFIGURATION)
        assert state.screen.kind is ScreenKind.CONFIRM_EXIT


class TestConfiguringKeys:
    """Tests for the data-source picker."""

    def test_cancel_keeps_committed_selection(self, browsing_state: AppState) -> None:
        browsing_state.screen = ScreenState.configuring(ConfigStage.CLUSTER)
        browsing_state.stage_list(ConfigStage.CLUSTER).install(["batch", "web"])

        handle_key(browsing_state, InputKey.CANCEL)

        assert browsing_state.screen.kind is ScreenKind.BROWSING
        assert browsing_state.selection.as_tuple() == ("dev", "web", "api")

    def test_switch_stage_cycles_without_selection(self) -> None:
        state = _configuring()
        stages = []
        for _ in range(3):
            handle_key(state, InputKey.SWITCH_STAGE)
            stages.append(state.screen.stage)
        assert stages == [ConfigStage.CLUSTER, ConfigStage.SERVICE, ConfigStage.PROFILE]

    def test_navigation_targets_active_stage_list(self) -> None:
        state = _configuring(ConfigStage.CLUSTER)
        state.stage_list(ConfigStage.PROFILE).install(["dev", "prod"])
        state.stage_list(ConfigStage.CLUSTER).install(["batch", "web"])

        handle_key(state, InputKey.NAVIGATE_DOWN)

        assert state.stage_list(ConfigStage.CLUSTER).selected == 1
        assert state.stage_list(ConfigStage.CLUSTER).scroll.offset == 1
        assert state.stage_list(ConfigStage.PROFILE).selected == 0

    def test_confirm_profile_cascades(self) -> None:
        state = _configuring()
        state.stage_list(ConfigStage.PROFILE).install(["dev", "prod"])
        state.stage_list(ConfigStage.CLUSTER).install(["old-cluster"])
        state.stage_list(ConfigStage.SERVICE).install(["old-service"])
        state.selection.cluster = "old-cluster"
        state.selection.service = "old-service"
        state.event_log.install(["stale"])

        handle_key(state, InputKey.CONFIRM)

        assert state.selection.as_tuple() == ("dev", "", "")
        assert state.screen.kind is ScreenKind.CONFIGURING_SOURCE
        assert state.screen.stage is ConfigStage.CLUSTER
        assert state.stage_list(ConfigStage.CLUSTER).is_empty()
        assert state.stage_list(ConfigStage.SERVICE).is_empty()
        assert state.event_log.is_empty()

    def test_confirm_cluster_clears_service(self) -> None:
        state = _configuring(ConfigStage.CLUSTER)
        state.selection.commit_profile("dev")
        state.stage_list(ConfigStage.CLUSTER).install(["batch", "web"])
        state.stage_list(ConfigStage.CLUSTER).advance()
        state.stage_list(ConfigStage.SERVICE).install(["cron"])

        handle_key(state, InputKey.CONFIRM)

        assert state.selection.as_tuple() == ("dev", "web", "")
        assert state.screen.stage is ConfigStage.SERVICE
        assert state.stage_list(ConfigStage.SERVICE).is_empty()

    def test_confirm_service_returns_to_browsing(self) -> None:
        state = _configuring(ConfigStage.SERVICE)
        state.selection.commit_profile("dev")
        state.selection.commit_cluster("web")
        state.stage_list(ConfigStage.SERVICE).install(["api", "worker"])

        handle_key(state, InputKey.CONFIRM)

        assert state.selection.as_tuple() == ("dev", "web", "api")
        assert state.screen.kind is ScreenKind.BROWSING
        assert state.screen.stage is None

    def test_confirm_service_without_selection_is_noop(self) -> None:
        state = _configuring(ConfigStage.SERVICE)
        state.selection.commit_profile("dev")
        state.selection.commit_cluster("web")

        handle_key(state, InputKey.CONFIRM)

        assert state.screen == ScreenState.configuring(ConfigStage.SERVICE)
        assert state.selection.service == ""

    def test_commit_stage_reports_no_selection(self) -> None:
        state = _configuring()
        assert commit_stage(state, ConfigStage.PROFILE) is False
        assert state.screen.stage is ConfigStage.PROFILE
