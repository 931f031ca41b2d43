"""Tests for enum definitions."""

from __future__ import annotations

from lazylogger.constants.enums import (
    STAGE_TARGETS,
    ConfigStage,
    EventSource,
    InputKey,
    LoadTarget,
    ScreenKind,
)


class TestConfigStage:
    """Tests for stage cycling."""

    def test_next_follows_the_dependency_order(self) -> None:
        assert ConfigStage.PROFILE.next() is ConfigStage.CLUSTER
        assert ConfigStage.CLUSTER.next() is ConfigStage.SERVICE
        assert ConfigStage.SERVICE.next() is ConfigStage.PROFILE

    def test_three_switches_return_to_profile(self) -> None:
        stage = ConfigStage.PROFILE
        for _ in range(3):
            stage = stage.next()
        assert stage is ConfigStage.PROFILE


class TestEnumMembers:
    """Tests for enum membership."""

    def test_screen_kinds(self) -> None:
        assert {kind.value for kind in ScreenKind} == {
            "browsing",
            "configuring_source",
            "confirm_exit",
            "viewing_entry_detail",
        }

    def test_every_stage_has_a_load_target(self) -> None:
        assert set(STAGE_TARGETS) == set(ConfigStage)
        assert set(STAGE_TARGETS.values()) == set(LoadTarget) - {LoadTarget.EVENTS}

    def test_event_sources_match_cli_values(self) -> None:
        assert EventSource("service-events") is EventSource.SERVICE_EVENTS
        assert EventSource("cloudwatch-logs") is EventSource.CLOUDWATCH_LOGS

    def test_input_keys_cover_symbolic_set(self) -> None:
        assert len(InputKey) == 13
