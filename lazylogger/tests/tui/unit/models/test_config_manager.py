"""Tests for AppSettings and ConfigManager."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from lazylogger.constants.enums import EventSource
from lazylogger.models.state.config_manager import (
    CONFIG_ENV_VAR,
    AppSettings,
    ConfigLoadError,
    ConfigManager,
    ConfigSaveError,
)


class TestAppSettings:
    """Tests for settings validation."""

    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.region == "us-east-1"
        assert settings.theme == "dracula"
        assert settings.tick_interval_ms == 250
        assert settings.event_source is EventSource.SERVICE_EVENTS
        assert settings.max_log_events == 500
        assert settings.background_fetch is True
        assert settings.log_level == "WARNING"

    def test_tick_interval_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(tick_interval_ms=10)

    def test_log_level_normalized(self) -> None:
        assert AppSettings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(log_level="chatty")

    def test_event_source_from_string(self) -> None:
        settings = AppSettings(event_source="cloudwatch-logs")
        assert settings.event_source is EventSource.CLOUDWATCH_LOGS


class TestConfigManagerPaths:
    """Tests for settings file resolution."""

    def test_explicit_path_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
        assert ConfigManager.config_path(tmp_path / "cli.yaml") == tmp_path / "cli.yaml"

    def test_env_var_used_without_explicit_path(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.yaml"))
        assert ConfigManager.config_path() == tmp_path / "env.yaml"

    def test_default_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert ConfigManager.config_path().name == "settings.yaml"


class TestConfigManagerLoadSave:
    """Tests for YAML persistence."""

    def test_missing_file_yields_defaults(self, tmp_path: Path) -> None:
        assert ConfigManager.load(tmp_path / "missing.yaml") == AppSettings()

    def test_empty_file_yields_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        assert ConfigManager.load(path) == AppSettings()

    def test_save_then_load(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "settings.yaml"
        settings = AppSettings(region="eu-west-1", event_source="cloudwatch-logs")

        written = ConfigManager.save(settings, path)

        assert written == path
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
        assert raw["region"] == "eu-west-1"
        assert raw["event_source"] == "cloudwatch-logs"
        assert ConfigManager.load(path) == settings

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("region: ap-south-1\n", encoding="utf-8")
        settings = ConfigManager.load(path)
        assert settings.region == "ap-south-1"
        assert settings.tick_interval_ms == 250

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("region: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError, match="mapping"):
            ConfigManager.load(path)

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("tick_interval_ms: 1\n", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load(path)

    def test_save_failure_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        with pytest.raises(ConfigSaveError):
            ConfigManager.save(AppSettings(), blocker / "settings.yaml")

    def test_reset_writes_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        ConfigManager.save(AppSettings(region="eu-west-1"), path)
        assert ConfigManager.reset(path) == AppSettings()
        assert ConfigManager.load(path).region == "us-east-1"
