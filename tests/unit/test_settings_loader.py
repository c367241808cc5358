"""Unit tests for settings loading and CLI override merging."""

import json
from pathlib import Path

import pytest

from refacing.application.config import (
    ConfigError,
    RefacingSettings,
    format_json_path,
    load_settings,
    load_settings_from_dict,
    merge_settings_with_cli,
)


class TestFormatJsonPath:
    def test_nested_path_with_index(self) -> None:
        assert format_json_path(("state", "drawers", 0, "height")) == "state.drawers[0].height"

    def test_leading_index(self) -> None:
        assert format_json_path((0, "height")) == "[0].height"


class TestLoadSettings:
    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "refacing.json"
        path.write_text(json.dumps({"storage_dir": str(tmp_path / "data"), "storage_name": "demo"}))
        settings = load_settings(path)
        assert settings.storage_dir == tmp_path / "data"
        assert settings.storage_path == tmp_path / "data" / "demo.json"
        assert settings.schema_version == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings(tmp_path / "nope.json")
        assert exc_info.value.error_type == "file_not_found"

    def test_invalid_json_reports_position(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"storage_name": }')
        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] == 1

    def test_unknown_field_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "extra.json"
        path.write_text(json.dumps({"storage_nam": "typo"}))
        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.message.startswith("Settings validation failed:")
        assert error.details[0]["path"] == "storage_nam"


class TestLoadSettingsFromDict:
    def test_defaults(self) -> None:
        settings = load_settings_from_dict({})
        assert settings.storage_name == "cabinet-refacing-storage"
        assert settings.storage_dir == Path.home() / ".refacing"

    @pytest.mark.parametrize("name", ["", "a/b", "a\\b"])
    def test_bad_storage_name(self, name: str) -> None:
        with pytest.raises(ConfigError):
            load_settings_from_dict({"storage_name": name})

    def test_schema_version_must_be_positive(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_settings_from_dict({"schema_version": 0})
        assert exc_info.value.details[0]["path"] == "schema_version"


class TestMergeSettingsWithCli:
    def test_no_overrides_returns_same_settings(self) -> None:
        settings = RefacingSettings()
        assert merge_settings_with_cli(settings) is settings

    def test_cli_wins(self, tmp_path: Path) -> None:
        settings = RefacingSettings(storage_name="from-file")
        merged = merge_settings_with_cli(settings, storage_dir=tmp_path, storage_name="cli")
        assert merged.storage_dir == tmp_path
        assert merged.storage_name == "cli"
        assert merged.schema_version == settings.schema_version

    def test_invalid_override_raises(self) -> None:
        with pytest.raises(ConfigError):
            merge_settings_with_cli(RefacingSettings(), storage_name="x/y")
