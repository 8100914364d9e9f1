"""Tests for the settings validation service."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from annotations_policy.domain.criteria import ContainsAllOf, ContainsAnyOf
from annotations_policy.domain.settings import Settings
from annotations_policy.services.validation import (
    INVALID_SETTINGS,
    OP_VALIDATE,
    UNREADABLE_SETTINGS,
    dump_settings,
    load_settings_file,
    validate_settings,
    validate_settings_payload,
)


class TestValidateSettings:
    def test_success(self) -> None:
        result = validate_settings(Settings(ContainsAllOf(values=["b", "example.com/a"])))
        assert result.ok
        assert result.op == OP_VALIDATE
        assert result.data == {"criteria": "containsAllOf", "values": ["b", "example.com/a"]}

    def test_empty_values_is_structural_error(self) -> None:
        result = validate_settings(Settings.default())
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_CRITERION"
        assert result.error.message == "values cannot be empty"
        assert result.error.detail == {}

    def test_invalid_names(self) -> None:
        result = validate_settings(Settings(ContainsAnyOf(values=["ok", "-bad", "Bad.com/x"])))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_ANNOTATION_NAMES"
        assert sorted(result.error.detail["invalid"]) == ["-bad", "Bad.com/x"]
        assert result.error.message == (
            "Invalid annotation names: " + ", ".join(result.error.detail["invalid"])
        )

    def test_meta_passed_through(self) -> None:
        result = validate_settings(Settings(ContainsAnyOf(values=["a"])), meta={"path": "x"})
        assert result.meta == {"path": "x"}


class TestValidateSettingsPayload:
    def test_mapping(self) -> None:
        result = validate_settings_payload({"criteria": "containsOtherThan", "values": ["a"]})
        assert result.ok
        assert result.data["criteria"] == "containsOtherThan"

    def test_json_string(self) -> None:
        payload = json.dumps({"criteria": "doesNotContainAllOf", "values": ["a", "b"]})
        result = validate_settings_payload(payload)
        assert result.ok
        assert result.data["values"] == ["a", "b"]

    def test_json_bytes(self) -> None:
        result = validate_settings_payload(b'{"criteria": "containsAnyOf", "values": ["a"]}')
        assert result.ok

    def test_none_means_default(self) -> None:
        result = validate_settings_payload(None)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_CRITERION"

    @pytest.mark.parametrize(
        "payload",
        [
            {"criteria": "unknown", "values": ["a"]},
            {"values": ["a"]},
            {"criteria": "containsAnyOf"},
            {"criteria": "containsAnyOf", "values": "a", "extra": True},
            {"criteria": "containsAnyOf", "values": [1, 2]},
            "not json",
        ],
    )
    def test_deserialization_errors(self, payload: object) -> None:
        result = validate_settings_payload(payload)  # type: ignore[arg-type]
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_SETTINGS
        assert result.error.message


class TestLoadSettingsFile:
    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            "criteria: containsAllOf\nvalues:\n  - example.com/owner\n  - team\n",
            encoding="utf-8",
        )
        result = load_settings_file(path)
        assert result.ok
        assert result.data["values"] == ["example.com/owner", "team"]
        assert result.meta == {"path": str(path)}

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.json"
        path.write_text('{"criteria": "containsAnyOf", "values": ["a"]}', encoding="utf-8")
        assert load_settings_file(path).ok

    def test_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        path.write_text('criteria = "containsAnyOf"\nvalues = ["a", "b"]\n', encoding="utf-8")
        result = load_settings_file(path)
        assert result.ok
        assert result.data["values"] == ["a", "b"]

    def test_invalid_names_in_file(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("criteria: containsAnyOf\nvalues: ['-bad']\n", encoding="utf-8")
        result = load_settings_file(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.message == "Invalid annotation names: -bad"

    def test_empty_file_uses_default(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("", encoding="utf-8")
        result = load_settings_file(path)
        assert result.error is not None
        assert result.error.code == "INVALID_CRITERION"

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_settings_file(tmp_path / "missing.yaml")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == UNREADABLE_SETTINGS

    @pytest.mark.parametrize(
        "content",
        [b"\xff\xfe", b"criteria: containsAnyOf\nvalues: [\xff\xfe]\n"],
    )
    def test_non_utf8_file(self, tmp_path: Path, content: bytes) -> None:
        path = tmp_path / "settings.yaml"
        path.write_bytes(content)
        result = load_settings_file(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == UNREADABLE_SETTINGS
        assert "not valid UTF-8" in result.error.message

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("criteria: [unclosed\n", encoding="utf-8")
        result = load_settings_file(path)
        assert result.error is not None
        assert result.error.code == UNREADABLE_SETTINGS

    def test_malformed_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.toml"
        path.write_text("criteria = \n", encoding="utf-8")
        result = load_settings_file(path)
        assert result.error is not None
        assert result.error.code == UNREADABLE_SETTINGS

    def test_non_mapping_document(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        result = load_settings_file(path)
        assert result.error is not None
        assert result.error.code == INVALID_SETTINGS


class TestDumpSettings:
    def test_default_document(self) -> None:
        assert json.loads(dump_settings(Settings.default())) == {
            "criteria": "containsAnyOf",
            "values": [],
        }

    def test_values_sorted(self) -> None:
        settings = Settings(ContainsAllOf(values=["b", "a"]))
        assert json.loads(dump_settings(settings))["values"] == ["a", "b"]
