"""Unit tests for configuration management."""

import json
import logging

import pytest
from pydantic import ValidationError

from ruletag.config import (
    LogLevel,
    RuletagConfig,
    TagConfig,
    create_default_config,
    find_config_file,
    load_config,
)


class TestTagConfig:
    """Test TagConfig model."""

    def test_defaults(self):
        config = TagConfig()
        assert config.field_tag == "json"
        assert config.rule_tag == "valid"

    def test_aliases_and_field_names(self):
        assert TagConfig(field="label").field_tag == "label"
        assert TagConfig(rule_tag="rules").rule_tag == "rules"

    def test_blank_tag_name_rejected(self):
        with pytest.raises(ValidationError):
            TagConfig(rule="  ")


class TestRuletagConfig:
    """Test complete RuletagConfig model."""

    def test_default_config(self):
        config = create_default_config()
        assert config.tags.field_tag == "json"
        assert config.logging.level == LogLevel.WARN

    def test_config_from_dict(self):
        config = RuletagConfig(**{
            "tags": {"field": "label", "rule": "rules"},
            "logging": {"level": "debug"},
        })

        assert config.tags.field_tag == "label"
        assert config.tags.rule_tag == "rules"
        assert config.logging.level == LogLevel.DEBUG

    def test_unknown_section_rejected(self):
        with pytest.raises(ValidationError):
            RuletagConfig(**{"scan": {}})

    def test_log_level_mapping(self):
        assert LogLevel.WARN.to_logging() == logging.WARNING
        assert LogLevel.DEBUG.to_logging() == logging.DEBUG


class TestLoadConfig:
    """Test loading configuration files."""

    def test_load_from_file(self, tmp_path):
        config_file = tmp_path / ".ruletag.json"
        config_file.write_text(json.dumps({"tags": {"rule": "rules"}}), encoding="utf-8")

        config = load_config(config_file)

        assert config.tags.rule_tag == "rules"
        assert config.tags.field_tag == "json"

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        config = load_config(tmp_path / "missing.json")
        assert config == create_default_config()

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / ".ruletag.json"
        config_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON") as exc_info:
            load_config(config_file)
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_invalid_content(self, tmp_path):
        config_file = tmp_path / ".ruletag.json"
        config_file.write_text(json.dumps({"tags": {"rule": ""}}), encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to load config") as exc_info:
            load_config(config_file)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_non_object_json(self, tmp_path):
        config_file = tmp_path / ".ruletag.json"
        config_file.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="Failed to load config"):
            load_config(config_file)

    def test_find_config_in_parent(self, tmp_path):
        config_file = tmp_path / ".ruletag.json"
        config_file.write_text("{}", encoding="utf-8")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(nested) == config_file.resolve()

    def test_search_from_cwd(self, tmp_path, monkeypatch):
        (tmp_path / ".ruletag.json").write_text(json.dumps({"tags": {"field": "name"}}), encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert load_config().tags.field_tag == "name"
