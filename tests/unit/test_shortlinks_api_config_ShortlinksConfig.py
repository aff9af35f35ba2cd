"""Unit tests for shortlinks.api.config.ShortlinksConfig module."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from shortlinks.api.config.ContextConfig import ContextConfig
from shortlinks.api.config.ShortlinksConfig import ShortlinksConfig

pytestmark = pytest.mark.config


class TestShortlinksConfigLoad:
    """Test ShortlinksConfig.load() method."""

    def test_load_valid_config(self, shortlinks_home):
        config = ShortlinksConfig.load()

        assert isinstance(config.context, ContextConfig)
        assert config.context.owner == "rnystrom"
        assert config.context.repo == "GitHawk"
        assert config.scan.overflow == "reject"
        assert config.log.level == "INFO"

    def test_load_applies_defaults(self, empty_home):
        (empty_home / "config.json").write_text(json.dumps({"context": {"owner": "o", "repo": "r"}}))

        config = ShortlinksConfig.load()

        assert config.scan.overflow == "reject"
        assert config.log.level == "INFO"

    def test_load_file_not_found(self, empty_home):
        with pytest.raises(ValueError) as exc_info:
            ShortlinksConfig.load()
        assert "not found" in str(exc_info.value).lower()

    def test_load_invalid_json(self, empty_home):
        (empty_home / "config.json").write_text("{invalid json")
        with pytest.raises(ValueError) as exc_info:
            ShortlinksConfig.load()
        assert "Invalid JSON" in str(exc_info.value)

    def test_load_non_object(self, empty_home):
        (empty_home / "config.json").write_text("[]")
        with pytest.raises(ValueError, match="must be a JSON object"):
            ShortlinksConfig.load()

    def test_load_missing_context(self, empty_home):
        (empty_home / "config.json").write_text("{}")
        with pytest.raises(ValueError, match="Configuration validation error: context"):
            ShortlinksConfig.load()

    def test_load_invalid_overflow(self, empty_home, minimal_config_dict):
        minimal_config_dict["scan"]["overflow"] = "wrap"
        (empty_home / "config.json").write_text(json.dumps(minimal_config_dict))
        with pytest.raises(ValueError, match="scan.overflow"):
            ShortlinksConfig.load()

    def test_load_unknown_section(self, empty_home, minimal_config_dict):
        minimal_config_dict["extra"] = {}
        (empty_home / "config.json").write_text(json.dumps(minimal_config_dict))
        with pytest.raises(ValueError, match="extra"):
            ShortlinksConfig.load()


class TestShortlinksConfigPathMethods:
    def test_get_home_dir_with_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SHORTLINKS_HOME", str(tmp_path))
        assert ShortlinksConfig.get_home_dir() == tmp_path.resolve()

    def test_get_home_dir_without_env(self, monkeypatch):
        monkeypatch.delenv("SHORTLINKS_HOME", raising=False)
        assert ShortlinksConfig.get_home_dir() == Path.home() / ".shortlinks"

    def test_get_config_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SHORTLINKS_HOME", str(tmp_path))
        assert ShortlinksConfig.get_config_path() == tmp_path.resolve() / "config.json"


class TestShortlinksConfigSave:
    def test_save_round_trips(self, empty_home, minimal_config_dict):
        ShortlinksConfig(**minimal_config_dict).save()

        assert json.loads((empty_home / "config.json").read_text()) == minimal_config_dict
        assert not (empty_home / "config.json.tmp").exists()
        assert ShortlinksConfig.load().to_dict() == minimal_config_dict

    def test_save_creates_home(self, tmp_path, monkeypatch, minimal_config_dict):
        home = tmp_path / "nested" / "home"
        monkeypatch.setenv("SHORTLINKS_HOME", str(home))

        ShortlinksConfig(**minimal_config_dict).save()

        assert (home / "config.json").exists()

    def test_save_failure_raises_runtime_error(self, empty_home, minimal_config_dict):
        (empty_home / "config.json").mkdir()

        with pytest.raises(RuntimeError, match="Failed to save config"):
            ShortlinksConfig(**minimal_config_dict).save()
        assert not (empty_home / "config.json.tmp").exists()


def test_context_requires_non_empty_owner():
    with pytest.raises(ValidationError):
        ContextConfig(owner="", repo="r")
