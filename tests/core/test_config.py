"""Tests for daybook.core.config."""

import json
import os

import pytest
import yaml

from daybook.core.config import Config, default_config_file
from daybook.core.exceptions import ConfigurationError


class TestConfig:
    def test_defaults(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("paths.db_file") == ""
        assert config.get("journal.overview_width") == 40
        assert config.get("storage.compress") is False
        assert config.get("logging.level") == "WARNING"

    def test_default_data_dir_mentions_app(self):
        config = Config()
        assert "daybook" in config.get("paths.data_dir")

    def test_custom_data_dir(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("paths.data_dir") == tmp_dir

    def test_path_defaults_are_only_what_location_reads(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert set(config.get("paths")) == {"data_dir", "db_file"}

    def test_env_override(self, monkeypatch, tmp_dir):
        monkeypatch.setenv("DAYBOOK_JOURNAL__OVERVIEW_WIDTH", "60")
        config = Config(data_dir=tmp_dir)
        assert config.get("journal.overview_width") == "60"

    def test_custom_env_prefix(self, monkeypatch, tmp_dir):
        monkeypatch.setenv("MYJOURNAL_STORAGE__COMPRESS", "true")
        config = Config(env_prefix="MYJOURNAL_", data_dir=tmp_dir)
        assert config.get("storage.compress") == "true"

    def test_yaml_config_file(self, tmp_config_file):
        config = Config(config_file=tmp_config_file)
        assert config.get("journal.overview_width") == 20
        assert config.get("storage.compress") is True
        # Untouched defaults survive the merge
        assert config.get("logging.level") == "WARNING"

    def test_json_config_file(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "config.json")
        with open(config_path, "w") as f:
            json.dump({"paths": {"db_file": "/tmp/elsewhere/db"}}, f)

        config = Config(config_file=config_path, data_dir=tmp_dir)
        assert config.get("paths.db_file") == "/tmp/elsewhere/db"

    def test_env_overrides_file(self, tmp_config_file, monkeypatch):
        monkeypatch.setenv("DAYBOOK_JOURNAL__OVERVIEW_WIDTH", "30")
        config = Config(config_file=tmp_config_file)
        assert config.get("journal.overview_width") == "30"

    def test_missing_config_file_is_ignored(self, tmp_dir):
        config = Config(config_file=os.path.join(tmp_dir, "absent.yaml"), data_dir=tmp_dir)
        assert config.get("journal.overview_width") == 40

    def test_invalid_yaml_raises(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "broken.yaml")
        with open(config_path, "w") as f:
            f.write("journal: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Cannot load"):
            Config(config_file=config_path, data_dir=tmp_dir)

    def test_non_mapping_file_raises(self, tmp_dir):
        config_path = os.path.join(tmp_dir, "list.yaml")
        with open(config_path, "w") as f:
            yaml.dump(["a", "b"], f)
        with pytest.raises(ConfigurationError, match="mapping"):
            Config(config_file=config_path, data_dir=tmp_dir)

    def test_get_missing_key(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        assert config.get("nonexistent.key") is None
        assert config.get("nonexistent.key", "fallback") == "fallback"

    def test_set(self, tmp_dir):
        config = Config(data_dir=tmp_dir)
        config.set("paths.db_file", "/tmp/journal.db")
        assert config.get("paths.db_file") == "/tmp/journal.db"
        config.set("custom.nested.value", 42)
        assert config.get("custom.nested.value") == 42

    def test_extra_defaults(self, tmp_dir):
        config = Config(data_dir=tmp_dir, defaults={"journal": {"overview_width": 72}})
        assert config.get("journal.overview_width") == 72


def test_default_config_file():
    path = default_config_file()
    assert path.endswith("config.yaml")
    assert "daybook" in path
