"""Shared test fixtures for daybook."""

import os
import tempfile
from datetime import datetime

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's DAYBOOK_* settings out of tests."""
    for key in list(os.environ):
        if key.startswith("DAYBOOK_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def tmp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def tmp_config_file(tmp_dir):
    """Create a temporary YAML config file."""
    import yaml

    config_data = {
        "paths": {
            "data_dir": os.path.join(tmp_dir, "data"),
        },
        "journal": {
            "overview_width": 20,
        },
        "storage": {
            "compress": True,
        },
    }
    config_path = os.path.join(tmp_dir, "config.yaml")
    with open(config_path, "w") as f:
        yaml.dump(config_data, f)
    return config_path


@pytest.fixture
def db_path(tmp_dir):
    """A journal file path whose parent directory does not exist yet."""
    return os.path.join(tmp_dir, "nested", "journal", "db")


@pytest.fixture
def sample_entries():
    """Three entries out of chronological order."""
    from daybook.journal import Entry

    return [
        Entry(description="second", timestamp=datetime(2024, 3, 2, 9, 0)),
        Entry(description="first", timestamp=datetime(2024, 3, 1, 21, 30)),
        Entry(description="third", timestamp=datetime(2024, 3, 3, 7, 15, 0, 123456)),
    ]
