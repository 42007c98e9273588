"""
Tests for MonitorSettings loading
"""
from pathlib import Path

import pytest
from pydantic import ValidationError

from LOGMON.core.config import DEFAULT_LOG_PATH, ENV_VARS, MonitorSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


def test_defaults():
    settings = MonitorSettings.from_env()
    assert settings.log_path == DEFAULT_LOG_PATH
    assert settings.max_entries == 1000
    assert settings.initial_lines == 100
    assert settings.poll_interval == 0.5
    assert settings.live_filter is True
    assert settings.page_size == 10


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("LOGMON_MAX_ENTRIES", "50")
    monkeypatch.setenv("LOGMON_POLL_INTERVAL", "2.5")
    monkeypatch.setenv("LOGMON_LIVE_FILTER", "false")
    monkeypatch.setenv("LOGMON_LOG_DIR", "/tmp/logmon")

    settings = MonitorSettings.from_env("app.log")
    assert settings.log_path == Path("app.log")
    assert settings.max_entries == 50
    assert settings.poll_interval == 2.5
    assert settings.live_filter is False
    assert settings.log_dir == Path("/tmp/logmon")


def test_overrides_beat_environment(monkeypatch):
    monkeypatch.setenv("LOGMON_MAX_ENTRIES", "50")
    settings = MonitorSettings.from_env(max_entries=20, initial_lines=None)
    assert settings.max_entries == 20
    assert settings.initial_lines == 100


def test_empty_environment_value_is_ignored(monkeypatch):
    monkeypatch.setenv("LOGMON_INITIAL_LINES", "")
    assert MonitorSettings.from_env().initial_lines == 100


@pytest.mark.parametrize("field, value", [
    ("max_entries", 0),
    ("initial_lines", -1),
    ("poll_interval", 0),
    ("page_size", 0),
])
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        MonitorSettings.from_env(**{field: value})


def test_invalid_environment_value(monkeypatch):
    monkeypatch.setenv("LOGMON_MAX_ENTRIES", "lots")
    with pytest.raises(ValidationError):
        MonitorSettings.from_env()
