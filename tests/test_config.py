import logging
from pathlib import Path

from sccdag import config


def test_log_level_defaults_to_warning(monkeypatch):
    monkeypatch.delenv("SCCDAG_LOG_LEVEL", raising=False)
    assert config.resolve_log_level() == logging.WARNING


def test_log_level_from_env_and_override(monkeypatch):
    monkeypatch.setenv("SCCDAG_LOG_LEVEL", "debug")
    assert config.resolve_log_level() == logging.DEBUG
    assert config.resolve_log_level("error") == logging.ERROR


def test_invalid_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("SCCDAG_LOG_LEVEL", "chatty")
    assert config.resolve_log_level() == logging.WARNING


def test_data_dir_resolution(monkeypatch):
    monkeypatch.delenv("SCCDAG_DATA_DIR", raising=False)
    assert config.resolve_data_dir() == Path("data")
    monkeypatch.setenv("SCCDAG_DATA_DIR", "/srv/graphs")
    assert config.resolve_data_dir() == Path("/srv/graphs")
    assert config.resolve_data_dir("local") == Path("local")


def test_default_input_resolution(monkeypatch):
    monkeypatch.setenv("SCCDAG_DEFAULT_INPUT", "  ")
    assert config.resolve_default_input() == Path("tasks.json")
    monkeypatch.setenv("SCCDAG_DEFAULT_INPUT", "city.json")
    assert config.resolve_default_input() == Path("city.json")
