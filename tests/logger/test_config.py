"""Tests for logging bootstrap settings."""

from pathlib import Path

from gitconf.logger.config import load_log_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("GITCONF_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GITCONF_LOG_DIR", raising=False)
    assert load_log_settings() == ("WARNING", "DEBUG", None)


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("GITCONF_LOG_LEVEL", "info")
    monkeypatch.delenv("GITCONF_LOG_DIR", raising=False)
    assert load_log_settings()[0] == "INFO"


def test_invalid_level_falls_back(monkeypatch):
    monkeypatch.setenv("GITCONF_LOG_LEVEL", "chatty")
    assert load_log_settings()[0] == "WARNING"


def test_log_dir_enables_file_logging(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("GITCONF_LOG_DIR", str(tmp_path))
    assert load_log_settings()[2] == tmp_path / "gitconf.log"
