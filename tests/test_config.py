"""Tests for loading configuration and locating it."""
from datetime import timedelta
from pathlib import Path

import pytest

from worktimers import paths
from worktimers.config import WorktimersConfig
from worktimers.errors import ConfigError


# ── Loading ──

def test_from_json():
    config = WorktimersConfig.from_json(
        '{"absolute_persistence_path": "/tmp/intervals.json", "lunch_break_in_mins": 45}'
    )
    assert config.absolute_persistence_path == Path("/tmp/intervals.json")
    assert config.lunch_break == timedelta(minutes=45)


def test_lunch_break_defaults_to_zero():
    config = WorktimersConfig.from_json('{"absolute_persistence_path": "/tmp/intervals.json"}')
    assert config.lunch_break == timedelta(0)


@pytest.mark.parametrize(
    "text",
    [
        "{}",
        "not json",
        '{"absolute_persistence_path": "/tmp/x.json", "lunch_break_in_mins": -5}',
        '{"absolute_persistence_path": "/tmp/x.json", "unknown": 1}',
    ],
)
def test_invalid_config(text):
    with pytest.raises(ConfigError):
        WorktimersConfig.from_json(text)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        WorktimersConfig.from_file(tmp_path / "missing.json")


# ── Discovery ──

def test_config_path_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(paths.CONFIG_ENV_VAR, str(tmp_path / "custom.json"))
    assert paths.get_config_path() == tmp_path / "custom.json"


def test_config_path_prefers_home_file(monkeypatch, tmp_path):
    monkeypatch.delenv(paths.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    (tmp_path / ".worktimers.json").write_text("{}", encoding="utf-8")
    assert paths.get_config_path() == tmp_path / ".worktimers.json"


def test_config_path_falls_back_to_platform_dir(monkeypatch, tmp_path):
    monkeypatch.delenv(paths.CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    monkeypatch.setattr(paths, "get_config_dir", lambda: tmp_path / "cfg")
    assert paths.get_config_path() == tmp_path / "cfg" / "config.json"


def test_non_utf8_config_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_bytes(b"\xff")
    with pytest.raises(ConfigError):
        WorktimersConfig.from_file(path)
