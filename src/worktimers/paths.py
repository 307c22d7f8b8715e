"""Helpers for locating the configuration file."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "worktimers"
APP_AUTHOR = "worktimers"
CONFIG_ENV_VAR = "WORKTIMERS_CONFIG"
LEGACY_CONFIG_NAME = ".worktimers.json"


def get_config_dir() -> Path:
    dirs = PlatformDirs(appname=APP_NAME, appauthor=APP_AUTHOR, roaming=True)
    return Path(dirs.user_config_path)


def get_config_path() -> Path:
    """Return the config file location.

    ``$WORKTIMERS_CONFIG`` wins, then ``~/.worktimers.json`` if present, then
    ``config.json`` in the platform's user config directory.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    legacy = Path.home() / LEGACY_CONFIG_NAME
    if legacy.exists():
        return legacy
    return get_config_dir() / "config.json"
