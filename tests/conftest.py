"""Shared fixtures for worktimers tests."""
from __future__ import annotations

from datetime import datetime, timedelta

import pytest


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, current: datetime) -> None:
        self.current = current

    def __call__(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 3, 5, 17, 30, 0))


@pytest.fixture
def write_config(tmp_path):
    """Write a config pointing at a store in tmp_path; returns (config, store)."""

    def _write(store_text: str | None = "[]", lunch_break_in_mins: int = 30):
        store_path = tmp_path / "intervals.json"
        if store_text is not None:
            store_path.write_text(store_text, encoding="utf-8")
        config_path = tmp_path / "config.json"
        config_path.write_text(
            '{"absolute_persistence_path": "%s", "lunch_break_in_mins": %d}'
            % (store_path.as_posix(), lunch_break_in_mins),
            encoding="utf-8",
        )
        return config_path, store_path

    return _write
