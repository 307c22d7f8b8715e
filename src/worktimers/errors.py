"""Exceptions raised by the worktimers core."""

from __future__ import annotations


class WorktimersError(Exception):
    """Base class for errors that end a command with a user-facing message."""


class IntervalNotFromToday(WorktimersError):
    def __init__(
        self, message: str = "Please fix the current interval. It didn't start today."
    ) -> None:
        super().__init__(message)


class NoIntervalsFound(WorktimersError):
    def __init__(
        self, message: str = "No intervals found. Check config, or start an interval first."
    ) -> None:
        super().__init__(message)


class StoreError(WorktimersError):
    """The interval file could not be read, parsed or written."""


class ConfigError(WorktimersError):
    """The configuration file is missing or invalid."""


class IntervalAlreadyClosed(WorktimersError):
    def __init__(
        self, message: str = "The current interval is already stopped. Start a new one first."
    ) -> None:
        super().__init__(message)
