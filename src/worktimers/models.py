"""Domain models for recorded work sessions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from .clock import Clock, now
from .errors import IntervalAlreadyClosed, IntervalNotFromToday


@dataclass(slots=True)
class Interval:
    """A single work session; ``stop`` is ``None`` while it is still running."""

    start: datetime
    stop: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.stop is None

    def calculate_duration(self, clock: Clock = now) -> timedelta:
        """Elapsed time, measured against ``clock`` while the interval is open."""
        end = self.stop if self.stop is not None else clock()
        return end - self.start

    def calculate_duration_with_lunch_break(
        self, lunch_break: Optional[timedelta], clock: Clock = now
    ) -> timedelta:
        # May go negative when the break is longer than the session.
        return self.calculate_duration(clock) - (lunch_break or timedelta(0))

    def end_iteration(self, clock: Clock = now) -> "Interval":
        """Return a closed copy stamped with the current time.

        Only intervals started on the current local date can be closed; a
        forgotten interval from an earlier day raises ``IntervalNotFromToday``
        instead of being stretched up to now. Closing an already closed
        interval raises ``IntervalAlreadyClosed``.
        """
        if not self.is_open:
            raise IntervalAlreadyClosed()
        current = clock()
        if self.start.date() != current.date():
            raise IntervalNotFromToday()
        return Interval(start=self.start, stop=current)
