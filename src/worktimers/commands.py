"""Lifecycle transitions applied to the most recent interval."""

from __future__ import annotations

import logging

from .clock import Clock, now
from .errors import NoIntervalsFound
from .models import Interval

logger = logging.getLogger(__name__)


def start_command(intervals: list[Interval], clock: Clock = now) -> Interval:
    """Append a new open interval stamped with the current time."""
    if intervals and intervals[-1].is_open:
        logger.warning(
            "Starting a new interval while the one from %s is still open.",
            intervals[-1].start,
        )
    interval = Interval(start=clock())
    intervals.append(interval)
    logger.info("Started interval at %s", interval.start)
    return interval


def stop_command(intervals: list[Interval], clock: Clock = now) -> Interval:
    """Close the last interval in place.

    Raises ``NoIntervalsFound`` on an empty list and lets
    ``IntervalNotFromToday`` and ``IntervalAlreadyClosed`` propagate; the list
    is untouched in every failure case.
    """
    if not intervals:
        raise NoIntervalsFound()
    closed = intervals[-1].end_iteration(clock)
    intervals[-1] = closed
    logger.info("Stopped interval %s - %s", closed.start, closed.stop)
    return closed
