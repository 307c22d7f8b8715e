"""Table rendering of intervals for CLI output."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import timedelta
from typing import Iterable, Optional

import typer

from .clock import Clock, now
from .models import Interval
from .store import format_timestamp

HEADERS = ("start", "stop", "duration", "duration_with_lunch_break")


@dataclass(slots=True)
class DisplayInterval:
    """One printable row derived from an interval."""

    start: str
    stop: str
    duration: str
    duration_with_lunch_break: str

    @classmethod
    def from_interval(
        cls,
        interval: Interval,
        lunch_break: Optional[timedelta],
        clock: Clock = now,
    ) -> "DisplayInterval":
        stop = format_timestamp(interval.stop) if interval.stop is not None else ""
        return cls(
            start=format_timestamp(interval.start),
            stop=stop,
            duration=format_duration(interval.calculate_duration(clock)),
            duration_with_lunch_break=format_duration(
                interval.calculate_duration_with_lunch_break(lunch_break, clock)
            ),
        )

    @classmethod
    def from_intervals(
        cls,
        intervals: Iterable[Interval],
        lunch_break: Optional[timedelta],
        clock: Clock = now,
    ) -> list["DisplayInterval"]:
        return [cls.from_interval(interval, lunch_break, clock) for interval in intervals]

    def cells(self) -> tuple[str, ...]:
        return tuple(getattr(self, field.name) for field in fields(self))


def format_duration(duration: timedelta) -> str:
    """Format as ``HH:MM:SS`` with unbounded hours and a leading ``-`` when negative."""
    total_seconds = int(duration.total_seconds())
    sign = "-" if total_seconds < 0 else ""
    hours, remainder = divmod(abs(total_seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"


def render_table(rows: Iterable[DisplayInterval]) -> str:
    body = [row.cells() for row in rows]
    widths = [len(header) for header in HEADERS]
    for cells in body:
        widths = [max(width, len(cell)) for width, cell in zip(widths, cells)]

    def line(cells: Iterable[str]) -> str:
        return "| " + " | ".join(cell.ljust(width) for cell, width in zip(cells, widths)) + " |"

    rule = "+" + "+".join("-" * (width + 2) for width in widths) + "+"
    lines = [rule, line(HEADERS), rule]
    lines.extend(line(cells) for cells in body)
    lines.append(rule)
    return "\n".join(lines)


def print_intervals(
    intervals: list[Interval],
    lunch_break: Optional[timedelta],
    clock: Clock = now,
) -> None:
    if not intervals:
        typer.echo("No intervals recorded.")
        return
    typer.echo(render_table(DisplayInterval.from_intervals(intervals, lunch_break, clock)))
