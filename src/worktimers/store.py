"""JSON persistence for the interval list."""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    TypeAdapter,
    ValidationError,
    field_serializer,
    field_validator,
)

from .errors import StoreError
from .models import Interval

logger = logging.getLogger(__name__)

DATETIME_FMT = "%Y-%m-%d %H:%M:%S"

_TIMESTAMP_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}[ T]\d{2}:\d{2}:\d{2}(\.\d+)?")


def format_timestamp(value: datetime) -> str:
    return value.strftime(DATETIME_FMT)


def parse_timestamp(value: Any) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` (or the ``T``-separated form), dropping fractions."""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(microsecond=0)
    if not isinstance(value, str) or not _TIMESTAMP_PATTERN.fullmatch(value):
        raise ValueError(f"expected 'YYYY-MM-DD HH:MM:SS', got {value!r}")
    return datetime.strptime(value[:19].replace("T", " "), DATETIME_FMT)


class IntervalRecord(BaseModel):
    """On-disk shape of one interval."""

    start: datetime
    stop: Optional[datetime] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("start", mode="before")
    @classmethod
    def _parse_start(cls, value: Any) -> datetime:
        return parse_timestamp(value)

    @field_validator("stop", mode="before")
    @classmethod
    def _parse_stop(cls, value: Any) -> Optional[datetime]:
        return None if value is None else parse_timestamp(value)

    @field_serializer("start", "stop")
    def _format(self, value: Optional[datetime]) -> Optional[str]:
        return None if value is None else format_timestamp(value)


_RECORDS = TypeAdapter(list[IntervalRecord])


def parse_intervals(text: str) -> list[Interval]:
    """Parse the full contents of an interval file."""
    try:
        records = _RECORDS.validate_json(text)
    except ValidationError as exc:
        raise StoreError(f"Failed to parse interval data: {exc}") from exc
    return [Interval(start=record.start, stop=record.stop) for record in records]


def dump_intervals(intervals: Iterable[Interval]) -> str:
    records = [IntervalRecord(start=interval.start, stop=interval.stop) for interval in intervals]
    return _RECORDS.dump_json(records, indent=2).decode("utf-8")


def read_intervals(path: Path) -> list[Interval]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StoreError(f"Failed to read {path}: {exc}") from exc
    intervals = parse_intervals(text)
    logger.debug("Loaded %d intervals from %s", len(intervals), path)
    return intervals


def save_intervals(intervals: list[Interval], path: Path) -> None:
    """Rewrite the whole interval file; there is no locking."""
    path = Path(path)
    try:
        path.write_text(dump_intervals(intervals), encoding="utf-8")
    except OSError as exc:
        raise StoreError(f"Failed to save the intervals to {path}: {exc}") from exc
    logger.debug("Saved %d intervals to %s", len(intervals), path)
