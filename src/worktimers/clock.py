"""Time source used for stamping and measuring intervals."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

Clock = Callable[[], datetime]


def now() -> datetime:
    """Return the current local time truncated to whole seconds."""
    return datetime.now().replace(microsecond=0)
