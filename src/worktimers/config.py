"""Configuration model and loader for worktimers."""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError


class WorktimersConfig(BaseModel):
    """Settings read from the JSON config file."""

    absolute_persistence_path: Path
    lunch_break_in_mins: int = Field(default=0, ge=0)

    model_config = ConfigDict(extra="forbid")

    @property
    def lunch_break(self) -> timedelta:
        return timedelta(minutes=self.lunch_break_in_mins)

    @classmethod
    def from_json(cls, text: str) -> "WorktimersConfig":
        try:
            return cls.model_validate_json(text)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration: {exc}") from exc

    @classmethod
    def from_file(cls, path: Path) -> "WorktimersConfig":
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Failed to read config {path}: {exc}") from exc
        return cls.from_json(text)
