"""Command-line interface for worktimers."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from .clock import now
from .commands import start_command, stop_command
from .config import WorktimersConfig
from .errors import WorktimersError
from .paths import get_config_path
from .reporting import print_intervals
from .store import read_intervals, save_intervals

logger = logging.getLogger(__name__)

app = typer.Typer(help="A command line tool to manage working hours.")


@app.callback(no_args_is_help=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs."),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        path_type=Path,
        help="Location of the JSON config file.",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    ctx.obj = config_path


@app.command("list")
def list_(ctx: typer.Context) -> None:
    """Print all intervals."""
    config = _load_config(ctx)
    try:
        intervals = read_intervals(config.absolute_persistence_path)
    except WorktimersError as exc:
        _fail(exc)
    print_intervals(intervals, config.lunch_break, now)


@app.command()
def start(ctx: typer.Context) -> None:
    """Start working."""
    config = _load_config(ctx)
    try:
        intervals = read_intervals(config.absolute_persistence_path)
        start_command(intervals, now)
        save_intervals(intervals, config.absolute_persistence_path)
    except WorktimersError as exc:
        _fail(exc)
    print_intervals(intervals, config.lunch_break, now)


@app.command()
def stop(ctx: typer.Context) -> None:
    """Stop working."""
    config = _load_config(ctx)
    try:
        intervals = read_intervals(config.absolute_persistence_path)
        stop_command(intervals, now)
        save_intervals(intervals, config.absolute_persistence_path)
    except WorktimersError as exc:
        _fail(exc)
    print_intervals(intervals, config.lunch_break, now)


def _load_config(ctx: typer.Context) -> WorktimersConfig:
    path = ctx.obj or get_config_path()
    logger.debug("Reading config from %s", path)
    try:
        return WorktimersConfig.from_file(path)
    except WorktimersError as exc:
        _fail(exc)


def _fail(exc: WorktimersError) -> NoReturn:
    logger.debug("Command failed", exc_info=exc)
    typer.echo(str(exc), err=True)
    raise typer.Exit(code=1)
