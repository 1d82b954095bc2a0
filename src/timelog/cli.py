"""Command-line interface for the timelog."""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from .completion import TaskCompleter
from .config import TimelogSettings
from .errors import TimelogError
from .reporting import DayPrinter
from .store import Timelog

app = typer.Typer(help="Plain-text personal time log.")

logger = logging.getLogger(__name__)


@app.callback(no_args_is_help=True)
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logs.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _load(settings: TimelogSettings) -> Timelog:
    try:
        timelog = Timelog.from_file(settings.log_path)
    except TimelogError as exc:
        _fail(exc)
    logger.debug("Loaded %d entries from %s", len(timelog), settings.log_path)
    return timelog


def _fail(exc: TimelogError) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


def _parse_day(value: Optional[str]) -> date:
    if not value:
        return datetime.now().date()
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param_hint="--date")


@app.command()
def add(
    task: Optional[List[str]] = typer.Argument(
        None, help="Task to record. Omit to start the interactive prompt."
    ),
    log_path: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        path_type=Path,
        help="Location of the timelog file.",
    ),
    save_on_exit: bool = typer.Option(
        False,
        "--save-on-exit",
        help="Write the log once when the prompt ends instead of after every entry.",
    ),
) -> None:
    """Record that the given task just finished."""
    settings = TimelogSettings.from_options(log_path, autosave=not save_on_exit)
    timelog = _load(settings)

    if task:
        entry = timelog.add(" ".join(task))
        try:
            timelog.save()
        except TimelogError as exc:
            _fail(exc)
        typer.echo(str(entry))
        return

    from .prompt import ReadlineCompletion, run_entry_loop

    for entry in timelog.get_today():
        typer.echo(str(entry))
    completer = TaskCompleter.snapshot(timelog)
    ReadlineCompletion(completer).install()
    try:
        run_entry_loop(timelog, completer, autosave=settings.autosave)
    except TimelogError as exc:
        _fail(exc)


@app.command()
def show(
    day: Optional[str] = typer.Option(
        None,
        "--date",
        help="Date (YYYY-MM-DD) to list. Defaults to today.",
    ),
    log_path: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        path_type=Path,
        help="Location of the timelog file.",
    ),
) -> None:
    """List the entries of a day with their durations."""
    target = _parse_day(day)
    DayPrinter(_load(TimelogSettings.from_options(log_path))).print_entries(target)


@app.command()
def summary(
    day: Optional[str] = typer.Option(
        None,
        "--date",
        help="Date (YYYY-MM-DD) to summarize. Defaults to today.",
    ),
    log_path: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        path_type=Path,
        help="Location of the timelog file.",
    ),
) -> None:
    """Print work and slacking totals for a specific day."""
    target = _parse_day(day)
    DayPrinter(_load(TimelogSettings.from_options(log_path))).print_daily_summary(target)


@app.command()
def tasks(
    prefix: Optional[str] = typer.Argument(None, help="Text typed so far."),
    log_path: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        path_type=Path,
        help="Location of the timelog file.",
    ),
) -> None:
    """Print the completions offered for PREFIX, or every known task."""
    completer = TaskCompleter.snapshot(_load(TimelogSettings.from_options(log_path)))
    if prefix:
        _, candidates = completer.complete(prefix, len(prefix))
    else:
        candidates = completer.candidates
    for candidate in sorted(candidates):
        typer.echo(candidate)
