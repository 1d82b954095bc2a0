"""
Timelog exception hierarchy.

Every error raised by the log store inherits from TimelogError, so callers
can stop on any of them while still telling the failure modes apart.
"""

from __future__ import annotations


class TimelogError(Exception):
    """Base exception class for all timelog errors."""


class LogReadError(TimelogError):
    """Raised when an existing log file cannot be read."""


class LogWriteError(TimelogError):
    """Raised when the log file cannot be written."""


class LogCorruptError(TimelogError):
    """Raised when an entry is dated before the entry preceding it."""

    def __init__(self, lineno: int, line: str) -> None:
        super().__init__(f"line {lineno} goes back in time: {line}")
        self.lineno = lineno
        self.line = line


class MissingLocationError(TimelogError):
    """Raised when saving a log that has no backing file."""
