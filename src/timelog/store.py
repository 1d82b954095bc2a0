"""Plain-text storage for the activity log.

The log is one entry per line, ``YYYY-MM-DD HH:MM: task``, in
chronological order, with a blank line between days::

    2022-06-09 06:02: arrived
    2022-06-09 06:27: email

    2022-06-10 07:00: arrived
    2022-06-10 12:05: rtimelog: code
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from .errors import LogCorruptError, LogReadError, LogWriteError, MissingLocationError
from .models import TIME_FMT, Entry

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class Timelog:
    """Ordered collection of entries, optionally backed by a file."""

    def __init__(
        self,
        entries: Iterable[Entry] = (),
        path: Optional[Path] = None,
        *,
        clock: Clock = datetime.now,
    ) -> None:
        self._entries: list[Entry] = list(entries)
        self.path = Path(path) if path is not None else None
        self._clock = clock

    @classmethod
    def from_file(cls, path: Path, *, clock: Clock = datetime.now) -> "Timelog":
        path = Path(path)
        return cls(cls.parse(cls.read(path)), path, clock=clock)

    @classmethod
    def from_string(cls, contents: str, *, clock: Clock = datetime.now) -> "Timelog":
        return cls(cls.parse(contents), clock=clock)

    @staticmethod
    def read(path: Path) -> str:
        """Return the file's text, or an empty log if it does not exist yet."""
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No existing %s, starting new log", path)
            return ""
        except (OSError, UnicodeDecodeError) as exc:
            raise LogReadError(f"Could not read {path}: {exc}") from exc

    @classmethod
    def parse(cls, raw: str) -> list[Entry]:
        entries: list[Entry] = []
        prev: Optional[datetime] = None

        for lineno, line in enumerate(raw.split("\n"), start=1):
            entry = cls.parse_line(line)
            if entry is None:
                continue
            # the file must never go back in time
            if prev is not None and entry.stop < prev:
                raise LogCorruptError(lineno, line.strip())
            prev = entry.stop
            entries.append(entry)
        return entries

    @staticmethod
    def parse_line(line: str) -> Optional[Entry]:
        line = line.strip()
        if not line:
            return None

        stamp, sep, task = line.partition(": ")
        if not sep:
            logger.warning("Ignoring invalid line in timelog: %s", line)
            return None
        try:
            stop = datetime.strptime(stamp, TIME_FMT)
        except ValueError:
            logger.warning("Ignoring line with invalid date in timelog: %s", line)
            return None
        return Entry(stop=stop, task=task)

    def format(self) -> str:
        lines: list[str] = []
        prev: Optional[date] = None

        for entry in self._entries:
            # leave an empty line between days
            if prev is not None and prev != entry.day:
                lines.append("")
            prev = entry.day
            lines.append(str(entry))

        return "".join(f"{line}\n" for line in lines)

    def save(self) -> None:
        if self.path is None:
            raise MissingLocationError("Cannot save a timelog that has no file")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(self.format(), encoding="utf-8")
        except OSError as exc:
            raise LogWriteError(f"Failed to write {self.path}: {exc}") from exc
        logger.debug("Saved %d entries to %s", len(self._entries), self.path)

    def get_all(self) -> Iterator[Entry]:
        return iter(self._entries)

    def get_day(self, day: date) -> list[Entry]:
        """Return the entries that stopped on ``day``, in log order."""
        return [entry for entry in self._entries if entry.day == day]

    def get_today(self) -> list[Entry]:
        return self.get_day(self._clock().date())

    def add(self, task: str) -> Entry:
        now = self._clock().replace(second=0, microsecond=0)
        if self._entries and now < self._entries[-1].stop:
            logger.warning(
                "Clock is behind the last entry (%s); the saved log will be out of order",
                self._entries[-1].stop.strftime(TIME_FMT),
            )
        entry = Entry(stop=now, task=task)
        self._entries.append(entry)
        return entry

    def __iter__(self) -> Iterator[Entry]:
        return self.get_all()

    def __len__(self) -> int:
        return len(self._entries)
