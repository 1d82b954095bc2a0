"""Domain models for recorded activity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime


TIME_FMT = "%Y-%m-%d %H:%M"
SLACKING_MARKER = "**"


@dataclass(frozen=True, slots=True)
class Entry:
    """Marks the end of one activity and, implicitly, the start of the next."""

    stop: datetime
    task: str

    @property
    def day(self) -> date:
        return self.stop.date()

    @property
    def is_slacking(self) -> bool:
        return self.task.startswith(SLACKING_MARKER)

    def __str__(self) -> str:
        return f"{self.stop.strftime(TIME_FMT)}: {self.task}"
