"""Simple reporting utilities for CLI output."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from typing import Iterable, Optional

from .completion import PROJECT_SEP
from .models import Entry
from .store import Timelog


class DayPrinter:
    """Render human-readable views of a day in the console."""

    def __init__(self, timelog: Timelog) -> None:
        self.timelog = timelog

    def print_entries(self, day: date) -> None:
        entries = self.timelog.get_day(day)
        if not entries:
            print(f"No entries for {day.isoformat()}.")
            return
        for entry, duration in iter_durations(entries):
            print(f"{format_duration(duration.total_seconds())}  {entry}")

    def print_daily_summary(self, day: date) -> None:
        pairs = iter_durations(self.timelog.get_day(day))
        if not pairs:
            print("No activity recorded for the selected day.")
            return

        total_work = sum(d.total_seconds() for e, d in pairs if not e.is_slacking)
        total_slack = sum(d.total_seconds() for e, d in pairs if e.is_slacking)

        print(f"Summary for {day.isoformat()}")
        print("-" * 40)
        print(f"Work:     {format_duration(total_work)}")
        print(f"Slacking: {format_duration(total_slack)}")

        projects = aggregate_by_project(pairs)
        if projects:
            print()
            print("By project:")
            for project, seconds in projects:
                print(f"  {project:<30} {format_duration(seconds)}")

        tasks = aggregate_by_task(pairs)
        if tasks:
            print()
            print("By task:")
            for task, seconds in tasks:
                print(f"  {task[:45]:<45} {format_duration(seconds)}")


def iter_durations(entries: Iterable[Entry]) -> list[tuple[Entry, timedelta]]:
    """Pair each entry with the time elapsed since the previous one that day.

    The first entry of a day only marks arrival and lasts zero.
    """
    pairs: list[tuple[Entry, timedelta]] = []
    prev: Optional[Entry] = None
    for entry in entries:
        if prev is None or prev.day != entry.day:
            duration = timedelta(0)
        else:
            duration = entry.stop - prev.stop
        pairs.append((entry, duration))
        prev = entry
    return pairs


def aggregate_by_task(pairs: Iterable[tuple[Entry, timedelta]]) -> list[tuple[str, float]]:
    totals: defaultdict[str, float] = defaultdict(float)
    for entry, duration in pairs:
        if entry.is_slacking or not duration:
            continue
        totals[entry.task] += duration.total_seconds()
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def aggregate_by_project(pairs: Iterable[tuple[Entry, timedelta]]) -> list[tuple[str, float]]:
    totals: defaultdict[str, float] = defaultdict(float)
    for entry, duration in pairs:
        if entry.is_slacking or not duration:
            continue
        project, sep, _ = entry.task.partition(PROJECT_SEP)
        if not sep:
            continue
        totals[project.strip()] += duration.total_seconds()
    return sorted(totals.items(), key=lambda item: item[1], reverse=True)


def format_duration(seconds: float) -> str:
    total_minutes = int(round(seconds / 60))
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"
