"""Completion candidates drawn from previously logged tasks."""

from __future__ import annotations

from typing import Iterable, Optional

from .store import Timelog

PROJECT_SEP = ":"
TASK_SEP = "--"


class TaskCompleter:
    """Suggests task labels for the text typed so far.

    The pool is a copy: entries added to a Timelog after the snapshot was
    taken are not seen until ``add`` is called or a new snapshot is built.
    """

    def __init__(self, labels: Iterable[str] = ()) -> None:
        self._labels: dict[str, None] = dict.fromkeys(labels)

    @classmethod
    def snapshot(cls, timelog: Timelog) -> "TaskCompleter":
        return cls(entry.task for entry in timelog.get_all())

    @property
    def candidates(self) -> list[str]:
        return list(self._labels)

    def add(self, label: str) -> None:
        self._labels.setdefault(label, None)

    def complete(self, line: str, pos: int) -> tuple[int, list[str]]:
        """Return ``(start, suggestions)`` for a cursor at ``pos`` in ``line``.

        Suggestions replace the whole line, so ``start`` is always 0 when
        anything is offered. Completion only happens at the end of a
        non-empty line; otherwise the cursor position comes back unchanged
        with no suggestions.

        Labels are cut at the next separator the line does not contain
        yet: first the project (``:``), then the task (``--``).
        """
        if not line or pos != len(line):
            return pos, []

        sep = _next_separator(line)
        suggestions: dict[str, None] = {}
        for label in self._labels:
            if not label.startswith(line):
                continue
            if sep is not None and sep in label:
                suggestions[label.split(sep, 1)[0].strip()] = None
            else:
                suggestions[label] = None
        return 0, list(suggestions)

    def __len__(self) -> int:
        return len(self._labels)


def _next_separator(line: str) -> Optional[str]:
    if PROJECT_SEP not in line:
        return PROJECT_SEP
    if TASK_SEP not in line:
        return TASK_SEP
    return None
