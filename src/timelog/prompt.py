"""Interactive entry prompt with task completion."""

from __future__ import annotations

import logging
import readline
from typing import Callable, Optional

from .completion import TaskCompleter
from .store import Timelog

logger = logging.getLogger(__name__)

PROMPT = "> "


class ReadlineCompletion:
    """Feeds TaskCompleter suggestions to the stdlib readline module."""

    def __init__(self, completer: TaskCompleter) -> None:
        self.completer = completer
        self._matches: list[str] = []

    def install(self) -> None:
        readline.set_completer(self.complete)
        # suggestions replace the whole line, not just the last word
        readline.set_completer_delims("")
        if hasattr(readline, "set_completion_append_character"):
            readline.set_completion_append_character("")
        if "libedit" in (readline.__doc__ or ""):
            readline.parse_and_bind("bind ^I rl_complete")
        else:
            readline.parse_and_bind("tab: complete")

    def complete(self, text: str, state: int) -> Optional[str]:
        if state == 0:
            line = readline.get_line_buffer()
            _, self._matches = self.completer.complete(line, readline.get_endidx())
        if state < len(self._matches):
            return self._matches[state]
        return None


def run_entry_loop(
    timelog: Timelog,
    completer: TaskCompleter,
    *,
    autosave: bool = True,
    read_line: Callable[[str], str] = input,
    echo: Callable[[str], None] = print,
) -> int:
    """Record one entry per line read until EOF or interrupt.

    Returns the number of entries added.
    """
    added = 0
    while True:
        try:
            task = read_line(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            echo("")
            break
        if not task:
            continue
        entry = timelog.add(task)
        completer.add(task)
        added += 1
        echo(str(entry))
        if autosave:
            timelog.save()

    if added and not autosave:
        timelog.save()
    logger.debug("Entry loop finished after %d entries", added)
    return added
