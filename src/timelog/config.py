"""Configuration models and helpers for the timelog."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .paths import get_log_path


@dataclass(slots=True)
class TimelogSettings:
    """Runtime configuration for loading and saving the log."""

    log_path: Path
    autosave: bool = True

    @classmethod
    def from_options(
        cls,
        log_path: Optional[Path] = None,
        autosave: bool = True,
    ) -> "TimelogSettings":
        path = Path(log_path).expanduser() if log_path is not None else get_log_path()
        return cls(log_path=path, autosave=autosave)
