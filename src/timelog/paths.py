"""Helpers for locating the activity log."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import PlatformDirs


APP_NAME = "gtimelog"
HOME_ENV_VAR = "GTIMELOG_HOME"
LOG_FILENAME = "timelog.txt"


def get_data_dir() -> Path:
    """Return the directory holding the log, creating it if needed.

    ``$GTIMELOG_HOME`` wins, then an existing ``~/.gtimelog``, then the
    platform's per-user data directory.
    """
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        path = Path(override).expanduser()
    else:
        legacy = Path.home() / f".{APP_NAME}"
        if legacy.is_dir():
            return legacy
        dirs = PlatformDirs(appname=APP_NAME, appauthor=False, roaming=True)
        path = Path(dirs.user_data_path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_log_path() -> Path:
    return get_data_dir() / LOG_FILENAME
