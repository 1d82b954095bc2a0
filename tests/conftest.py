"""Shared test fixtures for timelog."""

from datetime import datetime

import pytest

TWO_DAYS = """
2022-06-09 06:02: arrived
2022-06-09 06:27: email
2022-06-09 06:32: **tea
2022-06-09 12:00: work

2022-06-10 07:00: arrived
2022-06-10 12:05: rtimelog: code
2022-06-10 12:30: **lunch
2022-06-10 14:00: rtimelog: code
2022-06-10 15:00: bug triage
2022-06-10 16:00: customer joe: support
"""


class FakeClock:
    """Callable clock that returns a settable time."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def two_days():
    return TWO_DAYS


@pytest.fixture
def clock():
    return FakeClock(datetime(2022, 6, 10, 17, 45, 31, 250))


@pytest.fixture
def log_file(tmp_path):
    """Write the two-day fixture log to a temporary file."""
    path = tmp_path / "timelog.txt"
    path.write_text(TWO_DAYS.lstrip(), encoding="utf-8")
    return path
