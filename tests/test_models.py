"""Tests for timelog.models."""

from datetime import date, datetime

import pytest

from timelog.models import Entry


class TestEntry:
    def test_str(self):
        entry = Entry(stop=datetime(2022, 5, 31, 13, 59), task="email")
        assert str(entry) == "2022-05-31 13:59: email"

    def test_str_keeps_task_colons(self):
        entry = Entry(stop=datetime(2022, 6, 10, 16, 0), task="customer joe: support")
        assert str(entry) == "2022-06-10 16:00: customer joe: support"

    def test_structural_equality(self):
        a = Entry(stop=datetime(2022, 5, 31, 13, 59), task="email")
        b = Entry(stop=datetime(2022, 5, 31, 13, 59), task="email")
        assert a == b
        assert a != Entry(stop=datetime(2022, 5, 31, 14, 0), task="email")

    def test_immutable(self):
        entry = Entry(stop=datetime(2022, 5, 31, 13, 59), task="email")
        with pytest.raises(AttributeError):
            entry.task = "other"

    def test_day(self):
        entry = Entry(stop=datetime(2022, 6, 9, 23, 59), task="late")
        assert entry.day == date(2022, 6, 9)

    def test_is_slacking(self):
        assert Entry(stop=datetime(2022, 6, 9, 6, 32), task="**tea").is_slacking
        assert not Entry(stop=datetime(2022, 6, 9, 6, 32), task="tea").is_slacking
