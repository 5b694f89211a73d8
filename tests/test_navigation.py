"""Tests for period navigation."""

from datetime import date

import pytest

from backend.date_range import ViewMode
from backend.navigation import Direction, STEP_DAYS, step


@pytest.mark.parametrize("mode,expected", [
    (ViewMode.DAY, date(2024, 8, 30)),
    (ViewMode.WEEK, date(2024, 9, 5)),
    (ViewMode.MONTH, date(2024, 9, 28)),
])
def test_next(mode, expected):
    assert step(Direction.NEXT, mode, date(2024, 8, 29)) == expected


def test_month_step_is_thirty_days():
    assert step(Direction.NEXT, ViewMode.MONTH, date(2024, 8, 15)) == date(2024, 9, 14)
    assert step(Direction.PREVIOUS, ViewMode.MONTH, date(2024, 3, 1)) == date(2024, 1, 31)


@pytest.mark.parametrize("mode", list(ViewMode))
def test_previous_then_next_returns_to_start(mode):
    start = date(2024, 8, 29)
    assert step(Direction.NEXT, mode, step(Direction.PREVIOUS, mode, start)) == start


def test_every_mode_has_a_step():
    assert set(STEP_DAYS) == set(ViewMode)
