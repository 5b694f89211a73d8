"""Tests for slot assignment."""

from datetime import date, datetime

import pytest

from backend.date_range import CalendarDay, ViewMode, TIME_AXIS, generate_days
from backend.slots import (
    EventIndex, build_grid, events_for_day, events_in_slot, is_time_in_range
)

from conftest import make_event

THURSDAY = CalendarDay.for_date(date(2024, 8, 29))


class TestIsTimeInRange:
    """The three overlap cases against the 10:00 window."""

    @pytest.mark.parametrize("start,end,expected", [
        ("10:00", "10:30", True),   # window start inside event
        ("09:30", "10:30", True),   # window start inside event
        ("10:30", "11:30", True),   # window end inside event
        ("10:15", "10:45", True),   # event inside window
        ("09:00", "12:00", True),   # event spans window
        ("10:00", "11:00", True),   # exactly the window
        ("11:00", "12:00", False),  # starts at window end
        ("09:00", "10:00", False),  # ends at window start
        ("12:00", "13:00", False),
    ])
    def test_ten_o_clock_window(self, start, end, expected):
        s = datetime.fromisoformat(f"2024-08-29T{start}:00")
        e = datetime.fromisoformat(f"2024-08-29T{end}:00")
        assert is_time_in_range("10:00", s, e) is expected


class TestEventsInSlot:
    def test_multi_hour_event_appears_in_every_overlapped_hour(self):
        event = make_event(1, "2024-08-29T10:30:00", "2024-08-29T12:15:00")
        hits = [hour for hour in TIME_AXIS if events_in_slot(THURSDAY, hour, [event])]
        assert hits == ["10:00", "11:00", "12:00"]

    def test_other_day_is_excluded(self):
        event = make_event(1, "2024-08-30T10:00:00", "2024-08-30T11:00:00")
        assert events_in_slot(THURSDAY, "10:00", [event]) == []

    def test_order_preserving_and_idempotent(self, coinciding_events):
        first = events_in_slot(THURSDAY, "10:00", coinciding_events)
        second = events_in_slot(THURSDAY, "10:00", coinciding_events)
        assert first == second == coinciding_events
        reversed_input = list(reversed(coinciding_events))
        assert events_in_slot(THURSDAY, "10:00", reversed_input) == reversed_input

    def test_no_events(self):
        assert events_in_slot(THURSDAY, "09:00", []) == []


class TestEventsForDay:
    def test_filters_by_start_date(self):
        events = [
            make_event(1, "2024-08-29T09:00:00", "2024-08-29T10:00:00"),
            make_event(2, "2024-08-30T09:00:00", "2024-08-30T10:00:00"),
            make_event(3, "2024-08-29T20:00:00", "2024-08-29T21:00:00"),
        ]
        assert [e.id for e in events_for_day(THURSDAY, events)] == ["1", "3"]


class TestEventIndex:
    def test_index_matches_linear_scan(self, coinciding_events):
        extra = make_event("d", "2024-08-30T10:00:00", "2024-08-30T11:00:00")
        events = coinciding_events + [extra]
        index = EventIndex(events)
        for day in generate_days(date(2024, 8, 29), ViewMode.WEEK):
            assert index.for_day(day) == events_for_day(day, events)
            for hour in TIME_AXIS:
                assert index.in_slot(day, hour) == events_in_slot(day, hour, events)

    def test_len(self, coinciding_events):
        assert len(EventIndex(coinciding_events)) == 3


class TestBuildGrid:
    def test_week_grid_shape(self, coinciding_events):
        days = generate_days(date(2024, 8, 29), ViewMode.WEEK)
        grid = build_grid(days, ViewMode.WEEK, EventIndex(coinciding_events))
        assert len(grid.rows) == 13
        assert all(len(row) == 7 for row in grid.rows)
        assert grid.hours == TIME_AXIS

    def test_slot_cell_first_event_and_count(self, coinciding_events):
        grid = build_grid([THURSDAY], ViewMode.DAY, EventIndex(coinciding_events))
        cell = grid.cell(THURSDAY, "10:00")
        assert cell.first_event.id == "a"
        assert cell.count == 3
        assert cell.visible_events == (cell.first_event,)
        assert cell.hidden_count == 2
        assert grid.cell(THURSDAY, "09:00").is_empty

    def test_month_grid_caps_display_at_three(self):
        events = [
            make_event(i, f"2024-08-29T{9 + i:02d}:00:00", f"2024-08-29T{9 + i:02d}:30:00")
            for i in range(5)
        ]
        days = generate_days(date(2024, 8, 15), ViewMode.MONTH)
        grid = build_grid(days, ViewMode.MONTH, EventIndex(events))
        assert grid.hours == ()
        assert len(grid.rows) == 1
        assert len(grid.cells()) == 31
        cell = grid.cell(THURSDAY)
        assert cell.count == 5
        assert [e.id for e in cell.visible_events] == ["0", "1", "2"]
        assert cell.hidden_count == 2

    def test_empty_event_list_gives_empty_cells(self):
        grid = build_grid([THURSDAY], ViewMode.DAY, EventIndex())
        assert all(cell.is_empty for cell in grid.cells())
