"""
Slot assignment: which events occupy which grid cell.

Day/Week views use a days x hours grid, Month view one cell per day.
An event appears in every hour cell its interval overlaps; events are never
split or merged into spanning blocks.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Iterable, Optional

from .date_range import CalendarDay, ViewMode, TIME_AXIS
from .event_model import InterviewEvent

# Month cells show at most this many events, without an overflow marker
MONTH_CELL_LIMIT = 3

SLOT_LENGTH = timedelta(hours=1)


def _slot_window(on_day: datetime, hour: str) -> tuple[datetime, datetime]:
    hh, mm = (int(part) for part in hour.split(':'))
    slot_start = on_day.replace(hour=hh, minute=mm, second=0, microsecond=0)
    return slot_start, slot_start + SLOT_LENGTH


def is_time_in_range(hour: str, start: datetime, end: datetime) -> bool:
    """
    Check whether [start, end) touches the one-hour window beginning at hour
    on the event's start date.

    Three cases count: the window start lies inside the event, the window
    end lies inside the event, or the event lies inside the window.
    """
    slot_start, slot_end = _slot_window(start, hour)
    return (
        (start <= slot_start < end) or
        (start < slot_end <= end) or
        (slot_start <= start and slot_end >= end)
    )


def events_for_day(day: CalendarDay, events: Iterable[InterviewEvent]) -> list[InterviewEvent]:
    """Events starting on day, in list order."""
    return [e for e in events if e.start.date() == day.date]


def events_in_slot(day: CalendarDay, hour: str, events: Iterable[InterviewEvent]) -> list[InterviewEvent]:
    """Events starting on day whose interval overlaps the hour window, in list order."""
    return [
        e for e in events_for_day(day, events)
        if is_time_in_range(hour, e.start, e.end)
    ]


class EventIndex:
    """
    Events bucketed by start date key.

    Rebuilt once per event list update so that each cell lookup scans only
    the events of its own day. Buckets keep the original list order.
    """

    def __init__(self, events: Iterable[InterviewEvent] = ()):
        self._events: list[InterviewEvent] = list(events)
        self._by_day: dict[str, list[InterviewEvent]] = {}
        for event in self._events:
            self._by_day.setdefault(event.date_key, []).append(event)

    @property
    def events(self) -> list[InterviewEvent]:
        return self._events

    def __len__(self) -> int:
        return len(self._events)

    def for_day(self, day: CalendarDay) -> list[InterviewEvent]:
        return list(self._by_day.get(day.full_date, []))

    def in_slot(self, day: CalendarDay, hour: str) -> list[InterviewEvent]:
        return [
            e for e in self._by_day.get(day.full_date, [])
            if is_time_in_range(hour, e.start, e.end)
        ]


@dataclass(frozen=True)
class SlotCell:
    """A single grid cell and the events assigned to it."""
    day: CalendarDay
    hour: Optional[str]  # None for Month cells
    events: tuple[InterviewEvent, ...] = ()
    display_limit: Optional[int] = None

    @property
    def first_event(self) -> Optional[InterviewEvent]:
        return self.events[0] if self.events else None

    @property
    def count(self) -> int:
        return len(self.events)

    @property
    def is_empty(self) -> bool:
        return not self.events

    @property
    def visible_events(self) -> tuple[InterviewEvent, ...]:
        """Events actually drawn in the cell."""
        if self.display_limit is None:
            return self.events[:1]
        return self.events[:self.display_limit]

    @property
    def hidden_count(self) -> int:
        return self.count - len(self.visible_events)


@dataclass(frozen=True)
class CalendarGrid:
    """
    Materialized grid for one view.

    Day/Week: rows[i][j] is the cell for hours[i] x days[j].
    Month: a single row with one cell per day.
    """
    mode: ViewMode
    days: tuple[CalendarDay, ...]
    hours: tuple[str, ...] = ()
    rows: tuple[tuple[SlotCell, ...], ...] = field(default_factory=tuple)

    def cells(self) -> list[SlotCell]:
        return [cell for row in self.rows for cell in row]

    def cell(self, day: CalendarDay, hour: Optional[str] = None) -> Optional[SlotCell]:
        for c in self.cells():
            if c.day == day and c.hour == hour:
                return c
        return None


def build_grid(
    days: Iterable[CalendarDay],
    mode: ViewMode,
    index: EventIndex,
    month_cell_limit: int = MONTH_CELL_LIMIT,
    hours: Iterable[str] = TIME_AXIS
) -> CalendarGrid:
    """Assign the indexed events to every visible cell."""
    days = tuple(days)
    if mode == ViewMode.MONTH:
        row = tuple(
            SlotCell(day, None, tuple(index.for_day(day)), display_limit=month_cell_limit)
            for day in days
        )
        return CalendarGrid(mode, days, (), (row,))

    hours = tuple(hours)
    rows = tuple(
        tuple(SlotCell(day, hour, tuple(index.in_slot(day, hour))) for day in days)
        for hour in hours
    )
    return CalendarGrid(mode, days, hours, rows)
