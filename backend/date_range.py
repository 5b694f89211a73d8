"""
Visible date range and time axis for the Day, Week and Month views.
"""

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Optional

from .config import LocalizationConfig


class ViewMode(Enum):
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"


# Hourly labels shown in Day and Week views. Month view ignores them.
TIME_AXIS: tuple[str, ...] = tuple(f"{hour:02d}:00" for hour in range(9, 22))


@dataclass(frozen=True)
class CalendarDay:
    """One visible day column (Day/Week) or cell (Month)."""
    date: date
    name: str        # Weekday name, e.g. "Thursday"
    label: str       # Short label, e.g. "29 Aug"
    full_date: str   # Canonical key, yyyy-MM-dd

    @classmethod
    def for_date(cls, d: date, localization: Optional[LocalizationConfig] = None) -> 'CalendarDay':
        loc = localization or LocalizationConfig()
        return cls(
            date=d,
            name=loc.get_day_name(d.weekday()),
            label=f"{d.day:02d} {loc.get_month_abbr(d.month)}",
            full_date=d.strftime('%Y-%m-%d'),
        )


def week_start(anchor: date) -> date:
    """Most recent Sunday on or before anchor."""
    # date.weekday(): Monday=0 .. Sunday=6
    return anchor - timedelta(days=(anchor.weekday() + 1) % 7)


def generate_days(
    anchor: date,
    mode: ViewMode,
    localization: Optional[LocalizationConfig] = None
) -> list[CalendarDay]:
    """Ordered list of days visible for anchor in the given view mode."""
    if mode == ViewMode.DAY:
        dates = [anchor]
    elif mode == ViewMode.WEEK:
        first = week_start(anchor)
        dates = [first + timedelta(days=i) for i in range(7)]
    else:  # MONTH
        days_in_month = calendar.monthrange(anchor.year, anchor.month)[1]
        dates = [anchor.replace(day=i) for i in range(1, days_in_month + 1)]
    return [CalendarDay.for_date(d, localization) for d in dates]


def period_label(
    anchor: date,
    mode: ViewMode,
    localization: Optional[LocalizationConfig] = None
) -> str:
    """Header text: 'MMMM yyyy' for Day/Month, 'dd MMM to dd MMM' for Week."""
    loc = localization or LocalizationConfig()
    if mode == ViewMode.WEEK:
        first = CalendarDay.for_date(week_start(anchor), loc)
        last = CalendarDay.for_date(week_start(anchor) + timedelta(days=6), loc)
        return f"{first.label} to {last.label}"
    return f"{loc.get_month_name(anchor.month)} {anchor.year}"
