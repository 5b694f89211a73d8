"""
Navigation between visible periods.
"""

from datetime import date, timedelta
from enum import Enum

from .date_range import ViewMode


class Direction(Enum):
    PREVIOUS = -1
    NEXT = 1


# Month navigation jumps a flat 30 days, not to the neighbouring calendar month
STEP_DAYS = {
    ViewMode.DAY: 1,
    ViewMode.WEEK: 7,
    ViewMode.MONTH: 30,
}


def step(direction: Direction, mode: ViewMode, anchor: date) -> date:
    """Return the anchor moved one period in direction."""
    return anchor + timedelta(days=direction.value * STEP_DAYS[mode])
