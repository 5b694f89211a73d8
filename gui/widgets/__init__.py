"""
Interview Calendar GUI Widgets

Custom widgets for displaying calendar data.
"""

from .event_widget import EventCard, MonthEventChip
from .calendar_widget import CalendarWidget, TimeGridView, MonthGridView
from .popover import DisambiguationPopover

__all__ = [
    'EventCard',
    'MonthEventChip',
    'CalendarWidget',
    'TimeGridView',
    'MonthGridView',
    'DisambiguationPopover',
]
