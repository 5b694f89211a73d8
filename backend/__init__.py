"""
Interview Calendar Backend Module

This module provides the core functionality behind the calendar views:
- Configuration parsing (config.py)
- Interview event model (event_model.py)
- Event source loading over HTTP or from a file (event_source.py)
- Visible days and time axis (date_range.py)
- Slot assignment (slots.py) and coincidence grouping (grouping.py)
- Selection state machine (selection.py) and navigation (navigation.py)
- The calendar session tying them together (session.py)

The Qt-based background loader lives in network_worker.py and is imported
by the GUI only.
"""

from .config import Config
from .event_model import InterviewEvent, EventFormatError
from .event_source import EventSource, EventSourceError
from .date_range import CalendarDay, ViewMode, TIME_AXIS, generate_days
from .slots import SlotCell, CalendarGrid, EventIndex, events_for_day, events_in_slot
from .grouping import group_by_exact_interval
from .selection import AnchorPosition, Idle, Disambiguating, DetailShown, SelectionState
from .navigation import Direction, step
from .session import CalendarSession

__all__ = [
    'Config',
    'InterviewEvent',
    'EventFormatError',
    'EventSource',
    'EventSourceError',
    'CalendarDay',
    'ViewMode',
    'TIME_AXIS',
    'generate_days',
    'SlotCell',
    'CalendarGrid',
    'EventIndex',
    'events_for_day',
    'events_in_slot',
    'group_by_exact_interval',
    'AnchorPosition',
    'Idle',
    'Disambiguating',
    'DetailShown',
    'SelectionState',
    'Direction',
    'step',
    'CalendarSession',
]
