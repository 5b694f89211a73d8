"""
Calendar session: the single owner of view and selection state.

The presentation layer reads days(), grid() and selection from the session
and mutates it only through the operations below. Two callbacks notify
listeners: one when the visible grid changes (anchor, view mode or events),
one when the selection changes.
"""

from datetime import date
from typing import Callable, Optional

from .config import LocalizationConfig
from .date_range import CalendarDay, ViewMode, TIME_AXIS, generate_days, period_label
from .event_model import InterviewEvent
from .navigation import Direction, step
from .selection import AnchorPosition, SelectionMachine, SelectionState
from .slots import EventIndex, CalendarGrid, MONTH_CELL_LIMIT, build_grid


class CalendarSession:
    """
    State of one calendar window.

    Owns the anchor date, the view mode, the loaded events and the
    selection state machine.
    """

    def __init__(
        self,
        anchor: Optional[date] = None,
        view_mode: ViewMode = ViewMode.DAY,
        events: Optional[list[InterviewEvent]] = None,
        localization: Optional[LocalizationConfig] = None,
        month_cell_limit: int = MONTH_CELL_LIMIT
    ):
        self._anchor = anchor or date.today()
        self._view_mode = view_mode
        self._index = EventIndex(events or [])
        self._localization = localization or LocalizationConfig()
        self._month_cell_limit = month_cell_limit
        self._selection = SelectionMachine()

        self._on_view_change: Optional[Callable[[], None]] = None
        self._on_selection_change: Optional[Callable[[SelectionState], None]] = None

    # ==================== Callbacks ====================

    def set_on_view_change_callback(self, callback: Optional[Callable[[], None]]):
        """Called after anchor, view mode or events change."""
        self._on_view_change = callback

    def set_on_selection_change_callback(self, callback: Optional[Callable[[SelectionState], None]]):
        """Called with the new state after every selection transition that changes it."""
        self._on_selection_change = callback

    def _view_changed(self):
        if self._on_view_change:
            self._on_view_change()

    def _apply_selection(self, before: SelectionState, after: SelectionState) -> SelectionState:
        if after != before and self._on_selection_change:
            self._on_selection_change(after)
        return after

    # ==================== Read API ====================

    @property
    def anchor(self) -> date:
        return self._anchor

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @property
    def events(self) -> list[InterviewEvent]:
        return list(self._index.events)

    @property
    def selection(self) -> SelectionState:
        return self._selection.state

    def days(self) -> list[CalendarDay]:
        return generate_days(self._anchor, self._view_mode, self._localization)

    def hours(self) -> tuple[str, ...]:
        return () if self._view_mode == ViewMode.MONTH else TIME_AXIS

    def grid(self) -> CalendarGrid:
        return build_grid(self.days(), self._view_mode, self._index, self._month_cell_limit)

    def period_label(self) -> str:
        return period_label(self._anchor, self._view_mode, self._localization)

    def cell_events(self, day: CalendarDay, hour: Optional[str] = None) -> list[InterviewEvent]:
        """Events of a cell, computed from the current event list."""
        if hour is None:
            return self._index.for_day(day)
        return self._index.in_slot(day, hour)

    # ==================== View mutations ====================

    def set_events(self, events: list[InterviewEvent]):
        """Replace the event list and re-index it."""
        self._index = EventIndex(events)
        self._view_changed()

    def set_view_mode(self, mode: ViewMode):
        if mode != self._view_mode:
            self._view_mode = mode
            self._view_changed()

    def set_anchor(self, anchor: date):
        if anchor != self._anchor:
            self._anchor = anchor
            self._view_changed()

    def navigate(self, direction: Direction) -> date:
        self.set_anchor(step(direction, self._view_mode, self._anchor))
        return self._anchor

    def go_previous(self) -> date:
        return self.navigate(Direction.PREVIOUS)

    def go_next(self) -> date:
        return self.navigate(Direction.NEXT)

    # ==================== Selection transitions ====================

    def click_slot(
        self,
        day: CalendarDay,
        hour: Optional[str],
        anchor: AnchorPosition
    ) -> SelectionState:
        """
        Handle a click on the cell (day, hour); hour is None in Month view.

        The cell contents and the coincidence group are both computed from
        the event list current at click time.
        """
        before = self._selection.state
        after = self._selection.click_cell(self.cell_events(day, hour), self._index.events, anchor)
        return self._apply_selection(before, after)

    def click_candidate(self, event: InterviewEvent) -> SelectionState:
        before = self._selection.state
        return self._apply_selection(before, self._selection.click_candidate(event))

    def pointer_pressed(self, in_popover: bool, in_modal: bool) -> SelectionState:
        before = self._selection.state
        return self._apply_selection(before, self._selection.pointer_pressed(in_popover, in_modal))

    def close_detail(self) -> SelectionState:
        before = self._selection.state
        return self._apply_selection(before, self._selection.close_detail())
