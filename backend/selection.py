"""
Selection state machine.

Decides what the presentation layer shows after a click: nothing (Idle), a
disambiguation popover listing coinciding interviews (Disambiguating), or
the detail dialog of one interview (DetailShown).

Transitions:
    any state       --cell click, group of 1-->   DetailShown
    any state       --cell click, group of n-->   Disambiguating
    Disambiguating  --candidate click-->          DetailShown
    Disambiguating  --press outside popover
                      and dialog-->               Idle
    DetailShown     --close-->                    Idle
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .event_model import InterviewEvent
from .grouping import group_by_exact_interval


@dataclass(frozen=True)
class AnchorPosition:
    """Screen point the popover hangs from, right of the clicked cell."""
    top: int
    left: int

    # Horizontal gap between the clicked cell and the popover
    GAP = 10

    @classmethod
    def beside(cls, top: int, left: int, width: int) -> 'AnchorPosition':
        """Anchor for a cell whose bounding box starts at (top, left)."""
        return cls(top=top, left=left + width + cls.GAP)

    def for_candidate(self, index: int, spacing: int) -> 'AnchorPosition':
        """Position of the index-th candidate card, stacked downwards."""
        return AnchorPosition(top=self.top + index * spacing, left=self.left)


@dataclass(frozen=True)
class Idle:
    """Nothing shown."""


@dataclass(frozen=True)
class Disambiguating:
    """Popover listing events that share one exact interval."""
    candidates: tuple[InterviewEvent, ...]
    anchor: AnchorPosition


@dataclass(frozen=True)
class DetailShown:
    """
    Detail dialog for one event.

    origin is the popover the event was picked from, if any; it stays
    beneath the dialog until the dialog is closed.
    """
    event: InterviewEvent
    origin: Optional[Disambiguating] = None


SelectionState = Union[Idle, Disambiguating, DetailShown]

IDLE = Idle()


class SelectionMachine:
    """Holds the current SelectionState and applies transitions to it."""

    def __init__(self):
        self._state: SelectionState = IDLE

    @property
    def state(self) -> SelectionState:
        return self._state

    def click_cell(
        self,
        cell_events: list[InterviewEvent],
        all_events: Iterable[InterviewEvent],
        anchor: AnchorPosition
    ) -> SelectionState:
        """
        Handle a click on a grid cell.

        Grouping uses only the cell's first event, so other events in the
        same cell that overlap without matching exactly are not offered.
        """
        if not cell_events:
            return self._state

        group = group_by_exact_interval(cell_events[0], all_events)
        if len(group) == 1:
            self._state = DetailShown(group[0])
        else:
            self._state = Disambiguating(tuple(group), anchor)
        return self._state

    def click_candidate(self, event: InterviewEvent) -> SelectionState:
        """Open the detail dialog for a popover candidate."""
        state = self._state
        if isinstance(state, Disambiguating) and event in state.candidates:
            self._state = DetailShown(event, origin=state)
        return self._state

    def pointer_pressed(self, in_popover: bool, in_modal: bool) -> SelectionState:
        """Dismiss the popover when a press lands outside both regions."""
        if isinstance(self._state, Disambiguating) and not in_popover and not in_modal:
            self._state = IDLE
        return self._state

    def close_detail(self) -> SelectionState:
        if isinstance(self._state, DetailShown):
            self._state = IDLE
        return self._state
