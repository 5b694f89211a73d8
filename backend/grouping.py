"""
Coincidence grouping of interview events.
"""

from typing import Iterable

from .event_model import InterviewEvent


def group_by_exact_interval(
    clicked: InterviewEvent,
    events: Iterable[InterviewEvent]
) -> list[InterviewEvent]:
    """
    All events sharing clicked's exact start and end, in list order.

    Partial overlaps never group, even when both events render in the same
    hour cell. If clicked is not part of events it is still returned, so the
    group is never empty.
    """
    group = [e for e in events if e.same_interval(clicked)]
    if clicked not in group:
        group.insert(0, clicked)
    return group
