"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.event_model import InterviewEvent


def make_record(event_id, start, end, title="Django Developer", interviewer="Vinodhini",
                summary="1st Round", link="https://meet.google.com/abc"):
    """Raw event record in the source JSON shape."""
    return {
        "id": event_id,
        "summary": summary,
        "start": start,
        "end": end,
        "user_det": {
            "job_id": {"jobRequest_Title": title},
            "handled_by": {"firstName": interviewer},
        },
        "link": link,
    }


def make_event(event_id, start, end, **kwargs):
    """InterviewEvent built from ISO strings."""
    return InterviewEvent.from_dict(make_record(event_id, start, end, **kwargs))


@pytest.fixture
def sample_record():
    """Single raw event record."""
    return make_record(1, "2024-08-29T10:00:00", "2024-08-29T10:30:00")


@pytest.fixture
def coinciding_events():
    """Two events sharing 2024-08-29 10:00-10:30, plus an overlapping one."""
    return [
        make_event("a", "2024-08-29T10:00:00", "2024-08-29T10:30:00", title="Django Developer"),
        make_event("b", "2024-08-29T10:00:00", "2024-08-29T10:30:00", title="React Developer"),
        make_event("c", "2024-08-29T10:15:00", "2024-08-29T11:00:00", title="QA Engineer"),
    ]


@pytest.fixture
def single_event():
    return make_event("solo", "2024-08-29T10:00:00", "2024-08-29T11:00:00")
