"""
Interview event model.

Events arrive as JSON records from the event source and are converted once,
at ingestion, into immutable InterviewEvent values. All times are naive
local datetimes; no timezone conversion takes place.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional


class EventFormatError(ValueError):
    """Raised when a raw event record cannot be turned into an InterviewEvent."""


def parse_iso(value: Any) -> datetime:
    """
    Parse an ISO-8601 string into a naive local datetime.

    Strings carrying an offset (or a trailing 'Z') keep their wall-clock
    time; the offset is dropped rather than converted.
    """
    if not isinstance(value, str) or not value:
        raise EventFormatError(f"Expected an ISO-8601 string, got {value!r}")
    try:
        dt = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError as e:
        raise EventFormatError(f"Invalid ISO-8601 timestamp {value!r}: {e}") from e
    if dt.tzinfo is not None:
        dt = dt.replace(tzinfo=None)
    return dt


def _nested(data: dict, *keys: str) -> str:
    """Walk nested dicts, returning '' as soon as a level is missing."""
    node: Any = data
    for key in keys:
        if not isinstance(node, dict):
            return ''
        node = node.get(key)
    return str(node) if node is not None else ''


@dataclass(frozen=True)
class InterviewEvent:
    """A single scheduled interview."""
    id: str
    start: datetime
    end: datetime
    title: str = ''
    interviewer: str = ''
    summary: str = ''
    link: str = ''
    # Timestamps exactly as received, offset included
    start_raw: str = field(default='', compare=False, repr=False)
    end_raw: str = field(default='', compare=False, repr=False)

    def __post_init__(self):
        if self.start >= self.end:
            raise EventFormatError(
                f"Event {self.id!r} ends before it starts ({self.start} >= {self.end})"
            )

    @classmethod
    def from_dict(cls, data: dict) -> 'InterviewEvent':
        """
        Build an event from a raw source record.

        Shape: {id, start, end, summary, link,
                user_det: {job_id: {jobRequest_Title}, handled_by: {firstName}}}

        start/end are required; the display fields degrade to ''.
        """
        if not isinstance(data, dict):
            raise EventFormatError(f"Event record must be an object, got {type(data).__name__}")
        if 'start' not in data or 'end' not in data:
            raise EventFormatError(f"Event record {data.get('id')!r} is missing start or end")

        return cls(
            id=str(data.get('id', '')),
            start=parse_iso(data['start']),
            end=parse_iso(data['end']),
            title=_nested(data, 'user_det', 'job_id', 'jobRequest_Title'),
            interviewer=_nested(data, 'user_det', 'handled_by', 'firstName'),
            summary=str(data.get('summary') or ''),
            link=str(data.get('link') or ''),
            start_raw=data['start'],
            end_raw=data['end'],
        )

    @property
    def date_key(self) -> str:
        """Canonical yyyy-MM-dd key of the start date."""
        return self.start.strftime('%Y-%m-%d')

    @property
    def time_range(self) -> str:
        """'HH:mm - HH:mm' display string."""
        return f"{self.start.strftime('%H:%M')} - {self.end.strftime('%H:%M')}"

    def same_interval(self, other: 'InterviewEvent') -> bool:
        """
        True when both events share identical start and end instants.

        Events read from the source compare their original timestamps, so
        equal wall-clock times with different offsets do not match.
        """
        if self.start_raw and other.start_raw:
            return self.start_raw == other.start_raw and self.end_raw == other.end_raw
        return self.start == other.start and self.end == other.end


def parse_events(records: list, on_skip: Optional[callable] = None) -> list[InterviewEvent]:
    """
    Convert raw records into events, preserving their order.

    Malformed records are skipped; on_skip(record, error) is called for each.
    """
    events = []
    for record in records:
        try:
            events.append(InterviewEvent.from_dict(record))
        except EventFormatError as e:
            if on_skip is not None:
                on_skip(record, e)
    return events
