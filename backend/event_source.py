"""
Event source for the interview list.

Loads the JSON array of interview records once, either over HTTP or from a
local file, and converts it into InterviewEvent values.
"""

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional
from dataclasses import dataclass

import requests
import pytz

from .event_model import InterviewEvent, parse_events


class EventSourceError(Exception):
    """Raised when the interview list cannot be loaded."""


@dataclass
class SourceInfo:
    """Information about the last load of an event source."""
    source: str
    last_fetch: Optional[datetime] = None
    event_count: int = 0
    skipped_count: int = 0
    error: Optional[str] = None


class EventSource:
    """
    Read-only loader for the interview list.

    There is no caching and no retry: each call to load() performs exactly
    one request (or file read).
    """

    def __init__(self, source: str, timeout: int = 30):
        """
        Initialize an event source.

        Args:
            source: http(s) URL or path of a JSON file
            timeout: Request timeout in seconds
        """
        self.source = source
        self.timeout = timeout

        self._last_fetch: Optional[datetime] = None
        self._event_count = 0
        self._skipped_count = 0
        self._error: Optional[str] = None

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(('http://', 'https://'))

    def fetch_records(self) -> list:
        """
        Fetch the raw JSON array.

        Raises:
            EventSourceError: on network, HTTP, file or JSON errors, or if the
                payload is not an array.
        """
        if self.is_remote:
            try:
                response = requests.get(
                    self.source,
                    timeout=self.timeout,
                    headers={
                        'User-Agent': 'Interview-Calendar/1.0',
                        'Accept': 'application/json'
                    }
                )
                response.raise_for_status()
            except requests.RequestException as e:
                raise EventSourceError(f"Network error: {e}") from e

            try:
                data = response.json()
            except ValueError as e:
                raise EventSourceError(f"Invalid JSON from {self.source}: {e}") from e
        else:
            try:
                with open(Path(self.source), 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except OSError as e:
                raise EventSourceError(f"Cannot read {self.source}: {e}") from e
            except json.JSONDecodeError as e:
                raise EventSourceError(f"Invalid JSON in {self.source}: {e}") from e

        if not isinstance(data, list):
            raise EventSourceError(
                f"Expected a JSON array of events, got {type(data).__name__}"
            )
        return data

    def load(self) -> list[InterviewEvent]:
        """
        Load and parse the interview list.

        Malformed records are skipped and reported on stderr; the load as a
        whole only fails through EventSourceError.
        """
        skipped = []

        def _on_skip(record, error):
            skipped.append(record)
            print(f"DEBUG: Skipping malformed event record: {error}", file=sys.stderr)

        try:
            records = self.fetch_records()
        except EventSourceError as e:
            self._error = str(e)
            raise

        events = parse_events(records, on_skip=_on_skip)
        self._last_fetch = datetime.now(pytz.UTC)
        self._event_count = len(events)
        self._skipped_count = len(skipped)
        self._error = None
        return events

    @property
    def last_fetch(self) -> Optional[datetime]:
        """Get the last successful fetch time (UTC)."""
        return self._last_fetch

    @property
    def error(self) -> Optional[str]:
        """Get the last error message."""
        return self._error

    def get_info(self) -> SourceInfo:
        """Get information about this source."""
        return SourceInfo(
            source=self.source,
            last_fetch=self._last_fetch,
            event_count=self._event_count,
            skipped_count=self._skipped_count,
            error=self._error
        )
