"""Tests for event ingestion."""

from datetime import datetime

import pytest

from backend.event_model import EventFormatError, InterviewEvent, parse_events, parse_iso

from conftest import make_record


class TestParseIso:
    def test_naive_timestamp(self):
        assert parse_iso("2024-08-29T10:00:00") == datetime(2024, 8, 29, 10, 0)

    def test_offset_is_dropped_not_converted(self):
        assert parse_iso("2024-08-29T10:00:00+05:30") == datetime(2024, 8, 29, 10, 0)
        assert parse_iso("2024-08-29T10:00:00Z") == datetime(2024, 8, 29, 10, 0)

    @pytest.mark.parametrize("value", ["", "not a date", None, 1724925600])
    def test_invalid_values(self, value):
        with pytest.raises(EventFormatError):
            parse_iso(value)


class TestInterviewEvent:
    """Tests for InterviewEvent.from_dict() and its display helpers."""

    def test_from_dict_reads_nested_fields(self, sample_record):
        event = InterviewEvent.from_dict(sample_record)
        assert event.id == "1"
        assert event.title == "Django Developer"
        assert event.interviewer == "Vinodhini"
        assert event.summary == "1st Round"
        assert event.link == "https://meet.google.com/abc"
        assert event.date_key == "2024-08-29"
        assert event.time_range == "10:00 - 10:30"

    def test_missing_nested_fields_degrade_to_empty(self):
        record = {"id": 7, "start": "2024-08-29T10:00:00", "end": "2024-08-29T11:00:00"}
        event = InterviewEvent.from_dict(record)
        assert event.title == ""
        assert event.interviewer == ""
        assert event.summary == ""
        assert event.link == ""

    def test_nested_level_of_wrong_type(self):
        record = make_record(1, "2024-08-29T10:00:00", "2024-08-29T11:00:00")
        record["user_det"]["job_id"] = "not-an-object"
        assert InterviewEvent.from_dict(record).title == ""

    def test_missing_start_raises(self):
        record = make_record(1, "2024-08-29T10:00:00", "2024-08-29T11:00:00")
        del record["start"]
        with pytest.raises(EventFormatError):
            InterviewEvent.from_dict(record)

    @pytest.mark.parametrize("start,end", [
        ("2024-08-29T11:00:00", "2024-08-29T10:00:00"),
        ("2024-08-29T10:00:00", "2024-08-29T10:00:00"),
    ])
    def test_end_not_after_start_raises(self, start, end):
        with pytest.raises(EventFormatError):
            InterviewEvent.from_dict(make_record(1, start, end))

    def test_non_dict_record_raises(self):
        with pytest.raises(EventFormatError):
            InterviewEvent.from_dict(["2024-08-29T10:00:00"])

    def test_same_interval(self, coinciding_events):
        a, b, c = coinciding_events
        assert a.same_interval(b)
        assert not a.same_interval(c)

    def test_raw_timestamps_are_kept(self):
        event = InterviewEvent.from_dict(
            make_record(1, "2024-08-29T10:00:00Z", "2024-08-29T10:30:00Z")
        )
        assert event.start_raw == "2024-08-29T10:00:00Z"
        assert event.end_raw == "2024-08-29T10:30:00Z"

    def test_events_built_in_code_compare_datetimes(self):
        a = InterviewEvent("a", datetime(2024, 8, 29, 10), datetime(2024, 8, 29, 11))
        b = InterviewEvent("b", datetime(2024, 8, 29, 10), datetime(2024, 8, 29, 11))
        assert a.same_interval(b)


class TestParseEvents:
    def test_skips_malformed_records_and_keeps_order(self):
        records = [
            make_record(1, "2024-08-29T10:00:00", "2024-08-29T11:00:00"),
            {"id": 2, "start": "garbage", "end": "2024-08-29T11:00:00"},
            make_record(3, "2024-08-29T12:00:00", "2024-08-29T11:00:00"),
            "not a record",
            make_record(5, "2024-08-30T09:00:00", "2024-08-30T09:30:00"),
        ]
        skipped = []
        events = parse_events(records, on_skip=lambda record, error: skipped.append(error))
        assert [e.id for e in events] == ["1", "5"]
        assert len(skipped) == 3
        assert all(isinstance(err, EventFormatError) for err in skipped)

    def test_empty_list(self):
        assert parse_events([]) == []
