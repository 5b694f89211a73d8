"""Tests for coincidence grouping."""

from backend.grouping import group_by_exact_interval

from conftest import make_event


def test_groups_exact_matches_in_list_order(coinciding_events):
    a, b, c = coinciding_events
    assert group_by_exact_interval(a, coinciding_events) == [a, b]
    assert group_by_exact_interval(b, coinciding_events) == [a, b]


def test_partial_overlap_does_not_group(coinciding_events):
    c = coinciding_events[2]
    assert group_by_exact_interval(c, coinciding_events) == [c]


def test_same_start_different_end_does_not_group():
    first = make_event(1, "2024-08-29T10:00:00", "2024-08-29T10:30:00")
    longer = make_event(2, "2024-08-29T10:00:00", "2024-08-29T11:00:00")
    assert group_by_exact_interval(first, [first, longer]) == [first]


def test_clicked_event_missing_from_list_is_still_returned(single_event):
    assert group_by_exact_interval(single_event, []) == [single_event]


def test_every_member_shares_the_interval(coinciding_events):
    for event in coinciding_events:
        group = group_by_exact_interval(event, coinciding_events)
        assert event in group
        assert all(e.same_interval(event) for e in group)


def test_equal_wall_clock_with_different_offsets_does_not_group():
    utc = make_event("a", "2024-08-29T10:00:00Z", "2024-08-29T10:30:00Z")
    ist = make_event("b", "2024-08-29T10:00:00+05:30", "2024-08-29T10:30:00+05:30")
    assert utc.start == ist.start
    assert group_by_exact_interval(utc, [utc, ist]) == [utc]
    assert group_by_exact_interval(ist, [utc, ist]) == [ist]


def test_same_offset_groups():
    first = make_event("a", "2024-08-29T10:00:00+05:30", "2024-08-29T10:30:00+05:30")
    second = make_event("b", "2024-08-29T10:00:00+05:30", "2024-08-29T10:30:00+05:30")
    assert group_by_exact_interval(first, [first, second]) == [first, second]
