"""Tests for milestone progress computation."""

import pytest

from app.controllers.milestone_controller import MILESTONES, get_milestones
from app.models.milestone_model import MilestoneEntry
from app.services.progress_engine import BASELINE, compute_progress


def _table() -> list:
    return [
        MilestoneEntry(time_in_minutes=20, label="M1", description="first"),
        MilestoneEntry(time_in_minutes=60, label="M2", description="second"),
    ]


def test_zero_minutes_starts_at_baseline():
    result = compute_progress(0, _table())
    assert result.current_label == "Just Quit"
    assert result.current_desc == "Congratulations on taking this step!"
    assert result.next_label == "M1"
    assert result.next_desc == "first"
    assert result.progress_ratio == 0.0
    assert result.next_minutes == 20


def test_halfway_to_first_milestone():
    result = compute_progress(10, _table())
    assert result.current_label == BASELINE.label
    assert result.next_label == "M1"
    assert result.progress_ratio == 0.5


def test_exact_threshold_counts_as_reached():
    result = compute_progress(20, _table())
    assert result.current_label == "M1"
    assert result.next_label == "M2"
    assert result.progress_ratio == 0.0
    assert result.next_minutes == 60


def test_past_last_milestone_is_complete():
    result = compute_progress(90, _table())
    assert result.current_label == "M2"
    assert result.current_desc == "second"
    assert result.next_label is None
    assert result.next_desc is None
    assert result.progress_ratio == 1.0
    assert result.minutes_elapsed == 90
    assert result.next_minutes == 0


def test_unset_elapsed_serializes_to_empty_progress():
    result = compute_progress(None, _table())
    assert result.model_dump(by_alias=True) == {
        "currentLabel": None,
        "currentDesc": None,
        "nextLabel": None,
        "nextDesc": None,
        "progressRatio": 0,
        "minutesElapsed": 0,
        "nextMinutes": 0,
    }


def test_ratio_is_rounded_to_three_decimals():
    # (30 - 20) / (60 - 20) = 0.25; (21 - 20) / 40 = 0.025; 1/3 of first interval
    assert compute_progress(30, _table()).progress_ratio == 0.25
    assert compute_progress(21, _table()).progress_ratio == 0.025
    table = [MilestoneEntry(time_in_minutes=3, label="A", description="a")]
    assert compute_progress(1, table).progress_ratio == 0.333


def test_unsorted_table_is_sorted_before_scan():
    table = list(reversed(_table()))
    result = compute_progress(30, table)
    assert result.current_label == "M1"
    assert result.next_label == "M2"


def test_duplicate_thresholds_do_not_divide_by_zero():
    table = [
        MilestoneEntry(time_in_minutes=20, label="A", description="a"),
        MilestoneEntry(time_in_minutes=20, label="B", description="b"),
        MilestoneEntry(time_in_minutes=60, label="C", description="c"),
    ]
    result = compute_progress(20, table)
    assert result.current_label == "B"
    assert result.next_label == "C"
    assert 0.0 <= result.progress_ratio <= 1.0


def test_zero_threshold_entry_is_reached_immediately():
    table = [
        MilestoneEntry(time_in_minutes=0, label="Start", description="s"),
        MilestoneEntry(time_in_minutes=10, label="Ten", description="t"),
    ]
    result = compute_progress(0, table)
    assert result.current_label == "Start"
    assert result.next_label == "Ten"
    assert result.progress_ratio == 0.0


def test_empty_table_is_fully_progressed():
    result = compute_progress(5, [])
    assert result.current_label == BASELINE.label
    assert result.next_label is None
    assert result.progress_ratio == 1.0


@pytest.mark.parametrize("minutes", [0, 1, 19])
def test_before_first_threshold_next_is_first_entry(minutes):
    table = get_milestones()
    result = compute_progress(minutes, table)
    assert result.current_label == "Just Quit"
    assert result.next_label == table[0].label


def test_every_threshold_is_reported_as_current():
    for m in get_milestones():
        assert compute_progress(m.time_in_minutes, MILESTONES).current_label == m.label


def test_ratio_bounded_and_non_decreasing_within_intervals():
    table = get_milestones()
    thresholds = [m.time_in_minutes for m in table]
    samples = list(range(0, 3000)) + list(range(3000, thresholds[-1] + 5000, 997))

    prev_minutes, prev_ratio = None, None
    for minutes in samples:
        ratio = compute_progress(minutes, table).progress_ratio
        assert 0.0 <= ratio <= 1.0
        if prev_minutes is not None:
            crossed = any(prev_minutes < t <= minutes for t in thresholds)
            if not crossed:
                assert ratio >= prev_ratio
        prev_minutes, prev_ratio = minutes, ratio


def test_reaching_last_threshold_completes_table():
    table = get_milestones()
    last = table[-1]
    result = compute_progress(last.time_in_minutes, table)
    assert result.current_label == last.label
    assert result.next_label is None
    assert result.progress_ratio == 1.0
