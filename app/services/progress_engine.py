# app/services/progress_engine.py
"""
Milestone progress: which recovery milestone has been reached, which one is
next, and how far along the way between them the user is.

Pure over its inputs; the caller supplies elapsed minutes (or None when no
quit time has been recorded).
"""
from typing import Optional, Sequence

from ..models.milestone_model import MilestoneEntry
from ..schemas.progress_schema import ProgressResult

BASELINE = MilestoneEntry(
    time_in_minutes=0,
    label="Just Quit",
    description="Congratulations on taking this step!",
)


def compute_progress(
    minutes_elapsed: Optional[int],
    milestones: Sequence[MilestoneEntry],
) -> ProgressResult:
    if minutes_elapsed is None:
        # Tracking not started yet
        return ProgressResult(
            current_label=None,
            current_desc=None,
            next_label=None,
            next_desc=None,
            progress_ratio=0,
            minutes_elapsed=0,
            next_minutes=0,
        )

    previous_threshold = 0
    previous = BASELINE
    next_milestone: Optional[MilestoneEntry] = None

    for m in sorted(milestones, key=lambda e: e.time_in_minutes):
        # Reaching a threshold exactly counts as reached
        if minutes_elapsed < m.time_in_minutes:
            next_milestone = m
            break
        previous_threshold = m.time_in_minutes
        previous = m

    ratio = 1.0
    next_minutes = 0
    if next_milestone is not None:
        next_minutes = next_milestone.time_in_minutes
        delta = next_minutes - previous_threshold
        if delta > 0:
            ratio = (minutes_elapsed - previous_threshold) / delta
            ratio = min(max(ratio, 0.0), 1.0)

    return ProgressResult(
        current_label=previous.label,
        current_desc=previous.description,
        next_label=next_milestone.label if next_milestone else None,
        next_desc=next_milestone.description if next_milestone else None,
        progress_ratio=round(ratio, 3),
        minutes_elapsed=minutes_elapsed,
        next_minutes=next_minutes,
    )
