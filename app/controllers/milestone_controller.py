# app/controllers/milestone_controller.py
from typing import List, Tuple

from ..models.milestone_model import MilestoneEntry


def _to_minutes(*, minutes=0, hours=0, days=0, weeks=0, months=0, years=0) -> int:
    """Convert mixed units to minutes. months=30 days, year=365 days."""
    MIN_PER_HOUR = 60
    MIN_PER_DAY = 24 * 60                     # 1440
    MIN_PER_WEEK = 7 * MIN_PER_DAY           # 10080
    MIN_PER_MONTH = 30 * MIN_PER_DAY         # 43200
    MIN_PER_YEAR = 365 * MIN_PER_DAY         # 525600
    total = 0
    total += minutes
    total += hours * MIN_PER_HOUR
    total += days * MIN_PER_DAY
    total += weeks * MIN_PER_WEEK
    total += months * MIN_PER_MONTH
    total += years * MIN_PER_YEAR
    return int(total)


# Canonical recovery milestones, ascending by time_in_minutes
MILESTONES: Tuple[MilestoneEntry, ...] = (
    MilestoneEntry(
        time_in_minutes=_to_minutes(minutes=20),
        label="20 Minutes",
        description="Your heart rate and blood pressure are dropping back to normal levels.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(hours=8),
        label="8 Hours",
        description="Carbon monoxide levels in the blood decrease, improving oxygen delivery.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(hours=12),
        label="12 Hours",
        description="Carbon monoxide levels return to normal, more oxygen in your blood!",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(hours=24),
        label="24 Hours",
        description="Your risk of heart attack begins to decrease as your body cleanses itself of nicotine.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(hours=48),
        label="48 Hours",
        description="Taste and smell start to improve as nerve endings recover.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(hours=72),
        label="72 Hours",
        description="Bronchial tubes relax, making breathing easier. Energy levels improve.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(weeks=1),
        label="1 Week",
        description="Withdrawal symptoms begin to subside, mental clarity increases!",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(weeks=2),
        label="2 Weeks",
        description="Circulation improves, and your lung function continues to recover.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(months=1),
        label="1 Month",
        description="Coughing and shortness of breath decrease significantly.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(months=3),
        label="3 Months",
        description="Your circulation and lung function have made remarkable progress!",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(months=6),
        label="6 Months",
        description="You’re breathing easier and have fewer lung infections.",
    ),
    # 12 x 30 days, not 365
    MilestoneEntry(
        time_in_minutes=_to_minutes(months=12),
        label="1 Year",
        description="Your risk of heart disease is about half that of a smoker.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(years=5),
        label="5 Years",
        description="Stroke risk is now similar to that of a non-smoker.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(years=10),
        label="10 Years",
        description="Lung cancer risk is about half that of someone who still smokes.",
    ),
    MilestoneEntry(
        time_in_minutes=_to_minutes(years=15),
        label="15 Years",
        description="Your risk of heart disease is the same as someone who never smoked!",
    ),
)


def get_milestones() -> List[MilestoneEntry]:
    return sorted(MILESTONES, key=lambda m: m.time_in_minutes)


async def list_milestones() -> List[dict]:
    return [m.model_dump() for m in get_milestones()]
