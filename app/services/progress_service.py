# app/services/progress_service.py
import logging
from datetime import datetime
from typing import Optional

from ..controllers.milestone_controller import get_milestones
from ..schemas.progress_schema import ProgressResult
from ..utils.datetime_utils import to_naive_utc, minutes_between
from .progress_engine import compute_progress


def _elapsed_minutes(now: datetime, quit_instant: Optional[datetime]) -> Optional[int]:
    if quit_instant is None:
        return None
    minutes = minutes_between(to_naive_utc(quit_instant), to_naive_utc(now))
    if minutes < 0:
        logging.warning("Quit time %s is after now (%s); treating as just quit.", quit_instant, now)
        return 0
    return minutes


def get_progress(now: datetime, quit_instant: Optional[datetime]) -> ProgressResult:
    """Milestone progress for a stored quit instant (None if never set)."""
    return compute_progress(_elapsed_minutes(now, quit_instant), get_milestones())
