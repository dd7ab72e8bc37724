# app/utils/datetime_utils.py
from datetime import datetime, timezone
from typing import Optional


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def utcnow() -> datetime:
    """Naive UTC now; every stored and compared instant is naive UTC."""
    return now_utc().replace(tzinfo=None)


def to_naive_utc(dt: Optional[datetime]) -> Optional[datetime]:
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def logical_date(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%d")


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, sub-minute remainder dropped (floor)."""
    return int((end - start).total_seconds() // 60)
