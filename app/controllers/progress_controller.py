# app/controllers/progress_controller.py
import logging
from datetime import datetime

from fastapi import HTTPException
from pymongo.errors import PyMongoError

from ..db.tracker_store import TrackerStore
from ..schemas.progress_schema import (
    ProgressResult,
    StatsResponse,
    QuitTimeResponse,
    DailyCountResponse,
)
from ..services.progress_service import get_progress
from ..utils.datetime_utils import to_naive_utc, logical_date


# ✅ Save quit date/time (replaces any earlier one)
async def save_quit_time(store: TrackerStore, quit_date_time: datetime, now: datetime):
    try:
        await store.set_quit_time(to_naive_utc(quit_date_time), now)
    except PyMongoError:
        logging.exception("Failed to save quit time")
        raise HTTPException(status_code=500, detail="Failed to save quit time.")
    return {"status": "ok"}


async def get_quit_time(store: TrackerStore) -> QuitTimeResponse:
    try:
        quit_instant = await store.get_quit_time()
    except PyMongoError:
        logging.exception("Failed to read quit time")
        raise HTTPException(status_code=500, detail="Failed to fetch quit time.")
    return QuitTimeResponse(quit_date_time=quit_instant)


# ✅ Save today's smoking count (absolute value)
async def save_daily_count(store: TrackerStore, count: int, now: datetime):
    today = logical_date(now)
    try:
        saved = await store.set_daily_count(today, count, now)
    except PyMongoError:
        logging.exception("Failed to save daily count for %s", today)
        raise HTTPException(status_code=500, detail="Failed to save daily count.")
    return {"status": "ok", "date": today, "count": saved}


# ✅ Plus/minus today's smoking count
async def increment_daily_count(store: TrackerStore, delta: int, now: datetime):
    today = logical_date(now)
    try:
        count = await store.increment_daily_count(today, delta, now)
    except PyMongoError:
        logging.exception("Failed to update daily count for %s", today)
        raise HTTPException(status_code=500, detail="Failed to update daily count.")
    return {"status": "ok", "date": today, "count": count}


async def get_daily_count(store: TrackerStore, now: datetime) -> DailyCountResponse:
    today = logical_date(now)
    try:
        count = await store.get_daily_count(today)
    except PyMongoError:
        logging.exception("Failed to read daily count for %s", today)
        raise HTTPException(status_code=500, detail="Failed to fetch daily count.")
    return DailyCountResponse(date=today, count=count)


# ✅ Stats: hours since quit, milestone progress, today's count
async def get_stats(store: TrackerStore, now: datetime) -> StatsResponse:
    try:
        quit_instant = await store.get_quit_time()
        daily_count = await store.get_daily_count(logical_date(now))
    except PyMongoError:
        logging.exception("Failed to read tracker stats")
        raise HTTPException(status_code=500, detail="Failed to fetch stats.")

    progress = get_progress(now, quit_instant)
    hours_since_quit = None
    if quit_instant is not None:
        hours_since_quit = round(progress.minutes_elapsed / 60.0, 2)

    return StatsResponse(
        hours_since_quit=hours_since_quit,
        quit_date_time=quit_instant,
        daily_count=daily_count,
        progress=progress,
    )


async def get_user_progress(store: TrackerStore, now: datetime) -> ProgressResult:
    try:
        quit_instant = await store.get_quit_time()
    except PyMongoError:
        logging.exception("Failed to read quit time")
        raise HTTPException(status_code=500, detail="Failed to fetch progress.")
    return get_progress(now, quit_instant)
