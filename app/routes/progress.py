from fastapi import APIRouter, Depends
from datetime import datetime

from ..schemas.progress_schema import (
    QuitTimeRequest,
    DailyCountRequest,
    DailyIncrementRequest,
)
from ..controllers import progress_controller
from ..db.tracker_store import TrackerStore, get_store
from ..utils.datetime_utils import utcnow

router = APIRouter(tags=["Progress"])


# ✅ Save or replace the quit date/time
@router.post("/quit-time", summary="Save quit date/time")
async def save_quit_time(
    data: QuitTimeRequest,
    store: TrackerStore = Depends(get_store),
    now: datetime = Depends(utcnow),
):
    return await progress_controller.save_quit_time(store, data.quit_date_time, now)


@router.get("/quit-time", summary="Get stored quit date/time")
async def get_quit_time(store: TrackerStore = Depends(get_store)):
    return await progress_controller.get_quit_time(store)


# ✅ Today's smoking count (absolute)
@router.post("/daily-smoking", summary="Set today's smoking count")
async def save_daily_smoking(
    data: DailyCountRequest,
    store: TrackerStore = Depends(get_store),
    now: datetime = Depends(utcnow),
):
    return await progress_controller.save_daily_count(store, data.count, now)


# ✅ Plus/minus buttons
@router.post("/daily-smoking/increment", summary="Add to or subtract from today's count")
async def increment_daily_smoking(
    data: DailyIncrementRequest,
    store: TrackerStore = Depends(get_store),
    now: datetime = Depends(utcnow),
):
    return await progress_controller.increment_daily_count(store, data.delta, now)


@router.get("/daily-smoking", summary="Get today's smoking count")
async def get_daily_smoking(
    store: TrackerStore = Depends(get_store),
    now: datetime = Depends(utcnow),
):
    return await progress_controller.get_daily_count(store, now)


@router.get("/stats", summary="Hours since quit, milestone progress and today's count")
async def get_stats(
    store: TrackerStore = Depends(get_store),
    now: datetime = Depends(utcnow),
):
    return await progress_controller.get_stats(store, now)


@router.get("/progress", summary="Milestone progress only")
async def get_progress(
    store: TrackerStore = Depends(get_store),
    now: datetime = Depends(utcnow),
):
    return await progress_controller.get_user_progress(store, now)
