# app/schemas/progress_schema.py

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from ._base_datetime import NaiveIsoDatetime


class ProgressResult(BaseModel):
    current_label: Optional[str] = Field(None, alias="currentLabel")
    current_desc: Optional[str] = Field(None, alias="currentDesc")
    next_label: Optional[str] = Field(None, alias="nextLabel")
    next_desc: Optional[str] = Field(None, alias="nextDesc")
    progress_ratio: float = Field(0, alias="progressRatio")  # 0.0 - 1.0, 3 decimals
    minutes_elapsed: int = Field(0, alias="minutesElapsed")
    next_minutes: int = Field(0, alias="nextMinutes")

    model_config = {
        "populate_by_name": True,
    }


class StatsResponse(BaseModel):
    hours_since_quit: Optional[float] = Field(None, alias="hoursSinceQuit")
    quit_date_time: Optional[NaiveIsoDatetime] = Field(None, alias="quitDateTime")
    daily_count: int = Field(0, alias="dailyCount")
    progress: ProgressResult

    model_config = {
        "populate_by_name": True,
    }


class QuitTimeRequest(BaseModel):
    quit_date_time: datetime = Field(..., alias="quitDateTime", description="e.g. 2025-01-04T10:30")

    model_config = {
        "populate_by_name": True,
    }


class QuitTimeResponse(BaseModel):
    quit_date_time: Optional[NaiveIsoDatetime] = Field(None, alias="quitDateTime")

    model_config = {
        "populate_by_name": True,
    }


class DailyCountRequest(BaseModel):
    count: int = Field(..., ge=0, description="Cigarettes smoked today")


class DailyIncrementRequest(BaseModel):
    delta: int = Field(1, description="Usually +1 or -1")


class DailyCountResponse(BaseModel):
    date: str  # YYYY-MM-DD (UTC)
    count: int
