"""Progress analytics: exercise series, weekly summary, volume and body weight."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TypeVar

from fastapi import APIRouter, HTTPException

from app.schemas.body import BodyWeightRequest, BodyWeightStats
from app.schemas.workout import (
    ExerciseProgressRead,
    HistoryRequest,
    RangeFilter,
    VolumeTotalsRead,
    WeeklySummaryRead,
)
from app.services.progress_stats import (
    body_weight_stats,
    exercise_progress,
    volume_totals,
    weekly_summary,
)
from app.services.time_windows import filter_by_range

router = APIRouter()

T = TypeVar("T")


def _in_range(items: Sequence[T], get_date: Callable[[T], datetime], range_: RangeFilter) -> list[T]:
    """Apply the request's window; 400 when a custom range is inverted."""
    if range_.start and range_.end and range_.start > range_.end:
        raise HTTPException(status_code=400, detail="Range start must not be after range end.")
    return filter_by_range(items, get_date, range_.type, range_.start, range_.end)


@router.post("/exercises", response_model=list[ExerciseProgressRead])
async def exercises_progress(payload: HistoryRequest):
    """Per-exercise series of top weight and volume per session, oldest first, with trend."""
    logs = _in_range(payload.history, lambda log: log.date, payload.range)
    return exercise_progress(logs)


@router.post("/summary", response_model=WeeklySummaryRead)
async def progress_summary(payload: HistoryRequest):
    """Workouts and volume over the last 7 days, sessions over the last 30 (range ignored)."""
    return weekly_summary(payload.history)


@router.post("/volume", response_model=VolumeTotalsRead)
async def volume(payload: HistoryRequest):
    """Total sets and kg moved (weight x reps) within the range."""
    logs = _in_range(payload.history, lambda log: log.date, payload.range)
    return volume_totals(logs)


@router.post("/body-weight", response_model=BodyWeightStats)
async def body_weight(payload: BodyWeightRequest):
    """Body weight change, percent change and trend within the range."""
    logs = _in_range(payload.logs, lambda log: log.date, payload.range)
    return body_weight_stats(logs)
