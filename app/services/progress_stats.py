"""Training and body weight progress analytics.

Per-exercise progress series (top weight + volume per session), trend,
weekly summary, volume totals and body weight change over a window.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timedelta

from app.core.constants import WEIGHT_TREND_THRESHOLD_KG
from app.core.enums import Trend
from app.schemas.body import BodyWeightLog, BodyWeightStats
from app.schemas.workout import (
    ExerciseProgressRead,
    ProgressPoint,
    VolumeTotalsRead,
    WeeklySummaryRead,
    WorkoutLog,
)
from app.services.time_windows import as_utc, utcnow


def log_volume(log: WorkoutLog) -> float:
    """Tonnage of one log: sum of weight x reps over its sets."""
    return sum(s.weight * s.reps for s in log.sets)


def log_max_weight(log: WorkoutLog) -> float:
    return max((s.weight for s in log.sets), default=0.0)


# ── Exercise progress ────────────────────────────────────────────────────

def progress_trend(points: Sequence[ProgressPoint]) -> Trend:
    """Compare the last two points' weight (points ordered oldest first)."""
    if len(points) < 2:
        return Trend.STABLE
    recent, previous = points[-1].weight, points[-2].weight
    if recent > previous:
        return Trend.UP
    if recent < previous:
        return Trend.DOWN
    return Trend.STABLE


def exercise_progress(history: Sequence[WorkoutLog]) -> list[ExerciseProgressRead]:
    """Group logs by exercise into date-ascending series.

    Exercises are listed in order of first appearance in `history`; the name
    is taken from the first log seen for each exercise.
    """
    names: dict[str, str] = {}
    points: dict[str, list[ProgressPoint]] = {}
    for log in history:
        if log.exercise_id not in points:
            names[log.exercise_id] = log.exercise_name
            points[log.exercise_id] = []
        points[log.exercise_id].append(
            ProgressPoint(date=log.date, weight=log_max_weight(log), volume=log_volume(log))
        )

    series = []
    for exercise_id, pts in points.items():
        ordered = sorted(pts, key=lambda p: as_utc(p.date))
        series.append(
            ExerciseProgressRead(
                exercise_id=exercise_id,
                name=names[exercise_id],
                points=ordered,
                trend=progress_trend(ordered),
            )
        )
    return series


def weekly_summary(history: Sequence[WorkoutLog], now: datetime | None = None) -> WeeklySummaryRead:
    """Logs and volume in the last 7 days, logs in the last 30 (strictly after the cutoff)."""
    now = as_utc(now) if now else utcnow()
    week_ago = now - timedelta(days=7)
    month_ago = now - timedelta(days=30)

    last_week = [log for log in history if as_utc(log.date) > week_ago]
    last_month = [log for log in history if as_utc(log.date) > month_ago]
    return WeeklySummaryRead(
        weekly_workouts=len(last_week),
        weekly_volume=sum(log_volume(log) for log in last_week),
        monthly_sessions=len(last_month),
    )


def volume_totals(history: Sequence[WorkoutLog]) -> VolumeTotalsRead:
    return VolumeTotalsRead(
        total_sets=sum(len(log.sets) for log in history),
        total_volume=sum(log_volume(log) for log in history),
    )


# ── Body weight ──────────────────────────────────────────────────────────

def body_weight_stats(logs: Sequence[BodyWeightLog]) -> BodyWeightStats:
    """Change between the oldest and newest entry. Dead band of 0.1 kg for the trend."""
    if not logs:
        return BodyWeightStats()
    ordered = sorted(logs, key=lambda log: as_utc(log.date))
    first, last = ordered[0].weight, ordered[-1].weight
    change = last - first
    percent_change = change / first * 100 if first else 0.0
    if change < -WEIGHT_TREND_THRESHOLD_KG:
        trend = Trend.DOWN
    elif change > WEIGHT_TREND_THRESHOLD_KG:
        trend = Trend.UP
    else:
        trend = Trend.STABLE
    return BodyWeightStats(
        first=first,
        last=last,
        change=round(change, 2),
        percent_change=round(percent_change, 2),
        trend=trend,
        entries=len(ordered),
    )
