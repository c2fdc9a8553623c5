"""WorkoutLog / WorkoutSet schemas and progression request/response records."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from app.core.enums import (
    AlertSeverity,
    AlertType,
    MuscleGroup,
    RecoveryStatus,
    TimeRange,
    Trend,
)
from app.schemas.base import CamelModel


class WorkoutSet(CamelModel):
    weight: float = Field(0, ge=0, description="Load in kg")
    reps: int = Field(0, ge=0)
    tempo: str = ""  # e.g. "3-1-2" (eccentric-pause-concentric), not validated
    to_failure: bool = False


class WorkoutLog(CamelModel):
    """One exercise performed in one session. sets[0] is the top set."""

    id: str
    date: datetime
    exercise_id: str
    exercise_name: str = ""
    muscle_groups: list[MuscleGroup] = []
    sets: list[WorkoutSet] = []
    suggested_rest: int = Field(0, ge=0, description="Suggested rest in seconds")
    notes: Optional[str] = None


class RangeFilter(CamelModel):
    """Analytics window. `end` is inclusive (the whole day)."""

    type: TimeRange = TimeRange.ALL
    start: Optional[date] = None
    end: Optional[date] = None


# ── Progression heuristics ───────────────────────────────────────────────

class EgoCheckRequest(CamelModel):
    exercise_id: str
    current_weight: float = Field(..., ge=0)
    history: list[WorkoutLog] = []


class EgoCheckResult(CamelModel):
    is_ego: bool
    message: Optional[str] = None


class StagnationRequest(CamelModel):
    exercise_id: str
    history: list[WorkoutLog] = []


class StagnationResult(CamelModel):
    is_stagnant: bool
    weeks: Optional[int] = None  # sessions considered, not calendar weeks


class AntiEgoAlert(CamelModel):
    type: AlertType
    message: str
    severity: AlertSeverity
    exercise_id: Optional[str] = None


class LastStimulusRequest(CamelModel):
    muscle_group: MuscleGroup
    history: list[WorkoutLog] = []


class MuscleRecoveryRead(CamelModel):
    muscle_group: MuscleGroup
    label: str
    days: int  # 999 = never trained
    status: RecoveryStatus


class RecoveryRequest(CamelModel):
    history: list[WorkoutLog] = []
    muscle_groups: Optional[list[MuscleGroup]] = None


# ── Progress analytics ───────────────────────────────────────────────────

class HistoryRequest(CamelModel):
    history: list[WorkoutLog] = []
    range: RangeFilter = Field(default_factory=RangeFilter)


class ProgressPoint(CamelModel):
    date: datetime
    weight: float  # heaviest set of the session
    volume: float  # sum of weight x reps


class ExerciseProgressRead(CamelModel):
    exercise_id: str
    name: str
    points: list[ProgressPoint]
    trend: Trend


class WeeklySummaryRead(CamelModel):
    weekly_workouts: int
    weekly_volume: float
    monthly_sessions: int


class VolumeTotalsRead(CamelModel):
    total_sets: int
    total_volume: float
