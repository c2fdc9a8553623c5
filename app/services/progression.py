"""Progression heuristics: anti-ego checks and muscle recovery.

Stateless folds over an already-loaded workout history. Nothing here raises,
validates or logs; callers show the results as advisory warnings and never
block a save on them.

Convention: a log's first set (sets[0]) is its top set, whatever the actual
heaviest set was.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime, timedelta

from app.core.constants import (
    EGO_MIN_SESSIONS,
    EGO_PROGRESS_THRESHOLD_PERCENT,
    NO_STIMULUS_DAYS,
    RECOVERY_GREEN_MAX_DAYS,
    RECOVERY_YELLOW_MAX_DAYS,
    STAGNATION_MIN_SESSIONS,
    STAGNATION_WINDOW_SESSIONS,
)
from app.core.enums import AlertSeverity, AlertType, Language, MuscleGroup, RecoveryStatus
from app.core.labels import muscle_group_label
from app.schemas.workout import (
    AntiEgoAlert,
    EgoCheckResult,
    MuscleRecoveryRead,
    StagnationResult,
    WorkoutLog,
)
from app.services.time_windows import as_utc, utcnow

# Dashboard default: the big four
DEFAULT_RECOVERY_GROUPS = (
    MuscleGroup.CHEST,
    MuscleGroup.BACK,
    MuscleGroup.LEGS,
    MuscleGroup.SHOULDERS,
)

_EGO_MESSAGES = {
    "es": "Aumento de {percent:.1f}% detectado. Riesgo de ego lifting.",
    "en": "{percent:.1f}% increase detected. Risk of ego lifting.",
}

_STAGNATION_MESSAGES = {
    "es": "{weeks} semanas con el mismo peso. Considera variar el estimulo.",
    "en": "{weeks} weeks with the same weight. Consider changing the stimulus.",
}


def _logs_for_exercise(exercise_id: str, history: Sequence[WorkoutLog]) -> list[WorkoutLog]:
    """Logs of one exercise, most recent first (stable for equal dates)."""
    matching = [log for log in history if log.exercise_id == exercise_id]
    return sorted(matching, key=lambda log: as_utc(log.date), reverse=True)


def _top_set_weight(log: WorkoutLog) -> float:
    """Weight of sets[0]; 0 when the log has no sets or no weight."""
    if not log.sets:
        return 0
    return log.sets[0].weight or 0


def _percent_change(current: float, previous: float) -> float:
    """(current - previous) / previous x 100, with float semantics on a zero base.

    A zero base gives +/-inf (or nan when current is also zero) instead of
    raising ZeroDivisionError.
    """
    delta = current - previous
    if previous == 0:
        if delta == 0:
            return math.nan
        return math.copysign(math.inf, delta)
    return delta / previous * 100


# ── Anti-ego checks ──────────────────────────────────────────────────────

def detect_ego_progression(
    exercise_id: str,
    current_weight: float,
    history: Sequence[WorkoutLog],
    language: Language | str = Language.ES,
) -> EgoCheckResult:
    """Flag a load jump of more than 10% over the most recent session's top set.

    Needs at least two logged sessions of the exercise; otherwise never ego.
    """
    logs = _logs_for_exercise(exercise_id, history)
    if len(logs) < EGO_MIN_SESSIONS:
        return EgoCheckResult(is_ego=False)

    last_weight = _top_set_weight(logs[0])
    progress_percent = _percent_change(current_weight, last_weight)

    # nan compares False, so 0 -> 0 is never ego
    if progress_percent > EGO_PROGRESS_THRESHOLD_PERCENT:
        template = _EGO_MESSAGES[Language(language).value]
        return EgoCheckResult(is_ego=True, message=template.format(percent=progress_percent))
    return EgoCheckResult(is_ego=False)


def detect_stagnation(exercise_id: str, history: Sequence[WorkoutLog]) -> StagnationResult:
    """Same top-set weight across the last 3-4 sessions of an exercise.

    `weeks` is the number of sessions considered, not a calendar span.
    """
    logs = _logs_for_exercise(exercise_id, history)[:STAGNATION_WINDOW_SESSIONS]
    if len(logs) < STAGNATION_MIN_SESSIONS:
        return StagnationResult(is_stagnant=False)

    weights = [_top_set_weight(log) for log in logs]
    if all(w == weights[0] for w in weights):
        return StagnationResult(is_stagnant=True, weeks=len(logs))
    return StagnationResult(is_stagnant=False)


def build_anti_ego_alerts(
    exercise_id: str,
    current_weight: float,
    history: Sequence[WorkoutLog],
    language: Language | str = Language.ES,
) -> list[AntiEgoAlert]:
    """Run both checks and turn positives into warning alerts (ego first)."""
    alerts: list[AntiEgoAlert] = []

    ego = detect_ego_progression(exercise_id, current_weight, history, language)
    if ego.is_ego:
        alerts.append(
            AntiEgoAlert(
                type=AlertType.EGO,
                message=ego.message,
                severity=AlertSeverity.WARNING,
                exercise_id=exercise_id,
            )
        )

    stagnation = detect_stagnation(exercise_id, history)
    if stagnation.is_stagnant:
        template = _STAGNATION_MESSAGES[Language(language).value]
        alerts.append(
            AntiEgoAlert(
                type=AlertType.STAGNATION,
                message=template.format(weeks=stagnation.weeks),
                severity=AlertSeverity.WARNING,
                exercise_id=exercise_id,
            )
        )
    return alerts


# ── Recovery ─────────────────────────────────────────────────────────────

def days_since_last_stimulus(
    muscle_group: MuscleGroup | str,
    history: Sequence[WorkoutLog],
    now: datetime | None = None,
) -> int:
    """Whole days since the muscle group was last trained; 999 if never."""
    relevant = [log for log in history if log.muscle_groups and muscle_group in log.muscle_groups]
    if not relevant:
        return NO_STIMULUS_DAYS

    last = max(as_utc(log.date) for log in relevant)
    now = as_utc(now) if now else utcnow()
    return math.floor((now - last) / timedelta(days=1))


def recovery_status(days: int) -> RecoveryStatus:
    """Green up to 3 days, yellow up to 6, red beyond (and for never trained)."""
    if days <= RECOVERY_GREEN_MAX_DAYS:
        return RecoveryStatus.GREEN
    if days <= RECOVERY_YELLOW_MAX_DAYS:
        return RecoveryStatus.YELLOW
    return RecoveryStatus.RED


def muscle_recovery_overview(
    history: Sequence[WorkoutLog],
    muscle_groups: Sequence[MuscleGroup] | None = None,
    now: datetime | None = None,
    language: Language | str = Language.ES,
) -> list[MuscleRecoveryRead]:
    groups = DEFAULT_RECOVERY_GROUPS if muscle_groups is None else muscle_groups
    now = now or utcnow()
    overview = []
    for group in groups:
        days = days_since_last_stimulus(group, history, now)
        overview.append(
            MuscleRecoveryRead(
                muscle_group=group,
                label=muscle_group_label(group, language),
                days=days,
                status=recovery_status(days),
            )
        )
    return overview
