"""Anti-ego checks and muscle recovery over a caller-supplied workout history."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_language
from app.core.enums import Language
from app.core.labels import muscle_group_label
from app.schemas.workout import (
    AntiEgoAlert,
    EgoCheckRequest,
    EgoCheckResult,
    LastStimulusRequest,
    MuscleRecoveryRead,
    RecoveryRequest,
    StagnationRequest,
    StagnationResult,
)
from app.services.progression import (
    build_anti_ego_alerts,
    days_since_last_stimulus,
    detect_ego_progression,
    detect_stagnation,
    muscle_recovery_overview,
    recovery_status,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/ego-check", response_model=EgoCheckResult, response_model_exclude_none=True)
async def ego_check(
    payload: EgoCheckRequest,
    language: Language = Depends(get_language),
):
    """
    Is `currentWeight` more than 10% above the last session's top set?
    Advisory only: the client warns but still saves.
    """
    result = detect_ego_progression(
        payload.exercise_id, payload.current_weight, payload.history, language
    )
    if result.is_ego:
        logger.info("Ego progression flagged for exercise %s: %s", payload.exercise_id, result.message)
    return result


@router.post("/stagnation", response_model=StagnationResult, response_model_exclude_none=True)
async def stagnation_check(payload: StagnationRequest):
    """Same top-set weight over the last 3-4 sessions of the exercise."""
    result = detect_stagnation(payload.exercise_id, payload.history)
    if result.is_stagnant:
        logger.info("Stagnation flagged for exercise %s over %s sessions", payload.exercise_id, result.weeks)
    return result


@router.post("/alerts", response_model=list[AntiEgoAlert])
async def anti_ego_alerts(
    payload: EgoCheckRequest,
    language: Language = Depends(get_language),
):
    """Both checks as a list of warning alerts (empty when all is fine)."""
    alerts = build_anti_ego_alerts(
        payload.exercise_id, payload.current_weight, payload.history, language
    )
    for alert in alerts:
        logger.info("Anti-ego alert (%s) for exercise %s: %s", alert.type.value, payload.exercise_id, alert.message)
    return alerts


@router.post("/last-stimulus", response_model=MuscleRecoveryRead)
async def last_stimulus(
    payload: LastStimulusRequest,
    language: Language = Depends(get_language),
):
    """Days since the muscle group was last trained (999 = never) and its recovery status."""
    days = days_since_last_stimulus(payload.muscle_group, payload.history)
    return MuscleRecoveryRead(
        muscle_group=payload.muscle_group,
        label=muscle_group_label(payload.muscle_group, language),
        days=days,
        status=recovery_status(days),
    )


@router.post("/recovery", response_model=list[MuscleRecoveryRead])
async def recovery_overview(
    payload: RecoveryRequest,
    language: Language = Depends(get_language),
):
    """Recovery status per muscle group. Defaults to chest, back, legs and shoulders."""
    return muscle_recovery_overview(payload.history, payload.muscle_groups, language=language)
