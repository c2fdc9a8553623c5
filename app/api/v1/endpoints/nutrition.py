"""Macro calculator and meal plan summary endpoints (pure logic, no storage)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_language
from app.core.enums import Language
from app.schemas.nutrition import (
    MacroBreakdown,
    MacroTarget,
    MealCaloriesRead,
    MealMacros,
    MealPlanSummaryRead,
    MealPlanSummaryRequest,
    UserMacroProfile,
)
from app.services.macro_engine import calculate_macros, macro_breakdown
from app.services.meal_planning import meal_calories_from_macros, week_summary

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/macros", response_model=MacroBreakdown)
async def compute_macros(
    profile: UserMacroProfile,
    language: Language = Depends(get_language),
):
    """BMR, TDEE, target calories and macro split for a body profile. Recomputed every call."""
    return macro_breakdown(profile, language)


@router.post("/macros/target", response_model=MacroTarget)
async def compute_macro_target(profile: UserMacroProfile):
    """Just the four-field macro target: calories, protein, carbs, fat."""
    return calculate_macros(profile)


@router.post("/meal-plan/summary", response_model=MealPlanSummaryRead)
async def meal_plan_summary(
    payload: MealPlanSummaryRequest,
    language: Language = Depends(get_language),
):
    """
    Per-day totals for a weekly meal plan (Monday to Sunday) and progress
    against the macro target. An explicit `target` wins over `profile`;
    with neither, progress is reported as 0.
    """
    target = payload.target
    if target is None and payload.profile is not None:
        target = calculate_macros(payload.profile)
    if target is None:
        logger.debug("Meal plan summary without target or profile; progress will be 0")
    return MealPlanSummaryRead(target=target, days=week_summary(payload.days, target, language))


@router.post("/meal-calories", response_model=MealCaloriesRead)
async def meal_calories(payload: MealMacros):
    """Calories implied by a meal's macros (4/4/9 kcal per gram)."""
    return MealCaloriesRead(
        calories=meal_calories_from_macros(payload.protein, payload.carbs, payload.fat)
    )
