"""Macro profile, macro target and meal plan schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from app.core.enums import ActivityLevel, DayOfWeek, Goal, MealType, Sex
from app.schemas.base import CamelModel


# ── Macro engine ─────────────────────────────────────────────────────────

class UserMacroProfile(CamelModel):
    """Body profile fed to the macro engine. Validated here, never inside the engine."""

    weight: float = Field(..., gt=20, lt=400, description="Body weight in kg")
    height: float = Field(..., gt=50, lt=300, description="Height in cm")
    age: int = Field(..., gt=0, le=120, description="Age in years")
    sex: Sex
    activity_level: ActivityLevel
    goal: Goal


class MacroTarget(CamelModel):
    calories: int
    protein: int  # grams
    carbs: int  # grams
    fat: int  # grams


class MacroBreakdown(CamelModel):
    """Full macro calculator output: intermediate energy values, split and kcal per macro."""

    bmr: float
    tdee: int
    target_calories: int
    macros: MacroTarget
    protein_kcal: int
    carbs_kcal: int
    fat_kcal: int
    activity_label: str
    goal_label: str


# ── Meal planning ────────────────────────────────────────────────────────

class Meal(CamelModel):
    id: str
    name: str
    type: MealType
    calories: Optional[int] = Field(None, ge=0, description="If omitted, derived from macros (4/4/9)")
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)
    order: int = 0


class DayMealPlan(CamelModel):
    day: DayOfWeek
    meals: list[Meal] = []


class MealMacros(CamelModel):
    protein: float = Field(0, ge=0)
    carbs: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)


class MealCaloriesRead(CamelModel):
    calories: float


class DayTotals(CamelModel):
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0


class DayMealSummary(CamelModel):
    day: DayOfWeek
    day_label: str
    meals: list[Meal]
    totals: DayTotals
    protein_progress: float  # percent of target, capped at 100
    calorie_progress: float


class MealPlanSummaryRequest(CamelModel):
    """Either an explicit target or a profile to derive it from (target wins)."""

    target: Optional[MacroTarget] = None
    profile: Optional[UserMacroProfile] = None
    days: list[DayMealPlan] = []


class MealPlanSummaryRead(CamelModel):
    target: Optional[MacroTarget] = None
    days: list[DayMealSummary]
