"""Weekly meal plan totals and progress against the macro target."""

from __future__ import annotations

from collections.abc import Sequence

from app.core.constants import KCAL_PER_G_CARBS, KCAL_PER_G_FAT, KCAL_PER_G_PROTEIN
from app.core.enums import DayOfWeek, Language
from app.core.labels import day_label
from app.schemas.nutrition import (
    DayMealPlan,
    DayMealSummary,
    DayTotals,
    MacroTarget,
    Meal,
)


def meal_calories_from_macros(protein: float, carbs: float, fat: float) -> float:
    """Atwater factors: 4 kcal/g protein and carbs, 9 kcal/g fat."""
    return protein * KCAL_PER_G_PROTEIN + carbs * KCAL_PER_G_CARBS + fat * KCAL_PER_G_FAT


def resolve_meal_calories(meal: Meal) -> float:
    if meal.calories is not None:
        return meal.calories
    return meal_calories_from_macros(meal.protein, meal.carbs, meal.fat)


def day_totals(meals: Sequence[Meal]) -> DayTotals:
    totals = DayTotals()
    for meal in meals:
        totals.calories += resolve_meal_calories(meal)
        totals.protein += meal.protein
        totals.carbs += meal.carbs
        totals.fat += meal.fat
    return totals


def _progress(total: float, target: float | None) -> float:
    """Percent of target reached, capped at 100; 0 without a target.

    A zero target is met by any intake (100), and by none (0).
    """
    if target is None:
        return 0.0
    if target == 0:
        return 100.0 if total > 0 else 0.0
    return min(100.0, total / target * 100)


def day_progress(
    day: DayOfWeek,
    meals: Sequence[Meal],
    target: MacroTarget | None,
    language: Language | str = Language.ES,
) -> DayMealSummary:
    ordered = sorted(meals, key=lambda m: m.order)
    totals = day_totals(ordered)
    return DayMealSummary(
        day=day,
        day_label=day_label(day, language),
        meals=ordered,
        totals=totals,
        protein_progress=_progress(totals.protein, target.protein if target else None),
        calorie_progress=_progress(totals.calories, target.calories if target else None),
    )


def week_summary(
    days: Sequence[DayMealPlan],
    target: MacroTarget | None,
    language: Language | str = Language.ES,
) -> list[DayMealSummary]:
    """One summary per weekday, Monday first. Missing days have no meals.

    If a day appears more than once, the last entry wins.
    """
    meals_by_day: dict[DayOfWeek, list[Meal]] = {d: [] for d in DayOfWeek}
    for plan in days:
        meals_by_day[DayOfWeek(plan.day)] = list(plan.meals)
    return [day_progress(d, meals, target, language) for d, meals in meals_by_day.items()]
