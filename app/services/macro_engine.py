"""Macro engine: BMR, TDEE, target calories and macro split.

Pure functions over a UserMacroProfile. No validation happens here; the HTTP
layer rejects non-positive weight/height/age before calling in. Degenerate
input produces meaningless numbers, never an exception.
"""

from __future__ import annotations

import math

from app.core.constants import KCAL_PER_G_CARBS, KCAL_PER_G_FAT, KCAL_PER_G_PROTEIN
from app.core.enums import ActivityLevel, Goal, Language, Sex
from app.core.labels import activity_label, goal_label
from app.schemas.nutrition import MacroBreakdown, MacroTarget, UserMacroProfile

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

# Fraction of TDEE added (surplus) or removed (deficit)
GOAL_ADJUSTMENTS: dict[Goal, float] = {
    Goal.LOSE: -0.15,
    Goal.MAINTAIN: 0.0,
    Goal.GAIN: 0.10,
}

# Protein g/kg: higher when cutting or bulking
PROTEIN_PER_KG: dict[Goal, float] = {
    Goal.LOSE: 2.2,
    Goal.MAINTAIN: 2.0,
    Goal.GAIN: 2.2,
}

FAT_PERCENT_LOSE = 0.25
FAT_PERCENT_DEFAULT = 0.28


def round_half_up(value: float) -> int | float:
    """Round .5 toward +inf (not banker's rounding), so 2.5 -> 3 and -2.5 -> -2.

    Non-finite input (inf, nan) is passed through unchanged, so callers get
    a float back in that case.
    """
    if not math.isfinite(value):
        return value
    # floor(value + 0.5) would round 0.49999999999999994 up
    rounded = math.floor(value)
    return rounded + 1 if value - rounded >= 0.5 else rounded


# ── Energy ───────────────────────────────────────────────────────────────

def calculate_bmr(profile: UserMacroProfile) -> float:
    """Mifflin-St Jeor BMR equation (kcal/day), unrounded."""
    base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    return base + 5 if profile.sex == Sex.MALE else base - 161


def calculate_tdee(profile: UserMacroProfile) -> int:
    """BMR x activity multiplier, rounded to whole kcal."""
    multiplier = ACTIVITY_MULTIPLIERS[ActivityLevel(profile.activity_level)]
    return round_half_up(calculate_bmr(profile) * multiplier)


def calculate_target_calories(profile: UserMacroProfile) -> int:
    """TDEE adjusted for the goal (-15% lose, 0 maintain, +10% gain)."""
    adjustment = GOAL_ADJUSTMENTS[Goal(profile.goal)]
    return round_half_up(calculate_tdee(profile) * (1 + adjustment))


# ── Macro split ──────────────────────────────────────────────────────────

def calculate_macros(profile: UserMacroProfile) -> MacroTarget:
    """Target calories split into protein, fat and carbs (grams/day).

    Order matters: protein grams are rounded before carbs are derived, while
    carbs subtract the *unrounded* fat calories. Totals may drift a few kcal
    from `calories`; that drift is expected.
    """
    calories = calculate_target_calories(profile)

    protein = round_half_up(profile.weight * PROTEIN_PER_KG[Goal(profile.goal)])

    fat_percent = FAT_PERCENT_LOSE if profile.goal == Goal.LOSE else FAT_PERCENT_DEFAULT
    fat_calories = calories * fat_percent
    fat = round_half_up(fat_calories / KCAL_PER_G_FAT)

    carb_calories = calories - protein * KCAL_PER_G_PROTEIN - fat_calories
    carbs = round_half_up(carb_calories / KCAL_PER_G_CARBS)

    # Built unvalidated: overflowing input yields inf/nan fields instead of raising
    return MacroTarget.model_construct(calories=calories, protein=protein, carbs=carbs, fat=fat)


def macro_breakdown(profile: UserMacroProfile, language: Language | str = Language.ES) -> MacroBreakdown:
    """Everything the macro calculator view shows for a profile."""
    macros = calculate_macros(profile)
    return MacroBreakdown.model_construct(
        bmr=calculate_bmr(profile),
        tdee=calculate_tdee(profile),
        target_calories=macros.calories,
        macros=macros,
        protein_kcal=macros.protein * KCAL_PER_G_PROTEIN,
        carbs_kcal=macros.carbs * KCAL_PER_G_CARBS,
        fat_kcal=macros.fat * KCAL_PER_G_FAT,
        activity_label=activity_label(profile.activity_level, language),
        goal_label=goal_label(profile.goal, language),
    )
