"""Localized display labels (es/en), hardcoded lookup tables.

Keyed by enum value so schemas, services and endpoints share one source.
"""

from app.core.enums import ActivityLevel, DayOfWeek, Goal, Language, MealType, MuscleGroup

# ── { language: { value: label } } ──
ACTIVITY_LABELS: dict[str, dict[str, str]] = {
    "es": {
        "sedentary": "Sedentario (sin ejercicio)",
        "light": "Ligero (1-3 días/semana)",
        "moderate": "Moderado (3-5 días/semana)",
        "active": "Activo (6-7 días/semana)",
        "very_active": "Muy activo (2x al día)",
    },
    "en": {
        "sedentary": "Sedentary (no exercise)",
        "light": "Light (1-3 days/week)",
        "moderate": "Moderate (3-5 days/week)",
        "active": "Active (6-7 days/week)",
        "very_active": "Very active (2x per day)",
    },
}

GOAL_LABELS: dict[str, dict[str, str]] = {
    "es": {"lose": "Perder grasa", "maintain": "Mantener", "gain": "Ganar músculo"},
    "en": {"lose": "Lose fat", "maintain": "Maintain", "gain": "Gain muscle"},
}

MEAL_TYPE_LABELS: dict[str, dict[str, str]] = {
    "es": {"breakfast": "Desayuno", "lunch": "Almuerzo", "snack": "Merienda", "dinner": "Cena"},
    "en": {"breakfast": "Breakfast", "lunch": "Lunch", "snack": "Snack", "dinner": "Dinner"},
}

# Short day labels (calendar headers)
DAY_LABELS: dict[str, dict[str, str]] = {
    "es": {
        "lunes": "LUN",
        "martes": "MAR",
        "miercoles": "MIE",
        "jueves": "JUE",
        "viernes": "VIE",
        "sabado": "SAB",
        "domingo": "DOM",
    },
    "en": {
        "lunes": "MON",
        "martes": "TUE",
        "miercoles": "WED",
        "jueves": "THU",
        "viernes": "FRI",
        "sabado": "SAT",
        "domingo": "SUN",
    },
}

MUSCLE_GROUP_LABELS: dict[str, dict[str, str]] = {
    "es": {
        "pecho": "Pecho",
        "espalda": "Espalda",
        "hombros": "Hombros",
        "biceps": "Bíceps",
        "triceps": "Tríceps",
        "piernas": "Piernas",
        "gluteos": "Glúteos",
        "core": "Core",
        "cardio": "Cardio",
        "descanso": "Descanso",
    },
    "en": {
        "pecho": "Chest",
        "espalda": "Back",
        "hombros": "Shoulders",
        "biceps": "Biceps",
        "triceps": "Triceps",
        "piernas": "Legs",
        "gluteos": "Glutes",
        "core": "Core",
        "cardio": "Cardio",
        "descanso": "Rest",
    },
}

_TABLES: dict[str, dict[str, dict[str, str]]] = {
    "activityLevels": ACTIVITY_LABELS,
    "goals": GOAL_LABELS,
    "mealTypes": MEAL_TYPE_LABELS,
    "days": DAY_LABELS,
    "muscleGroups": MUSCLE_GROUP_LABELS,
}


def _lang(language: Language | str) -> str:
    return Language(language).value


def activity_label(level: ActivityLevel | str, language: Language | str = Language.ES) -> str:
    return ACTIVITY_LABELS[_lang(language)][ActivityLevel(level).value]


def goal_label(goal: Goal | str, language: Language | str = Language.ES) -> str:
    return GOAL_LABELS[_lang(language)][Goal(goal).value]


def meal_type_label(meal_type: MealType | str, language: Language | str = Language.ES) -> str:
    return MEAL_TYPE_LABELS[_lang(language)][MealType(meal_type).value]


def day_label(day: DayOfWeek | str, language: Language | str = Language.ES) -> str:
    return DAY_LABELS[_lang(language)][DayOfWeek(day).value]


def muscle_group_label(group: MuscleGroup | str, language: Language | str = Language.ES) -> str:
    return MUSCLE_GROUP_LABELS[_lang(language)][MuscleGroup(group).value]


def all_labels(language: Language | str = Language.ES) -> dict[str, dict[str, str]]:
    """Every label table for one language (copied, safe to mutate)."""
    lang = _lang(language)
    return {name: dict(table[lang]) for name, table in _TABLES.items()}


def format_time(seconds: int) -> str:
    """Rest timer display: 90 -> '1:30'."""
    mins, secs = divmod(int(seconds), 60)
    return f"{mins}:{secs:02d}"
