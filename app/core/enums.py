"""Shared enums for schemas and services."""

from enum import Enum


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Weekly activity, drives the TDEE multiplier."""

    SEDENTARY = "sedentary"  # No exercise
    LIGHT = "light"  # 1-3 days/week
    MODERATE = "moderate"  # 3-5 days/week
    ACTIVE = "active"  # 6-7 days/week
    VERY_ACTIVE = "very_active"  # Twice a day


class Goal(str, Enum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class MuscleGroup(str, Enum):
    """Muscle groups as stored by the client (Spanish identifiers)."""

    CHEST = "pecho"
    BACK = "espalda"
    SHOULDERS = "hombros"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    LEGS = "piernas"
    GLUTES = "gluteos"
    CORE = "core"
    CARDIO = "cardio"
    REST = "descanso"


class DayOfWeek(str, Enum):
    """Week starts on Monday."""

    MONDAY = "lunes"
    TUESDAY = "martes"
    WEDNESDAY = "miercoles"
    THURSDAY = "jueves"
    FRIDAY = "viernes"
    SATURDAY = "sabado"
    SUNDAY = "domingo"


class MealType(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    SNACK = "snack"
    DINNER = "dinner"


class Language(str, Enum):
    ES = "es"
    EN = "en"


class AlertType(str, Enum):
    """Anti-ego alert kinds."""

    STAGNATION = "stagnation"
    EGO = "ego"
    OVERTRAINING = "overtraining"
    BLOCKED = "blocked"


class AlertSeverity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


class RecoveryStatus(str, Enum):
    """Semaphore for days since a muscle group was last trained."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


class Trend(str, Enum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class TimeRange(str, Enum):
    """Analytics window."""

    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"
    MONTH = "month"  # Since the 1st of the current month
    YEAR = "year"  # Since Jan 1st
    CUSTOM = "custom"
    ALL = "all"
