"""Derived nutrition models."""

from dataclasses import dataclass
from datetime import date

from nutritrack.domain.food_log import FoodEntry


@dataclass(frozen=True)
class DailySummary:
    """Nutrient totals for one calendar day."""

    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class NutritionGoals:
    """Daily calorie and macro targets derived from the profile."""

    calories: int
    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class EnergyReport:
    """Energy expenditure figures for a profile."""

    bmr: int
    tdee: int
    calorie_goal: int


@dataclass(frozen=True)
class DailyProgress:
    """Intake against goals, percentages capped at 100."""

    remaining_calories: float
    calorie_percent: float
    protein_percent: float
    carbs_percent: float
    fat_percent: float


@dataclass(frozen=True)
class MacroShares:
    """Share of the calorie goal supplied by each macro, in percent."""

    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class DailyDashboard:
    """Everything shown for a selected day."""

    day: date
    label: str
    previous_day: date
    next_day: date
    entries: list[FoodEntry]
    summary: DailySummary
    goals: NutritionGoals
    energy: EnergyReport
    progress: DailyProgress
    shares: MacroShares
    advice: list[str]
