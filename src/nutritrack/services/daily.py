"""Daily aggregation, date navigation and progress figures."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

from nutritrack.domain.food_log import FoodEntry
from nutritrack.domain.nutrition import (
    DailyProgress,
    DailySummary,
    MacroShares,
    NutritionGoals,
)
from nutritrack.services.energy import (
    CALORIES_PER_GRAM_CARBS,
    CALORIES_PER_GRAM_FAT,
    CALORIES_PER_GRAM_PROTEIN,
    round_half_up,
)

MAX_PERCENT = 100

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def entries_for_day(entries: Iterable[FoodEntry], day: date) -> list[FoodEntry]:
    """Return entries logged on the given day, in their original order."""
    return [entry for entry in entries if entry.day == day]


def summarize(entries: Iterable[FoodEntry], day: date) -> DailySummary:
    """Sum calories and macros of the entries logged on the given day."""
    calories = 0.0
    protein = 0.0
    carbs = 0.0
    fat = 0.0
    for entry in entries_for_day(entries, day):
        calories += entry.calories
        protein += entry.protein
        carbs += entry.carbs
        fat += entry.fat
    return DailySummary(calories=calories, protein=protein, carbs=carbs, fat=fat)


def shift_date(day: date, offset_days: int) -> date:
    """Move a calendar day forwards or backwards."""
    return day + timedelta(days=offset_days)


def local_today(timezone_name: str | None = None) -> date:
    """Return the current calendar day, optionally in an IANA timezone."""
    if timezone_name is None:
        return date.today()
    return datetime.now(tz=ZoneInfo(timezone_name)).date()


def format_date_label(day: date, today: date) -> str:
    """Return "Today", "Yesterday" or a short label like "Mon, Oct 19"."""
    if day == today:
        return "Today"
    if day == shift_date(today, -1):
        return "Yesterday"
    weekday = WEEKDAY_NAMES[day.weekday()]
    month = MONTH_NAMES[day.month - 1]
    return f"{weekday}, {month} {day.day}"


def _percent(amount: float, goal: float) -> float:
    if goal <= 0:
        return 0.0
    return amount / goal * 100


def calculate_progress(summary: DailySummary, goals: NutritionGoals) -> DailyProgress:
    """Return remaining calories and percentage of each goal reached."""
    return DailyProgress(
        remaining_calories=goals.calories - summary.calories,
        calorie_percent=min(MAX_PERCENT, _percent(summary.calories, goals.calories)),
        protein_percent=min(MAX_PERCENT, _percent(summary.protein, goals.protein)),
        carbs_percent=min(MAX_PERCENT, _percent(summary.carbs, goals.carbs)),
        fat_percent=min(MAX_PERCENT, _percent(summary.fat, goals.fat)),
    )


def calculate_macro_shares(
    summary: DailySummary, goals: NutritionGoals
) -> MacroShares:
    """Return each macro's calories as a percentage of the calorie goal."""
    return MacroShares(
        protein=round_half_up(
            _percent(summary.protein * CALORIES_PER_GRAM_PROTEIN, goals.calories)
        ),
        carbs=round_half_up(
            _percent(summary.carbs * CALORIES_PER_GRAM_CARBS, goals.calories)
        ),
        fat=round_half_up(
            _percent(summary.fat * CALORIES_PER_GRAM_FAT, goals.calories)
        ),
    )
