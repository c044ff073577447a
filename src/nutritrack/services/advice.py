"""Rule-based advice for the day's intake."""

from enum import Enum

from nutritrack.domain.nutrition import DailySummary, NutritionGoals

OVER_CALORIES_MARGIN = 200
UNDER_CALORIES_RATIO = 0.5
LOW_PROTEIN_RATIO = 0.6


class Advice(Enum):
    """Canned advice messages."""

    OVER_CALORIES = (
        "You're over your calorie goal. "
        "Consider lighter meals for the rest of the day."
    )
    UNDER_CALORIES = (
        "You're significantly under your calorie goal. "
        "Make sure you're eating enough."
    )
    MORE_PROTEIN = "Try to include more protein-rich foods in your next meals."
    FAT_REACHED = (
        "You've reached your fat intake for today. "
        "Focus on lean proteins and complex carbs."
    )
    ON_TRACK = "You're on track with your nutrition goals today!"


def advise(summary: DailySummary, goals: NutritionGoals) -> list[str]:
    """Return advice messages in a fixed order."""
    advice: list[Advice] = []
    remaining = goals.calories - summary.calories

    if remaining < -OVER_CALORIES_MARGIN:
        advice.append(Advice.OVER_CALORIES)
    elif remaining > goals.calories * UNDER_CALORIES_RATIO:
        advice.append(Advice.UNDER_CALORIES)

    if (
        summary.protein < goals.protein * LOW_PROTEIN_RATIO
        and summary.calories > goals.calories * UNDER_CALORIES_RATIO
    ):
        advice.append(Advice.MORE_PROTEIN)

    if summary.fat > goals.fat:
        advice.append(Advice.FAT_REACHED)

    if not advice:
        advice.append(Advice.ON_TRACK)
    return [item.value for item in advice]
