"""Energy expenditure and macro target formulas."""

import math

from nutritrack.domain.nutrition import EnergyReport, NutritionGoals
from nutritrack.domain.profile import ActivityLevel, Gender, Goal, Profile

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

GOAL_ADJUSTMENTS: dict[Goal, int] = {
    Goal.LOSE: -500,
    Goal.MAINTAIN: 0,
    Goal.GAIN: 500,
}

PROTEIN_PER_KG: dict[Goal, float] = {
    Goal.GAIN: 2.2,
    Goal.LOSE: 2.0,
    Goal.MAINTAIN: 1.6,
}

FAT_CALORIE_RATIO = 0.25
CALORIES_PER_GRAM_PROTEIN = 4
CALORIES_PER_GRAM_CARBS = 4
CALORIES_PER_GRAM_FAT = 9


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def calculate_bmr(profile: Profile) -> int:
    """Return basal metabolic rate (Mifflin-St Jeor) in kcal/day."""
    base = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
    if profile.gender == Gender.FEMALE:
        return round_half_up(base - 161)
    return round_half_up(base + 5)


def calculate_tdee(profile: Profile) -> int:
    """Return total daily energy expenditure in kcal/day."""
    bmr = calculate_bmr(profile)
    return round_half_up(bmr * ACTIVITY_MULTIPLIERS[profile.activity_level])


def calculate_calorie_goal(profile: Profile) -> int:
    """Return the daily calorie target for the profile's goal."""
    return calculate_tdee(profile) + GOAL_ADJUSTMENTS[profile.goal]


def calculate_nutrition_goals(profile: Profile) -> NutritionGoals:
    """Return calorie and macro targets for the profile.

    Carbs fill whatever the protein and fat targets leave. Protein calories
    come from the rounded gram target while fat calories stay unrounded, and
    the result is not clamped, so an extreme profile can yield negative carbs.
    """
    calorie_goal = calculate_calorie_goal(profile)

    protein_goal = round_half_up(profile.weight * PROTEIN_PER_KG[profile.goal])
    protein_calories = protein_goal * CALORIES_PER_GRAM_PROTEIN

    fat_calories = calorie_goal * FAT_CALORIE_RATIO
    fat_goal = round_half_up(fat_calories / CALORIES_PER_GRAM_FAT)

    remaining_calories = calorie_goal - protein_calories - fat_calories
    carbs_goal = round_half_up(remaining_calories / CALORIES_PER_GRAM_CARBS)

    return NutritionGoals(
        calories=calorie_goal,
        protein=protein_goal,
        carbs=carbs_goal,
        fat=fat_goal,
    )


def calculate_energy_report(profile: Profile) -> EnergyReport:
    """Return BMR, TDEE and calorie goal together."""
    return EnergyReport(
        bmr=calculate_bmr(profile),
        tdee=calculate_tdee(profile),
        calorie_goal=calculate_calorie_goal(profile),
    )
