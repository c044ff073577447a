"""Domain models for the food log."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FoodEntry:
    """A manually logged food, immutable once created."""

    id: str
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    day: date
