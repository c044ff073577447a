"""Pydantic records for the stored and wire shape of profiles and entries."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from nutritrack.domain.food_log import FoodEntry
from nutritrack.domain.profile import ActivityLevel, Gender, Goal, Profile


class ProfileRecord(BaseModel):
    """Profile as a JSON object."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str
    age: int = Field(gt=0)
    gender: Gender
    weight: float = Field(gt=0)
    height: float = Field(gt=0)
    activity_level: ActivityLevel = Field(alias="activityLevel")
    goal: Goal

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileRecord":
        return cls(
            name=profile.name,
            age=profile.age,
            gender=profile.gender,
            weight=profile.weight,
            height=profile.height,
            activity_level=profile.activity_level,
            goal=profile.goal,
        )

    def to_domain(self) -> Profile:
        return Profile(
            name=self.name,
            age=self.age,
            gender=self.gender,
            weight=self.weight,
            height=self.height,
            activity_level=self.activity_level,
            goal=self.goal,
        )


class FoodEntryRecord(BaseModel):
    """Food entry as a JSON object; the day is stored under "date"."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    id: str = Field(min_length=1)
    name: str
    calories: float = Field(ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    day: date = Field(alias="date")

    @classmethod
    def from_domain(cls, entry: FoodEntry) -> "FoodEntryRecord":
        return cls(
            id=entry.id,
            name=entry.name,
            calories=entry.calories,
            protein=entry.protein,
            carbs=entry.carbs,
            fat=entry.fat,
            day=entry.day,
        )

    def to_domain(self) -> FoodEntry:
        return FoodEntry(
            id=self.id,
            name=self.name,
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            day=self.day,
        )
