"""Pydantic models for API request bodies."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from nutritrack.domain.profile import ActivityLevel, Gender, Goal


class ProfileUpdate(BaseModel):
    """Partial profile edit from the settings screen."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str | None = None
    age: int | None = Field(default=None, gt=0)
    gender: Gender | None = None
    weight: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)
    activity_level: ActivityLevel | None = Field(default=None, alias="activityLevel")
    goal: Goal | None = None


class FoodEntryCreate(BaseModel):
    """Food entry form; the day defaults to today."""

    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    name: str = ""
    calories: float | None = None
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    day: date | None = Field(default=None, alias="date")
