"""Domain models for the user profile."""

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "veryActive"


class Goal(str, Enum):
    """Body weight goal."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


@dataclass(frozen=True)
class Profile:
    """The single user profile driving all nutrition targets."""

    name: str
    age: int
    gender: Gender
    weight: float
    height: float
    activity_level: ActivityLevel
    goal: Goal


DEFAULT_PROFILE = Profile(
    name="User",
    age=30,
    gender=Gender.FEMALE,
    weight=70,
    height=170,
    activity_level=ActivityLevel.MODERATE,
    goal=Goal.MAINTAIN,
)
