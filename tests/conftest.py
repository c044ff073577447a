"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from uuid import uuid4

import pytest

from nutritrack.config import Settings
from nutritrack.containers import AppContainer, build_container
from nutritrack.domain.food_log import FoodEntry
from nutritrack.domain.nutrition import NutritionGoals
from nutritrack.domain.profile import ActivityLevel, Gender, Goal, Profile
from nutritrack.services.food_log import FoodLogRepository, FoodLogService
from nutritrack.services.profile import ProfileRepository, ProfileService
from nutritrack.services.tracker import TrackerService


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profile: Profile | None = None
    saves: int = 0

    def load_profile(self) -> Profile | None:
        return self.profile

    def save_profile(self, profile: Profile) -> None:
        self.profile = profile
        self.saves += 1


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: list[FoodEntry] = field(default_factory=list)
    saves: int = 0

    def load_entries(self) -> list[FoodEntry]:
        return list(self.entries)

    def save_entries(self, entries: list[FoodEntry]) -> None:
        self.entries = list(entries)
        self.saves += 1


def make_profile(**overrides: object) -> Profile:
    values: dict[str, object] = {
        "name": "Ana",
        "age": 30,
        "gender": Gender.FEMALE,
        "weight": 70,
        "height": 170,
        "activity_level": ActivityLevel.MODERATE,
        "goal": Goal.MAINTAIN,
    }
    values.update(overrides)
    return Profile(**values)


def make_entry(  # noqa: PLR0913
    name: str = "Chicken",
    calories: float = 165,
    protein: float = 31,
    carbs: float = 0,
    fat: float = 4,
    day: date = date(2026, 10, 19),
) -> FoodEntry:
    return FoodEntry(
        id=str(uuid4()),
        name=name,
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        day=day,
    )


@pytest.fixture
def goals() -> NutritionGoals:
    return NutritionGoals(calories=2000, protein=100, carbs=250, fat=60)


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def tracker_service(
    profile_repository: InMemoryProfileRepository,
    food_log_repository: InMemoryFoodLogRepository,
) -> TrackerService:
    return TrackerService(
        profile_service=ProfileService(profile_repository),
        food_log_service=FoodLogService(food_log_repository),
        timezone="UTC",
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "store", timezone="UTC")


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
