"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutritrack.adapters.json_food_log_repository import JsonFoodLogRepository
from nutritrack.adapters.json_profile_repository import JsonProfileRepository
from nutritrack.adapters.json_store import JsonFileStore
from nutritrack.config import Settings
from nutritrack.services.food_log import FoodLogService
from nutritrack.services.profile import ProfileService
from nutritrack.services.tracker import TrackerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    food_log_service: FoodLogService
    tracker_service: TrackerService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = JsonFileStore(resolved_settings.data_dir)
    profile_service = ProfileService(JsonProfileRepository(store))
    food_log_service = FoodLogService(JsonFoodLogRepository(store))
    tracker_service = TrackerService(
        profile_service=profile_service,
        food_log_service=food_log_service,
        timezone=resolved_settings.timezone,
    )
    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        food_log_service=food_log_service,
        tracker_service=tracker_service,
    )
