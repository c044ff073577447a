"""FastAPI application factory."""

import logging
from dataclasses import asdict
from datetime import date

from fastapi import FastAPI, Query, Request

from nutritrack.api.models import FoodEntryCreate, ProfileUpdate
from nutritrack.app_logging import configure_logging
from nutritrack.containers import AppContainer
from nutritrack.domain.food_log import FoodEntry
from nutritrack.domain.nutrition import DailyDashboard
from nutritrack.domain.records import FoodEntryRecord, ProfileRecord


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="NutriTrack")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the current profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.get_profile()
        return _profile_payload(ProfileRecord.from_domain(profile))

    @app.put("/profile")
    async def replace_profile(
        payload: ProfileRecord, request: Request
    ) -> dict[str, object]:
        """Replace the whole profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.set_profile(payload.to_domain())
        return _profile_payload(ProfileRecord.from_domain(profile))

    @app.patch("/profile")
    async def update_profile(
        payload: ProfileUpdate, request: Request
    ) -> dict[str, object]:
        """Update selected profile fields."""
        state_container: AppContainer = request.app.state.container
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        profile = state_container.profile_service.update_profile(**changes)
        return _profile_payload(ProfileRecord.from_domain(profile))

    @app.get("/foods")
    async def list_foods(
        request: Request, day: date | None = Query(default=None, alias="date")
    ) -> dict[str, object]:
        """Return entries for a day, or every entry when no day is given."""
        state_container: AppContainer = request.app.state.container
        service = state_container.food_log_service
        entries = (
            service.get_all_entries()
            if day is None
            else service.get_entries_for_day(day)
        )
        return {"entries": [_entry_payload(entry) for entry in entries]}

    @app.post("/foods")
    async def add_food(
        payload: FoodEntryCreate, request: Request
    ) -> dict[str, object]:
        """Log a food; entries without a name or calories are ignored."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.food_log_service.add_entry(
            name=payload.name,
            calories=payload.calories,
            day=payload.day or state_container.tracker_service.today(),
            protein=payload.protein,
            carbs=payload.carbs,
            fat=payload.fat,
        )
        if entry is None:
            logger.info("Food entry rejected: name or calories missing")
            return {"entry": None}
        return {"entry": _entry_payload(entry)}

    @app.delete("/foods/{entry_id}")
    async def remove_food(entry_id: str, request: Request) -> dict[str, str]:
        """Remove a logged food."""
        state_container: AppContainer = request.app.state.container
        state_container.food_log_service.remove_entry(entry_id)
        return {"status": "ok"}

    @app.get("/dashboard")
    async def dashboard(
        request: Request, day: date | None = Query(default=None, alias="date")
    ) -> dict[str, object]:
        """Return goals, totals, progress and advice for a day."""
        state_container: AppContainer = request.app.state.container
        return _dashboard_payload(state_container.tracker_service.get_dashboard(day))

    return app


def _profile_payload(record: ProfileRecord) -> dict[str, object]:
    return record.model_dump(mode="json", by_alias=True)


def _entry_payload(entry: FoodEntry) -> dict[str, object]:
    return FoodEntryRecord.from_domain(entry).model_dump(mode="json", by_alias=True)


def _dashboard_payload(dashboard: DailyDashboard) -> dict[str, object]:
    """Serialise a dashboard into JSON-friendly values."""
    return {
        "date": dashboard.day.isoformat(),
        "label": dashboard.label,
        "previousDate": dashboard.previous_day.isoformat(),
        "nextDate": dashboard.next_day.isoformat(),
        "entries": [_entry_payload(entry) for entry in dashboard.entries],
        "summary": asdict(dashboard.summary),
        "goals": asdict(dashboard.goals),
        "energy": {
            "bmr": dashboard.energy.bmr,
            "tdee": dashboard.energy.tdee,
            "calorieGoal": dashboard.energy.calorie_goal,
        },
        "progress": {
            "remainingCalories": dashboard.progress.remaining_calories,
            "caloriePercent": dashboard.progress.calorie_percent,
            "proteinPercent": dashboard.progress.protein_percent,
            "carbsPercent": dashboard.progress.carbs_percent,
            "fatPercent": dashboard.progress.fat_percent,
        },
        "shares": asdict(dashboard.shares),
        "advice": dashboard.advice,
    }
