"""Daily dashboard composition."""

from dataclasses import dataclass
from datetime import date

from nutritrack.domain.nutrition import DailyDashboard
from nutritrack.services.advice import advise
from nutritrack.services.daily import (
    calculate_macro_shares,
    calculate_progress,
    entries_for_day,
    format_date_label,
    local_today,
    shift_date,
    summarize,
)
from nutritrack.services.energy import (
    calculate_energy_report,
    calculate_nutrition_goals,
)
from nutritrack.services.food_log import FoodLogService
from nutritrack.services.profile import ProfileService


@dataclass
class TrackerService:
    """Recomputes every derived figure from the current profile and log."""

    profile_service: ProfileService
    food_log_service: FoodLogService
    timezone: str | None = None

    def today(self) -> date:
        """Return the current local calendar day."""
        return local_today(self.timezone)

    def get_dashboard(self, day: date | None = None) -> DailyDashboard:
        """Return the dashboard for a day, defaulting to today."""
        today = self.today()
        selected = day or today
        profile = self.profile_service.get_profile()
        all_entries = self.food_log_service.get_all_entries()

        goals = calculate_nutrition_goals(profile)
        summary = summarize(all_entries, selected)
        return DailyDashboard(
            day=selected,
            label=format_date_label(selected, today),
            previous_day=shift_date(selected, -1),
            next_day=shift_date(selected, 1),
            entries=entries_for_day(all_entries, selected),
            summary=summary,
            goals=goals,
            energy=calculate_energy_report(profile),
            progress=calculate_progress(summary, goals),
            shares=calculate_macro_shares(summary, goals),
            advice=advise(summary, goals),
        )
