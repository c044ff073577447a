"""Food log service."""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import uuid4

from nutritrack.domain.food_log import FoodEntry
from nutritrack.services.daily import entries_for_day

_logger = logging.getLogger(__name__)


class FoodLogRepository(Protocol):
    """Persistence interface for the food log."""

    def load_entries(self) -> list[FoodEntry]:
        """Return every stored entry across all days."""

    def save_entries(self, entries: list[FoodEntry]) -> None:
        """Overwrite the stored collection."""


@dataclass
class FoodLogService:
    """Service for adding, removing and reading food entries."""

    repository: FoodLogRepository

    def get_all_entries(self) -> list[FoodEntry]:
        """Return every logged entry."""
        return self.repository.load_entries()

    def get_entries_for_day(self, day: date) -> list[FoodEntry]:
        """Return entries logged on a day, in insertion order."""
        return entries_for_day(self.repository.load_entries(), day)

    def add_entry(  # noqa: PLR0913
        self,
        name: str,
        calories: float | None,
        day: date,
        protein: float | None = None,
        carbs: float | None = None,
        fat: float | None = None,
    ) -> FoodEntry | None:
        """Log a food, or return None when the name or calories are missing.

        Non-finite amounts and negative macros are rejected the same way.
        """
        if not name or not name.strip() or calories is None or calories <= 0:
            _logger.debug("Ignoring food entry: name=%r calories=%r", name, calories)
            return None
        if not all(_is_amount(value) for value in (calories, protein, carbs, fat)):
            _logger.debug("Ignoring food entry with invalid amounts: name=%r", name)
            return None

        entry = FoodEntry(
            id=str(uuid4()),
            name=name.strip(),
            calories=calories,
            protein=protein or 0,
            carbs=carbs or 0,
            fat=fat or 0,
            day=day,
        )
        entries = self.repository.load_entries()
        entries.append(entry)
        self.repository.save_entries(entries)
        _logger.info("Food entry added: id=%s day=%s", entry.id, entry.day)
        return entry

    def remove_entry(self, entry_id: str) -> None:
        """Delete an entry by id; unknown ids are ignored."""
        entries = self.repository.load_entries()
        remaining = [entry for entry in entries if entry.id != entry_id]
        if len(remaining) == len(entries):
            return
        self.repository.save_entries(remaining)
        _logger.info("Food entry removed: id=%s", entry_id)


def _is_amount(value: float | None) -> bool:
    return value is None or (math.isfinite(value) and value >= 0)
