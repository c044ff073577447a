"""Key-value store repository for the food log."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from nutritrack.adapters.json_store import KeyValueStore
from nutritrack.domain.food_log import FoodEntry
from nutritrack.domain.records import FoodEntryRecord
from nutritrack.services.food_log import FoodLogRepository

FOODS_KEY = "nutritrack-foods"

_logger = logging.getLogger(__name__)


@dataclass
class JsonFoodLogRepository(FoodLogRepository):
    """Stores all entries, across every day, as one flat JSON list."""

    store: KeyValueStore
    key: str = FOODS_KEY

    def load_entries(self) -> list[FoodEntry]:
        """Return stored entries, skipping rows that fail validation."""
        raw = self.store.get(self.key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            _logger.warning("Stored food log is not a list, starting empty")
            return []
        entries = []
        for row in raw:
            try:
                entries.append(FoodEntryRecord.model_validate(row).to_domain())
            except ValidationError as exc:
                _logger.warning("Skipping malformed food entry: %s", exc)
        return entries

    def save_entries(self, entries: list[FoodEntry]) -> None:
        """Overwrite the stored collection."""
        self.store.set(
            self.key,
            [
                FoodEntryRecord.from_domain(entry).model_dump(
                    mode="json", by_alias=True
                )
                for entry in entries
            ],
        )
