"""Key-value store repository for the user profile."""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from nutritrack.adapters.json_store import KeyValueStore
from nutritrack.domain.profile import Profile
from nutritrack.domain.records import ProfileRecord
from nutritrack.services.profile import ProfileRepository

PROFILE_KEY = "nutritrack-user"

_logger = logging.getLogger(__name__)


@dataclass
class JsonProfileRepository(ProfileRepository):
    """Stores the profile as a single JSON object."""

    store: KeyValueStore
    key: str = PROFILE_KEY

    def load_profile(self) -> Profile | None:
        """Return the stored profile, or None if absent or malformed."""
        raw = self.store.get(self.key)
        if raw is None:
            return None
        try:
            return ProfileRecord.model_validate(raw).to_domain()
        except ValidationError as exc:
            _logger.warning("Stored profile is malformed, using defaults: %s", exc)
            return None

    def save_profile(self, profile: Profile) -> None:
        """Overwrite the stored profile."""
        record = ProfileRecord.from_domain(profile)
        self.store.set(self.key, record.model_dump(mode="json", by_alias=True))
