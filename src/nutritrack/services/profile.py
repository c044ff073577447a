"""Profile service."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from nutritrack.domain.profile import DEFAULT_PROFILE, Profile

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for the user profile."""

    def load_profile(self) -> Profile | None:
        """Return the stored profile, if any."""

    def save_profile(self, profile: Profile) -> None:
        """Overwrite the stored profile."""


@dataclass
class ProfileService:
    """Service owning the single user profile."""

    repository: ProfileRepository

    def get_profile(self) -> Profile:
        """Return the stored profile or the defaults if none is stored."""
        return self.repository.load_profile() or DEFAULT_PROFILE

    def set_profile(self, profile: Profile) -> Profile:
        """Replace and persist the profile."""
        self.repository.save_profile(profile)
        _logger.info("Profile updated: goal=%s", profile.goal.value)
        return profile

    def update_profile(self, **changes: object) -> Profile:
        """Apply field changes to the current profile and persist it."""
        updated = replace(self.get_profile(), **changes)
        return self.set_profile(updated)
