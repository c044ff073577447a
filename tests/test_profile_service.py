"""Tests for profile service."""

import pytest

from nutritrack.domain.profile import DEFAULT_PROFILE, ActivityLevel, Goal
from nutritrack.services.profile import ProfileService
from tests.conftest import InMemoryProfileRepository, make_profile


def test_get_profile_defaults_when_missing() -> None:
    service = ProfileService(InMemoryProfileRepository())

    profile = service.get_profile()

    assert profile == DEFAULT_PROFILE
    assert profile.name == "User"
    assert profile.activity_level == ActivityLevel.MODERATE


def test_set_profile_persists() -> None:
    repository = InMemoryProfileRepository()
    service = ProfileService(repository)
    profile = make_profile(name="Sam", goal=Goal.GAIN)

    service.set_profile(profile)

    assert repository.profile == profile
    assert service.get_profile() == profile


def test_update_profile_replaces_whole_record() -> None:
    repository = InMemoryProfileRepository(profile=make_profile())
    service = ProfileService(repository)

    updated = service.update_profile(weight=65, goal=Goal.LOSE)

    assert updated.weight == 65
    assert updated.goal == Goal.LOSE
    assert updated.name == "Ana"
    assert repository.profile == updated
    assert repository.saves == 1


def test_update_profile_rejects_unknown_field() -> None:
    service = ProfileService(InMemoryProfileRepository())

    with pytest.raises(TypeError):
        service.update_profile(shoe_size=42)
