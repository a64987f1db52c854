"""Health profile storage with a remote store and a local fallback."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from diet_hub.domain.nutrition import Advice, NutritionProfile
from diet_hub.domain.profiles import HealthProfile
from diet_hub.services.nutrition import (
    calculate_bmi,
    derive_nutrition_profile,
    generate_advice,
)

_logger = logging.getLogger(__name__)


class ProfileStoreError(RuntimeError):
    """Raised when a profile store cannot be reached or rejects a request."""


class ProfileRepository(Protocol):
    """Remote persistence interface for health profiles."""

    def get_by_user_id(self, user_id: str) -> HealthProfile | None:
        """Return the profile for a user, if present."""

    def save(self, profile: HealthProfile) -> HealthProfile:
        """Create or update a profile and return the stored version."""

    def list_profiles(self) -> list[HealthProfile]:
        """Return all stored profiles."""

    def delete(self, user_id: str) -> bool:
        """Delete a profile, returning False when it did not exist."""


class LocalProfileStore(Protocol):
    """Local key-value fallback for health profiles."""

    def load(self, user_id: str) -> HealthProfile | None:
        """Return the locally stored profile, if any."""

    def store(self, profile: HealthProfile) -> HealthProfile:
        """Store a profile locally and return the stored version."""


@dataclass(frozen=True)
class ProfileNutrition:
    """A profile together with its derived nutrition plan."""

    profile: HealthProfile
    nutrition: NutritionProfile
    advice: list[Advice]


@dataclass
class ProfileService:
    """Reads and writes profiles, falling back to local storage."""

    remote: ProfileRepository
    local: LocalProfileStore

    def fetch_remote(self, user_id: str) -> HealthProfile | None:
        """Return the remote profile; raises ProfileStoreError on failure."""
        return self.remote.get_by_user_id(user_id)

    def fetch_local(self, user_id: str) -> HealthProfile | None:
        """Return the locally stored profile, if any."""
        return self.local.load(user_id)

    def get_profile(self, user_id: str) -> HealthProfile | None:
        """Return the profile from the remote store, else the local one."""
        try:
            profile = self.fetch_remote(user_id)
        except ProfileStoreError as exc:
            _logger.warning(
                "Remote profile load failed, using local fallback: %s", exc
            )
            profile = None
        if profile is None:
            profile = self.fetch_local(user_id)
        return profile

    def save_profile(self, profile: HealthProfile) -> HealthProfile:
        """Save a profile with its BMI cached, locally if the remote fails."""
        bmi = calculate_bmi(profile.weight_kg, profile.height_cm)
        prepared = replace(profile, bmi=bmi or None)
        try:
            return self.remote.save(prepared)
        except ProfileStoreError as exc:
            _logger.warning(
                "Remote profile save failed, using local fallback: %s", exc
            )
        return self.local.store(prepared)

    def list_profiles(self) -> list[HealthProfile]:
        """Return all profiles from the remote store."""
        return self.remote.list_profiles()

    def delete_profile(self, user_id: str) -> bool:
        """Delete a profile from the remote store."""
        return self.remote.delete(user_id)

    def nutrition_for(self, user_id: str) -> ProfileNutrition | None:
        """Return the profile with its nutrition plan and advice."""
        profile = self.get_profile(user_id)
        if profile is None:
            return None
        return ProfileNutrition(
            profile=profile,
            nutrition=derive_nutrition_profile(profile),
            advice=generate_advice(profile),
        )
