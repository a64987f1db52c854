"""Supabase-backed health profile repository."""

from dataclasses import dataclass, replace
from datetime import UTC, datetime

from supabase import Client

from diet_hub.adapters.profile_rows import parse_profile, profile_to_row
from diet_hub.domain.profiles import HealthProfile
from diet_hub.services.profiles import ProfileRepository, ProfileStoreError

_TABLE = "health_profiles"


@dataclass
class SupabaseHealthProfileRepository(ProfileRepository):
    """Supabase implementation for health profile persistence."""

    client: Client

    def get_by_user_id(self, user_id: str) -> HealthProfile | None:
        """Return the profile for a user, if present."""
        try:
            response = (
                self.client.table(_TABLE)
                .select("*")
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
        except Exception as exc:
            raise ProfileStoreError(f"Failed to load profile {user_id!r}") from exc
        if not response.data:
            return None
        return parse_profile(response.data[0])

    def save(self, profile: HealthProfile) -> HealthProfile:
        """Upsert a profile keyed by user id and return the stored row."""
        now = datetime.now(tz=UTC)
        row = profile_to_row(replace(profile, updated_at=now))
        # created_at is owned by the table default on first insert.
        row.pop("created_at")
        try:
            response = (
                self.client.table(_TABLE).upsert(row, on_conflict="user_id").execute()
            )
        except Exception as exc:
            raise ProfileStoreError(
                f"Failed to save profile {profile.user_id!r}"
            ) from exc
        if not response.data:
            raise ProfileStoreError("Failed to save health profile in Supabase")
        return parse_profile(response.data[0])

    def list_profiles(self) -> list[HealthProfile]:
        """Return all profiles ordered by user id."""
        try:
            response = self.client.table(_TABLE).select("*").order("user_id").execute()
        except Exception as exc:
            raise ProfileStoreError("Failed to list profiles") from exc
        return [parse_profile(row) for row in response.data or []]

    def delete(self, user_id: str) -> bool:
        """Delete the profile for a user."""
        try:
            response = (
                self.client.table(_TABLE).delete().eq("user_id", user_id).execute()
            )
        except Exception as exc:
            raise ProfileStoreError(f"Failed to delete profile {user_id!r}") from exc
        return bool(response.data)
