"""Domain models for user health profiles."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


def _normalize(raw: str) -> str:
    return raw.strip().lower().replace("-", "_").replace(" ", "_")


class Gender(Enum):
    """Biological sex used by the BMR equation."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, raw: "str | Gender | None") -> "Gender | None":
        """Parse a gender label, returning None when unrecognized."""
        if raw is None or isinstance(raw, Gender):
            return raw
        try:
            return cls(_normalize(raw))
        except ValueError:
            return None


class ActivityLevel(Enum):
    """Daily activity level, mapped to a TDEE multiplier."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @classmethod
    def parse(cls, raw: "str | ActivityLevel | None") -> "ActivityLevel | None":
        """Parse an activity level or one of its display labels."""
        if raw is None or isinstance(raw, ActivityLevel):
            return raw
        key = _normalize(raw)
        key = _ACTIVITY_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


_ACTIVITY_ALIASES = {
    "light_activity": "light",
    "moderate_activity": "moderate",
    "extra_active": "very_active",
}


class HealthGoal(Enum):
    """Goal that drives the calorie adjustment and macro split."""

    LOSE_WEIGHT = "lose_weight"
    GAIN_WEIGHT = "gain_weight"
    MAINTAIN_WEIGHT = "maintain_weight"
    BUILD_MUSCLE = "build_muscle"
    GENERAL = "general"

    @classmethod
    def parse(cls, raw: "str | HealthGoal | None") -> "HealthGoal | None":
        """Parse a goal or one of its display labels."""
        if raw is None or isinstance(raw, HealthGoal):
            return raw
        key = _normalize(raw)
        key = _GOAL_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return None


_GOAL_ALIASES = {
    "weight_loss": "lose_weight",
    "lose": "lose_weight",
    "weight_gain": "gain_weight",
    "gain": "gain_weight",
    "maintain": "maintain_weight",
    "muscle_gain": "build_muscle",
    "general_health": "general",
}


@dataclass(frozen=True)
class HealthProfile:
    """A user's health profile.

    Only ``user_id`` is required. The nutrition pipeline degrades to zero
    sentinels when the numeric fields are missing.
    """

    user_id: str
    age: int | None = None
    gender: Gender | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: ActivityLevel | None = None
    health_goal: HealthGoal | None = None
    dietary_restrictions: str | None = None
    allergies: str | None = None
    bmi: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
