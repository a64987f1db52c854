"""Row mapping shared by the profile storage adapters."""

from datetime import datetime

from diet_hub.domain.profiles import ActivityLevel, Gender, HealthGoal, HealthProfile


def profile_to_row(profile: HealthProfile) -> dict[str, object]:
    """Serialize a profile into a flat, JSON-compatible row."""
    return {
        "user_id": profile.user_id,
        "age": profile.age,
        "gender": profile.gender.value if profile.gender else None,
        "height_cm": profile.height_cm,
        "weight_kg": profile.weight_kg,
        "activity_level": (
            profile.activity_level.value if profile.activity_level else None
        ),
        "health_goal": profile.health_goal.value if profile.health_goal else None,
        "dietary_restrictions": profile.dietary_restrictions,
        "allergies": profile.allergies,
        "bmi": profile.bmi,
        "created_at": _format_datetime(profile.created_at),
        "updated_at": _format_datetime(profile.updated_at),
    }


def parse_profile(row: dict[str, object]) -> HealthProfile:
    """Parse a stored row into a domain profile."""
    return HealthProfile(
        user_id=str(row["user_id"]),
        age=_optional_int(row.get("age")),
        gender=Gender.parse(row.get("gender")),
        height_cm=_optional_float(row.get("height_cm")),
        weight_kg=_optional_float(row.get("weight_kg")),
        activity_level=ActivityLevel.parse(row.get("activity_level")),
        health_goal=HealthGoal.parse(row.get("health_goal")),
        dietary_restrictions=row.get("dietary_restrictions"),
        allergies=row.get("allergies"),
        bmi=_optional_float(row.get("bmi")),
        created_at=_parse_datetime(row.get("created_at")),
        updated_at=_parse_datetime(row.get("updated_at")),
    )


def _optional_int(value: object) -> int | None:
    return int(value) if value is not None else None


def _optional_float(value: object) -> float | None:
    return float(value) if value is not None else None


def _format_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _parse_datetime(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
