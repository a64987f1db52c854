"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field

import pytest

from diet_hub.adapters.supabase_profile_repository import (
    SupabaseHealthProfileRepository,
)
from diet_hub.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from diet_hub.domain.profiles import ActivityLevel, Gender, HealthGoal
from diet_hub.domain.recipes import MealType
from diet_hub.services.profiles import ProfileStoreError
from diet_hub.services.recipes import RecipeSourceError
from tests.conftest import make_profile


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": [], "delete": []}
    )
    last_payload: object | None = None
    last_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: str | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str = ""
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_conflict = on_conflict
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = column
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


class BrokenSupabaseClient:
    def table(self, name: str) -> FakeTable:
        raise ConnectionError(f"cannot reach {name}")


_PROFILE_ROW = {
    "user_id": "user-1",
    "age": 30,
    "gender": "male",
    "height_cm": 175,
    "weight_kg": 70,
    "activity_level": "moderate",
    "health_goal": "lose_weight",
    "dietary_restrictions": None,
    "allergies": "nuts",
    "bmi": 22.86,
    "created_at": "2024-05-01T10:00:00+00:00",
    "updated_at": "2024-05-02T10:00:00+00:00",
}


def test_profile_repository_get_by_user_id() -> None:
    client = FakeSupabaseClient()
    table = client.table("health_profiles")
    table.queue("select", [_PROFILE_ROW])

    repository = SupabaseHealthProfileRepository(client)
    profile = repository.get_by_user_id("user-1")

    assert profile is not None
    assert profile.gender is Gender.MALE
    assert profile.activity_level is ActivityLevel.MODERATE
    assert profile.health_goal is HealthGoal.LOSE_WEIGHT
    assert profile.height_cm == 175.0
    assert profile.created_at.year == 2024
    assert table.last_filters == [("user_id", "user-1")]
    assert repository.get_by_user_id("user-2") is None


def test_profile_repository_save_upserts_on_user_id() -> None:
    client = FakeSupabaseClient()
    table = client.table("health_profiles")
    table.queue("upsert", [_PROFILE_ROW])

    repository = SupabaseHealthProfileRepository(client)
    saved = repository.save(make_profile(bmi=22.86))

    assert saved.allergies == "nuts"
    assert table.last_conflict == "user_id"
    assert isinstance(table.last_payload, dict)
    assert "created_at" not in table.last_payload
    assert table.last_payload["updated_at"] is not None
    assert table.last_payload["gender"] == "male"


def test_profile_repository_save_without_row_fails() -> None:
    repository = SupabaseHealthProfileRepository(FakeSupabaseClient())

    with pytest.raises(ProfileStoreError, match="Failed to save"):
        repository.save(make_profile())


def test_profile_repository_list_and_delete() -> None:
    client = FakeSupabaseClient()
    table = client.table("health_profiles")
    table.queue("select", [_PROFILE_ROW, {**_PROFILE_ROW, "user_id": "user-2"}])
    table.queue("delete", [_PROFILE_ROW])

    repository = SupabaseHealthProfileRepository(client)

    assert [p.user_id for p in repository.list_profiles()] == ["user-1", "user-2"]
    assert table.last_order == "user_id"
    assert repository.delete("user-1") is True
    assert repository.delete("user-1") is False


def test_profile_repository_wraps_client_errors() -> None:
    repository = SupabaseHealthProfileRepository(BrokenSupabaseClient())

    with pytest.raises(ProfileStoreError) as excinfo:
        repository.get_by_user_id("user-1")

    assert isinstance(excinfo.value.__cause__, ConnectionError)
    with pytest.raises(ProfileStoreError):
        repository.save(make_profile())
    with pytest.raises(ProfileStoreError):
        repository.list_profiles()
    with pytest.raises(ProfileStoreError):
        repository.delete("user-1")


def test_recipe_repository_parses_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("recipes")
    table.queue(
        "select",
        [
            {
                "id": 7,
                "name": "Turkey & Broccoli Stir-Fry",
                "description": "Quick stir-fry.",
                "calories": 340,
                "protein": 38,
                "carbs": 15,
                "fat": 12,
                "meal_type": "Dinner",
                "category": "Main Course",
                "tags": "High Protein, Low Carb",
                "ingredients": "Turkey, Broccoli",
                "instructions": "1. Stir-fry. 2. Serve.",
                "prep_time_minutes": 20,
                "difficulty": "Easy",
                "image_url": None,
            }
        ],
    )

    recipes = SupabaseRecipeRepository(client).get_all()

    assert len(recipes) == 1
    assert recipes[0].meal_type is MealType.DINNER
    assert recipes[0].protein == 38.0
    assert recipes[0].prep_time_minutes == 20
    assert table.last_order == "id"


def test_recipe_repository_wraps_client_errors() -> None:
    repository = SupabaseRecipeRepository(BrokenSupabaseClient())

    with pytest.raises(RecipeSourceError) as excinfo:
        repository.get_all()

    assert isinstance(excinfo.value.__cause__, ConnectionError)
