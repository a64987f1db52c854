"""Supabase-backed recipe source."""

from dataclasses import dataclass

from supabase import Client

from diet_hub.domain.recipes import MealType, Recipe
from diet_hub.services.recipes import RecipeSource, RecipeSourceError


@dataclass
class SupabaseRecipeRepository(RecipeSource):
    """Reads the seeded recipe catalog from Supabase."""

    client: Client

    def get_all(self) -> list[Recipe]:
        """Return every recipe ordered by id."""
        try:
            response = self.client.table("recipes").select("*").order("id").execute()
        except Exception as exc:
            raise RecipeSourceError("Failed to load recipes") from exc
        return [_parse_recipe(row) for row in response.data or []]


def _parse_recipe(row: dict[str, object]) -> Recipe:
    """Parse a recipe row into a domain model."""
    prep_time = row.get("prep_time_minutes")
    return Recipe(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        description=str(row.get("description") or ""),
        calories=int(row.get("calories") or 0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        meal_type=MealType.parse(str(row.get("meal_type", ""))),
        category=str(row.get("category") or ""),
        tags=str(row.get("tags") or ""),
        ingredients=str(row.get("ingredients") or ""),
        instructions=str(row.get("instructions") or ""),
        prep_time_minutes=int(prep_time) if prep_time is not None else None,
        difficulty=row.get("difficulty"),
        image_url=row.get("image_url"),
    )
