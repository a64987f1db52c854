"""Recipe catalog filtering, search and sorting."""

import logging
from dataclasses import dataclass
from typing import Protocol

from diet_hub.domain.recipes import (
    CaloriesRange,
    FilterCriteria,
    Recipe,
    RecipeSortOrder,
)

_logger = logging.getLogger(__name__)


class RecipeSourceError(RuntimeError):
    """Raised when the recipe catalog cannot be read."""


class RecipeSource(Protocol):
    """Read-only source of catalog recipes."""

    def get_all(self) -> list[Recipe]:
        """Return every recipe in catalog order."""


def apply_filters(recipes: list[Recipe], criteria: FilterCriteria) -> list[Recipe]:
    """Return recipes matching every active criterion, in input order."""
    meal_type = _clean(criteria.meal_type)
    category = _clean(criteria.category)
    search_term = _clean(criteria.search_term)
    calories_range = _resolve_calories_range(criteria.calories_range)

    return [
        recipe
        for recipe in recipes
        if (meal_type is None or recipe.meal_type.value == meal_type)
        and (category is None or _matches_category(recipe, category))
        and (calories_range is None or calories_range.contains(recipe.calories))
        and (search_term is None or _matches_search(recipe, search_term))
    ]


def search(recipes: list[Recipe], term: str | None) -> list[Recipe]:
    """Case-insensitive search across name, tags, ingredients and description."""
    return apply_filters(recipes, FilterCriteria(search_term=term))


def sort_recipes(
    recipes: list[Recipe], order: RecipeSortOrder | str | None
) -> list[Recipe]:
    """Return a stably sorted copy; relevance keeps the input order."""
    resolved = RecipeSortOrder.parse(order)
    if resolved is None:
        if order:
            _logger.warning("Unknown sort order %r, keeping relevance order", order)
        resolved = RecipeSortOrder.RELEVANCE
    if resolved is RecipeSortOrder.CALORIES_ASC:
        return sorted(recipes, key=lambda recipe: recipe.calories)
    if resolved is RecipeSortOrder.CALORIES_DESC:
        return sorted(recipes, key=lambda recipe: recipe.calories, reverse=True)
    if resolved is RecipeSortOrder.PROTEIN_DESC:
        return sorted(recipes, key=lambda recipe: recipe.protein, reverse=True)
    return list(recipes)


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip().lower()
    return cleaned or None


def _resolve_calories_range(raw: str | None) -> CaloriesRange | None:
    if _clean(raw) is None:
        return None
    calories_range = CaloriesRange.parse(raw)
    if calories_range is None:
        _logger.warning("Unknown calories range %r, not filtering on calories", raw)
    return calories_range


def _matches_category(recipe: Recipe, category: str) -> bool:
    return recipe.category.lower() == category or category in recipe.tags.lower()


def _matches_search(recipe: Recipe, term: str) -> bool:
    fields = (recipe.name, recipe.tags, recipe.ingredients, recipe.description)
    return any(term in field.lower() for field in fields)


@dataclass
class RecipeCatalogService:
    """Application service for browsing the recipe catalog."""

    source: RecipeSource

    def list_recipes(self) -> list[Recipe]:
        """Return the full catalog."""
        return self.source.get_all()

    def get_recipe(self, recipe_id: int) -> Recipe | None:
        """Return a recipe by id, if present."""
        for recipe in self.source.get_all():
            if recipe.id == recipe_id:
                return recipe
        return None

    def filter(
        self,
        criteria: FilterCriteria,
        sort: RecipeSortOrder | str | None = None,
    ) -> list[Recipe]:
        """Filter the catalog and optionally sort the matches."""
        matches = apply_filters(self.source.get_all(), criteria)
        return sort_recipes(matches, sort)

    def search(self, term: str | None) -> list[Recipe]:
        """Search the catalog by keyword."""
        return search(self.source.get_all(), term)

    def by_category(self, category: str) -> list[Recipe]:
        """Return recipes whose category equals the given one."""
        wanted = category.strip().lower()
        return [
            recipe
            for recipe in self.source.get_all()
            if recipe.category.lower() == wanted
        ]

    def by_calories(self, min_calories: int, max_calories: int) -> list[Recipe]:
        """Return recipes with calories between the bounds, both inclusive."""
        return [
            recipe
            for recipe in self.source.get_all()
            if min_calories <= recipe.calories <= max_calories
        ]

    def high_protein(self, min_protein: float = 20) -> list[Recipe]:
        """Return recipes with at least ``min_protein`` grams of protein."""
        return [
            recipe for recipe in self.source.get_all() if recipe.protein >= min_protein
        ]
