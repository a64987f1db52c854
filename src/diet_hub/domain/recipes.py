"""Domain models for the recipe catalog."""

import re
from dataclasses import dataclass
from enum import Enum

_STEP_MARKER = re.compile(r"(?:^|\s)\d+\.\s+")


class MealType(Enum):
    """Meal slot a recipe is intended for."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"

    @classmethod
    def parse(cls, raw: "str | MealType") -> "MealType":
        """Parse a meal type label case-insensitively."""
        if isinstance(raw, MealType):
            return raw
        return cls(raw.strip().lower())


class CaloriesRange(Enum):
    """Calorie bands offered by the recipe filter."""

    UP_TO_200 = "0-200"
    FROM_200_TO_400 = "200-400"
    FROM_400_TO_600 = "400-600"
    FROM_600 = "600+"

    @classmethod
    def parse(cls, raw: str | None) -> "CaloriesRange | None":
        """Return the band for a label, or None when it is not recognized."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().replace(" ", ""))
        except ValueError:
            return None

    @property
    def bounds(self) -> tuple[int, int | None]:
        """Inclusive lower and exclusive upper bound; None means open-ended."""
        return _CALORIE_BOUNDS[self]

    def contains(self, calories: float) -> bool:
        lower, upper = self.bounds
        if calories < lower:
            return False
        return upper is None or calories < upper


_CALORIE_BOUNDS: dict[CaloriesRange, tuple[int, int | None]] = {
    CaloriesRange.UP_TO_200: (0, 200),
    CaloriesRange.FROM_200_TO_400: (200, 400),
    CaloriesRange.FROM_400_TO_600: (400, 600),
    CaloriesRange.FROM_600: (600, None),
}


class RecipeSortOrder(Enum):
    """Result orderings; relevance keeps catalog order."""

    RELEVANCE = "relevance"
    CALORIES_ASC = "calories-asc"
    CALORIES_DESC = "calories-desc"
    PROTEIN_DESC = "protein-desc"

    @classmethod
    def parse(cls, raw: "str | RecipeSortOrder | None") -> "RecipeSortOrder | None":
        if raw is None or isinstance(raw, RecipeSortOrder):
            return raw
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class Recipe:
    """A catalog recipe with per-serving macros."""

    id: int
    name: str
    description: str
    calories: int
    protein: float
    carbs: float
    fat: float
    meal_type: MealType
    category: str
    tags: str
    ingredients: str
    instructions: str
    prep_time_minutes: int | None = None
    difficulty: str | None = None
    image_url: str | None = None

    @property
    def tag_list(self) -> list[str]:
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]

    @property
    def ingredient_list(self) -> list[str]:
        return [item.strip() for item in self.ingredients.split(",") if item.strip()]

    @property
    def instruction_steps(self) -> list[str]:
        """Split numbered instructions ("1. Do this. 2. Do that.") into steps."""
        steps = [step.strip() for step in _STEP_MARKER.split(self.instructions)]
        return [step for step in steps if step]

    @property
    def macro_calories(self) -> float:
        """Energy implied by the macros at 4/4/9 kcal per gram."""
        return self.protein * 4 + self.carbs * 4 + self.fat * 9


@dataclass(frozen=True)
class FilterCriteria:
    """User-selected recipe constraints; unset fields impose no constraint."""

    meal_type: str | None = None
    category: str | None = None
    calories_range: str | None = None
    search_term: str | None = None
