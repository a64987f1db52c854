"""Nutrition domain models."""

from dataclasses import dataclass
from enum import Enum


class BmiCategory(Enum):
    """WHO adult BMI bands."""

    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


@dataclass(frozen=True)
class MacroRatios:
    """Fractions of total energy assigned to each macronutrient."""

    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class MacroGrams:
    """Daily macronutrient targets in grams."""

    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class MacroPercentages:
    """Whole-number share of energy per macronutrient."""

    protein_pct: int
    carbs_pct: int
    fat_pct: int


@dataclass(frozen=True)
class MacroCalories:
    """Energy supplied by each macronutrient, in kcal."""

    protein_kcal: float
    carbs_kcal: float
    fat_kcal: float

    @property
    def total_kcal(self) -> float:
        return self.protein_kcal + self.carbs_kcal + self.fat_kcal


@dataclass(frozen=True)
class NutritionProfile:
    """Energy and macro needs derived from a health profile."""

    bmi: float
    bmi_category: BmiCategory
    bmr: float
    tdee: float
    target_calories: float
    macros: MacroGrams
    percentages: MacroPercentages
    macro_calories: MacroCalories


@dataclass(frozen=True)
class Advice:
    """Short advice card shown alongside the nutrition plan."""

    title: str
    content: str
