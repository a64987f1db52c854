"""Nutrition derivation pipeline.

Every function here is pure: the result depends only on the arguments.
Missing profile data never raises; it degrades to a ``0.0`` sentinel so the
pipeline stays composable, and unknown enum values fall back to documented
defaults.
"""

import logging
import math

from diet_hub.domain.nutrition import (
    Advice,
    BmiCategory,
    MacroCalories,
    MacroGrams,
    MacroPercentages,
    MacroRatios,
    NutritionProfile,
)
from diet_hub.domain.profiles import ActivityLevel, Gender, HealthGoal, HealthProfile

PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

DEFAULT_TARGET_CALORIES = 2000.0
CALORIE_ADJUSTMENT = 500.0

UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS[ActivityLevel.SEDENTARY]

MACRO_RATIOS: dict[HealthGoal, MacroRatios] = {
    HealthGoal.LOSE_WEIGHT: MacroRatios(protein=0.40, carbs=0.30, fat=0.30),
    HealthGoal.GAIN_WEIGHT: MacroRatios(protein=0.30, carbs=0.45, fat=0.25),
    HealthGoal.BUILD_MUSCLE: MacroRatios(protein=0.35, carbs=0.45, fat=0.20),
    HealthGoal.MAINTAIN_WEIGHT: MacroRatios(protein=0.30, carbs=0.40, fat=0.30),
    HealthGoal.GENERAL: MacroRatios(protein=0.30, carbs=0.40, fat=0.30),
}
DEFAULT_MACRO_RATIOS = MACRO_RATIOS[HealthGoal.MAINTAIN_WEIGHT]

_logger = logging.getLogger(__name__)


def calculate_bmi(weight_kg: float | None, height_cm: float | None) -> float:
    """Return weight / height(m)^2, or 0.0 when either input is missing."""
    if not weight_kg or not height_cm or weight_kg <= 0 or height_cm <= 0:
        return 0.0
    return weight_kg / (height_cm / 100) ** 2


def classify_bmi(bmi: float) -> BmiCategory:
    """Classify a BMI; each band includes its lower bound."""
    if bmi < UNDERWEIGHT_BELOW:
        return BmiCategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_FROM:
        return BmiCategory.NORMAL
    if bmi < OBESE_FROM:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def calculate_bmr(profile: HealthProfile) -> float:
    """Mifflin-St Jeor basal metabolic rate, or 0.0 with incomplete data."""
    weight, height, age = profile.weight_kg, profile.height_cm, profile.age
    if not weight or not height or not age or min(weight, height, age) <= 0:
        return 0.0
    base = 10 * weight + 6.25 * height - 5 * age
    return base + (5 if profile.gender is Gender.MALE else -161)


def calculate_tdee(bmr: float, activity_level: ActivityLevel | str | None) -> float:
    """Scale BMR by the activity multiplier (sedentary when unknown)."""
    level = ActivityLevel.parse(activity_level)
    if level is None:
        if activity_level:
            _logger.warning(
                "Unknown activity level %r, using sedentary multiplier",
                activity_level,
            )
        return bmr * DEFAULT_ACTIVITY_MULTIPLIER
    return bmr * ACTIVITY_MULTIPLIERS[level]


def calculate_target_calories(
    tdee: float, health_goal: HealthGoal | str | None
) -> float:
    """Apply the goal's calorie adjustment; no floor is applied here."""
    goal = HealthGoal.parse(health_goal)
    if goal is HealthGoal.LOSE_WEIGHT:
        return tdee - CALORIE_ADJUSTMENT
    if goal is HealthGoal.GAIN_WEIGHT:
        return tdee + CALORIE_ADJUSTMENT
    return tdee


def macro_ratios_for(health_goal: HealthGoal | str | None) -> MacroRatios:
    """Return the macro energy split for a goal."""
    goal = HealthGoal.parse(health_goal)
    if goal is None:
        if health_goal:
            _logger.warning(
                "Unknown health goal %r, using maintenance split", health_goal
            )
        return DEFAULT_MACRO_RATIOS
    return MACRO_RATIOS[goal]


def safe_target_calories(target_calories: float) -> float:
    """Substitute the default target for non-positive or non-finite values."""
    if not math.isfinite(target_calories) or target_calories <= 0:
        return DEFAULT_TARGET_CALORIES
    return target_calories


def calculate_macros(
    target_calories: float, health_goal: HealthGoal | str | None
) -> MacroGrams:
    """Split target calories into protein, carb and fat grams."""
    calories = safe_target_calories(target_calories)
    ratios = macro_ratios_for(health_goal)
    return MacroGrams(
        protein_g=calories * ratios.protein / PROTEIN_KCAL_PER_G,
        carbs_g=calories * ratios.carbs / CARBS_KCAL_PER_G,
        fat_g=calories * ratios.fat / FAT_KCAL_PER_G,
    )


def macro_calories(macros: MacroGrams) -> MacroCalories:
    """Convert macro grams back to kcal."""
    return MacroCalories(
        protein_kcal=macros.protein_g * PROTEIN_KCAL_PER_G,
        carbs_kcal=macros.carbs_g * CARBS_KCAL_PER_G,
        fat_kcal=macros.fat_g * FAT_KCAL_PER_G,
    )


def derive_percentages(macros: MacroGrams, target_calories: float) -> MacroPercentages:
    """Share of target calories per macro, rounded; non-finite values become 0."""
    energy = macro_calories(macros)
    return MacroPercentages(
        protein_pct=_percent(energy.protein_kcal, target_calories),
        carbs_pct=_percent(energy.carbs_kcal, target_calories),
        fat_pct=_percent(energy.fat_kcal, target_calories),
    )


def _percent(part: float, total: float) -> int:
    if not total or not math.isfinite(total):
        return 0
    value = part / total * 100
    if not math.isfinite(value):
        return 0
    return round(value)


def derive_nutrition_profile(profile: HealthProfile) -> NutritionProfile:
    """Run the full pipeline for a profile."""
    bmi = calculate_bmi(profile.weight_kg, profile.height_cm) or (profile.bmi or 0.0)
    bmr = calculate_bmr(profile)
    tdee = calculate_tdee(bmr, profile.activity_level)
    target = calculate_target_calories(tdee, profile.health_goal)
    split_target = safe_target_calories(target)
    macros = calculate_macros(split_target, profile.health_goal)
    return NutritionProfile(
        bmi=bmi,
        bmi_category=classify_bmi(bmi),
        bmr=bmr,
        tdee=tdee,
        target_calories=target,
        macros=macros,
        percentages=derive_percentages(macros, split_target),
        macro_calories=macro_calories(macros),
    )


def generate_advice(profile: HealthProfile) -> list[Advice]:
    """Return advice cards for the profile's BMI band and goal."""
    advice: list[Advice] = []
    bmi = calculate_bmi(profile.weight_kg, profile.height_cm) or (profile.bmi or 0.0)
    if bmi > 0:
        category = classify_bmi(bmi)
        if category is BmiCategory.UNDERWEIGHT:
            advice.append(
                Advice(
                    title="Nutrition Focus",
                    content=(
                        "Prioritize nutrient-dense foods to reach a healthy weight."
                    ),
                )
            )
        elif category in {BmiCategory.OVERWEIGHT, BmiCategory.OBESE}:
            advice.append(
                Advice(
                    title="Activity",
                    content="Aim for a caloric deficit and increase daily movement.",
                )
            )
    if profile.health_goal is HealthGoal.BUILD_MUSCLE:
        advice.append(
            Advice(
                title="Protein",
                content="Ensure you consume protein within 30 mins of workouts.",
            )
        )
    return advice
