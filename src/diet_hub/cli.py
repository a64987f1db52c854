"""
Command-line client for DietHub.

Usage:
    diet-hub profile <user-id> [--api-url URL] [--local-store PATH]
    diet-hub recipes [--meal-type TYPE] [--category NAME] [--calories RANGE]
                     [--search TERM] [--sort ORDER]
"""

from __future__ import annotations

import argparse
from pathlib import Path

from diet_hub.adapters.json_profile_store import JsonFileProfileStore
from diet_hub.adapters.profile_api_client import HttpxHealthProfileClient
from diet_hub.adapters.static_recipe_source import StaticRecipeSource
from diet_hub.app_logging import configure_logging
from diet_hub.config import ClientSettings
from diet_hub.domain.recipes import CaloriesRange, FilterCriteria, RecipeSortOrder
from diet_hub.services.profiles import ProfileService
from diet_hub.services.recipes import RecipeCatalogService


def cmd_profile(args: argparse.Namespace) -> int:
    """Show a profile and its nutrition plan."""
    settings = ClientSettings()
    remote = HttpxHealthProfileClient.create(
        args.api_url or settings.api_base_url, admin_token=settings.admin_token
    )
    local_path = Path(args.local_store) if args.local_store else None
    service = ProfileService(
        remote=remote,
        local=JsonFileProfileStore(local_path or settings.local_profile_path),
    )
    try:
        result = service.nutrition_for(args.user_id)
    finally:
        remote.close()

    if result is None:
        print(f"No profile found for {args.user_id}")
        return 1

    profile, nutrition = result.profile, result.nutrition
    print(f"Profile: {profile.user_id}")
    print(f"  Age: {profile.age or '-'}")
    print(f"  Height: {profile.height_cm or '-'} cm")
    print(f"  Weight: {profile.weight_kg or '-'} kg")
    print(f"BMI: {nutrition.bmi:.1f} ({nutrition.bmi_category.value})")
    print(f"BMR: {round(nutrition.bmr)} kcal")
    print(f"TDEE: {round(nutrition.tdee)} kcal")
    print(f"Target: {round(nutrition.target_calories)} kcal")
    macros, pct = nutrition.macros, nutrition.percentages
    print(f"  Protein: {round(macros.protein_g)}g ({pct.protein_pct}%)")
    print(f"  Carbs: {round(macros.carbs_g)}g ({pct.carbs_pct}%)")
    print(f"  Fat: {round(macros.fat_g)}g ({pct.fat_pct}%)")
    for advice in result.advice:
        print(f"* {advice.title}: {advice.content}")
    return 0


def cmd_recipes(args: argparse.Namespace) -> int:
    """List catalog recipes matching the filters."""
    service = RecipeCatalogService(StaticRecipeSource())
    criteria = FilterCriteria(
        meal_type=args.meal_type,
        category=args.category,
        calories_range=args.calories,
        search_term=args.search,
    )
    recipes = service.filter(criteria, args.sort)
    print(f"Found {len(recipes)} recipes")
    for recipe in recipes:
        print(
            f"{recipe.id:>3}  {recipe.name}  "
            f"{recipe.calories} kcal  {recipe.protein:g}g protein  "
            f"[{recipe.meal_type.value}]"
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diet-hub", description="DietHub nutrition and recipe client"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    profile_parser = subparsers.add_parser("profile", help="Show a nutrition plan")
    profile_parser.add_argument("user_id", help="Profile user id")
    profile_parser.add_argument("--api-url", help="DietHub API base URL")
    profile_parser.add_argument("--local-store", help="Local profile JSON file")
    profile_parser.set_defaults(func=cmd_profile)

    recipes_parser = subparsers.add_parser("recipes", help="Browse recipes")
    recipes_parser.add_argument("--meal-type", help="breakfast, lunch, dinner, snack")
    recipes_parser.add_argument("--category", help="Category or tag")
    recipes_parser.add_argument(
        "--calories", choices=[band.value for band in CaloriesRange]
    )
    recipes_parser.add_argument("--search", help="Keyword")
    recipes_parser.add_argument(
        "--sort",
        choices=[order.value for order in RecipeSortOrder],
        default=RecipeSortOrder.RELEVANCE.value,
    )
    recipes_parser.set_defaults(func=cmd_recipes)
    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
