"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from diet_hub.adapters.json_profile_store import JsonFileProfileStore
from diet_hub.adapters.static_recipe_source import StaticRecipeSource
from diet_hub.adapters.supabase_profile_repository import (
    SupabaseHealthProfileRepository,
)
from diet_hub.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from diet_hub.config import Settings, parse_recipe_source
from diet_hub.services.profiles import ProfileService
from diet_hub.services.recipes import RecipeCatalogService, RecipeSource


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    recipe_service: RecipeCatalogService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_service = ProfileService(
        remote=SupabaseHealthProfileRepository(supabase_client),
        local=JsonFileProfileStore(resolved_settings.local_profile_path),
    )
    recipe_source: RecipeSource
    if parse_recipe_source(resolved_settings.recipe_source) == "supabase":
        recipe_source = SupabaseRecipeRepository(supabase_client)
    else:
        recipe_source = StaticRecipeSource()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        recipe_service=RecipeCatalogService(recipe_source),
        close_resources=close_resources,
    )
