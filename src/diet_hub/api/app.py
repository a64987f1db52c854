"""FastAPI application factory."""

import logging
import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from diet_hub.api.admin import router as admin_router
from diet_hub.api.models import (
    HealthProfileRequest,
    HealthProfileResponse,
    NutritionResponse,
    RecipeResponse,
)
from diet_hub.app_logging import configure_logging
from diet_hub.containers import AppContainer
from diet_hub.domain.recipes import FilterCriteria, Recipe
from diet_hub.services.nutrition import derive_nutrition_profile, generate_advice
from diet_hub.services.recipes import RecipeSourceError

API_VERSION = "1.0.0"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("DietHub API starting (%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="DietHub API", version=API_VERSION, lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(admin_router)

    @app.exception_handler(RecipeSourceError)
    async def recipe_source_unavailable(
        request: Request, exc: RecipeSourceError
    ) -> JSONResponse:
        logger.error("Recipe catalog unavailable: %s", exc, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Recipe catalog unavailable"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/health-check")
    async def health_check() -> dict[str, object]:
        """Service status with version information."""
        return {
            "status": "UP",
            "message": "DietHub API is running",
            "version": API_VERSION,
            "timestamp": int(time.time() * 1000),
        }

    @app.get("/ping", response_class=PlainTextResponse)
    async def ping() -> str:
        """Connectivity check."""
        return "pong"

    @app.post(
        "/api/health-profiles",
        status_code=status.HTTP_201_CREATED,
        response_model=HealthProfileResponse,
    )
    async def save_profile(
        payload: HealthProfileRequest, request: Request
    ) -> HealthProfileResponse:
        """Create or update a health profile."""
        state_container: AppContainer = request.app.state.container
        saved = state_container.profile_service.save_profile(payload.to_domain())
        logger.info("Saved health profile for %s", saved.user_id)
        return HealthProfileResponse.from_domain(saved)

    @app.get(
        "/api/health-profiles/user/{user_id}", response_model=HealthProfileResponse
    )
    async def get_profile(user_id: str, request: Request) -> HealthProfileResponse:
        """Return the profile for a user."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.get_profile(user_id)
        if profile is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return HealthProfileResponse.from_domain(profile)

    @app.get(
        "/api/health-profiles/user/{user_id}/nutrition",
        response_model=NutritionResponse,
    )
    async def get_nutrition(user_id: str, request: Request) -> NutritionResponse:
        """Return the derived nutrition plan for a user's profile."""
        state_container: AppContainer = request.app.state.container
        result = state_container.profile_service.nutrition_for(user_id)
        if result is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return NutritionResponse.from_domain(result.nutrition, result.advice)

    @app.post("/api/nutrition/calculate", response_model=NutritionResponse)
    async def calculate_nutrition(payload: HealthProfileRequest) -> NutritionResponse:
        """Derive a nutrition plan without saving the profile."""
        profile = payload.to_domain()
        return NutritionResponse.from_domain(
            derive_nutrition_profile(profile), generate_advice(profile)
        )

    @app.get("/api/recipes", response_model=list[RecipeResponse])
    async def list_recipes(  # noqa: PLR0913
        request: Request,
        meal_type: str | None = Query(default=None, alias="mealType"),
        category: str | None = None,
        calories: str | None = None,
        search: str | None = None,
        sort: str | None = None,
    ) -> list[RecipeResponse]:
        """Return recipes matching the selected filters."""
        state_container: AppContainer = request.app.state.container
        criteria = FilterCriteria(
            meal_type=meal_type,
            category=category,
            calories_range=calories,
            search_term=search,
        )
        return _recipes(state_container.recipe_service.filter(criteria, sort))

    @app.get("/api/recipes/search", response_model=list[RecipeResponse])
    async def search_recipes(
        request: Request,
        keyword: str | None = None,
        name: str | None = None,
    ) -> list[RecipeResponse]:
        """Search recipes by keyword."""
        state_container: AppContainer = request.app.state.container
        return _recipes(state_container.recipe_service.search(keyword or name))

    @app.get("/api/recipes/category/{category}", response_model=list[RecipeResponse])
    async def recipes_by_category(
        category: str, request: Request
    ) -> list[RecipeResponse]:
        """Return recipes in a category."""
        state_container: AppContainer = request.app.state.container
        return _recipes(state_container.recipe_service.by_category(category))

    @app.get("/api/recipes/calories", response_model=list[RecipeResponse])
    async def recipes_by_calories(
        request: Request,
        min_calories: int = Query(alias="min", ge=0),
        max_calories: int = Query(alias="max", ge=0),
    ) -> list[RecipeResponse]:
        """Return recipes with calories in an inclusive range."""
        state_container: AppContainer = request.app.state.container
        return _recipes(
            state_container.recipe_service.by_calories(min_calories, max_calories)
        )

    @app.get("/api/recipes/high-protein", response_model=list[RecipeResponse])
    async def high_protein_recipes(
        request: Request,
        min_protein: float = Query(default=20, alias="min", ge=0),
    ) -> list[RecipeResponse]:
        """Return recipes with at least the given grams of protein."""
        state_container: AppContainer = request.app.state.container
        return _recipes(state_container.recipe_service.high_protein(min_protein))

    @app.get("/api/recipes/{recipe_id}", response_model=RecipeResponse)
    async def get_recipe(recipe_id: int, request: Request) -> RecipeResponse:
        """Return a single recipe."""
        state_container: AppContainer = request.app.state.container
        recipe = state_container.recipe_service.get_recipe(recipe_id)
        if recipe is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return RecipeResponse.from_domain(recipe)

    return app


def _recipes(recipes: list[Recipe]) -> list[RecipeResponse]:
    return [RecipeResponse.from_domain(recipe) for recipe in recipes]
