"""Request and response models for the DietHub REST API."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from diet_hub.domain.nutrition import Advice, NutritionProfile
from diet_hub.domain.profiles import ActivityLevel, Gender, HealthGoal, HealthProfile
from diet_hub.domain.recipes import Recipe


class ApiModel(BaseModel):
    """Base model exchanging camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class HealthProfileRequest(ApiModel):
    """Validated profile submission."""

    user_id: str = Field(min_length=2)
    age: int = Field(ge=1, le=120)
    gender: Gender
    height_cm: float = Field(
        ge=50, le=250, validation_alias=AliasChoices("heightCm", "height", "height_cm")
    )
    weight_kg: float = Field(
        ge=20, le=300, validation_alias=AliasChoices("weightKg", "weight", "weight_kg")
    )
    activity_level: ActivityLevel
    health_goal: HealthGoal
    dietary_restrictions: str | None = None
    allergies: str | None = None

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: object) -> object:
        return _parse_required(Gender, value, "gender")

    @field_validator("activity_level", mode="before")
    @classmethod
    def _parse_activity(cls, value: object) -> object:
        return _parse_required(ActivityLevel, value, "activity level")

    @field_validator("health_goal", mode="before")
    @classmethod
    def _parse_goal(cls, value: object) -> object:
        return _parse_required(HealthGoal, value, "health goal")

    def to_domain(self) -> HealthProfile:
        """Convert the submission into a domain profile."""
        return HealthProfile(
            user_id=self.user_id,
            age=self.age,
            gender=self.gender,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            activity_level=self.activity_level,
            health_goal=self.health_goal,
            dietary_restrictions=self.dietary_restrictions or None,
            allergies=self.allergies or None,
        )


def _parse_required(enum_type: type, value: object, label: str) -> object:
    if isinstance(value, str):
        parsed = enum_type.parse(value)
        if parsed is None:
            raise ValueError(f"Unknown {label}: {value!r}")
        return parsed
    return value


class HealthProfileResponse(ApiModel):
    """Stored profile as returned by the API."""

    user_id: str
    age: int | None = None
    gender: Gender | None = None
    height_cm: float | None = Field(
        default=None, validation_alias=AliasChoices("heightCm", "height", "height_cm")
    )
    weight_kg: float | None = Field(
        default=None, validation_alias=AliasChoices("weightKg", "weight", "weight_kg")
    )
    activity_level: ActivityLevel | None = None
    health_goal: HealthGoal | None = None
    dietary_restrictions: str | None = None
    allergies: str | None = None
    bmi: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: object) -> object:
        return Gender.parse(value) if isinstance(value, str) else value

    @field_validator("activity_level", mode="before")
    @classmethod
    def _parse_activity(cls, value: object) -> object:
        return ActivityLevel.parse(value) if isinstance(value, str) else value

    @field_validator("health_goal", mode="before")
    @classmethod
    def _parse_goal(cls, value: object) -> object:
        return HealthGoal.parse(value) if isinstance(value, str) else value

    @classmethod
    def from_domain(cls, profile: HealthProfile) -> "HealthProfileResponse":
        return cls(
            user_id=profile.user_id,
            age=profile.age,
            gender=profile.gender,
            height_cm=profile.height_cm,
            weight_kg=profile.weight_kg,
            activity_level=profile.activity_level,
            health_goal=profile.health_goal,
            dietary_restrictions=profile.dietary_restrictions,
            allergies=profile.allergies,
            bmi=profile.bmi,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

    def to_domain(self) -> HealthProfile:
        return HealthProfile(
            user_id=self.user_id,
            age=self.age,
            gender=self.gender,
            height_cm=self.height_cm,
            weight_kg=self.weight_kg,
            activity_level=self.activity_level,
            health_goal=self.health_goal,
            dietary_restrictions=self.dietary_restrictions,
            allergies=self.allergies,
            bmi=self.bmi,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class MacroGramsModel(ApiModel):
    protein_g: float
    carbs_g: float
    fat_g: float


class MacroPercentagesModel(ApiModel):
    protein_pct: int
    carbs_pct: int
    fat_pct: int


class MacroCaloriesModel(ApiModel):
    protein_kcal: float
    carbs_kcal: float
    fat_kcal: float


class AdviceModel(ApiModel):
    title: str
    content: str


class NutritionResponse(ApiModel):
    """Derived nutrition plan, rounded for display."""

    bmi: float
    bmi_category: str
    bmr: float
    tdee: float
    target_calories: float
    macros: MacroGramsModel
    percentages: MacroPercentagesModel
    macro_calories: MacroCaloriesModel
    advice: list[AdviceModel] = []

    @classmethod
    def from_domain(
        cls, nutrition: NutritionProfile, advice: list[Advice]
    ) -> "NutritionResponse":
        return cls(
            bmi=round(nutrition.bmi, 1),
            bmi_category=nutrition.bmi_category.value,
            bmr=round(nutrition.bmr, 1),
            tdee=round(nutrition.tdee, 1),
            target_calories=round(nutrition.target_calories, 1),
            macros=MacroGramsModel(
                protein_g=round(nutrition.macros.protein_g, 1),
                carbs_g=round(nutrition.macros.carbs_g, 1),
                fat_g=round(nutrition.macros.fat_g, 1),
            ),
            percentages=MacroPercentagesModel(
                protein_pct=nutrition.percentages.protein_pct,
                carbs_pct=nutrition.percentages.carbs_pct,
                fat_pct=nutrition.percentages.fat_pct,
            ),
            macro_calories=MacroCaloriesModel(
                protein_kcal=round(nutrition.macro_calories.protein_kcal, 1),
                carbs_kcal=round(nutrition.macro_calories.carbs_kcal, 1),
                fat_kcal=round(nutrition.macro_calories.fat_kcal, 1),
            ),
            advice=[
                AdviceModel(title=item.title, content=item.content) for item in advice
            ],
        )


class RecipeResponse(ApiModel):
    """Recipe as returned by the API."""

    id: int
    name: str
    description: str
    calories: int
    protein: float
    carbs: float
    fat: float
    meal_type: str
    category: str
    tags: str
    ingredients: str
    instructions: str
    prep_time_minutes: int | None = None
    difficulty: str | None = None
    image_url: str | None = None

    @classmethod
    def from_domain(cls, recipe: Recipe) -> "RecipeResponse":
        return cls(
            id=recipe.id,
            name=recipe.name,
            description=recipe.description,
            calories=recipe.calories,
            protein=recipe.protein,
            carbs=recipe.carbs,
            fat=recipe.fat,
            meal_type=recipe.meal_type.value,
            category=recipe.category,
            tags=recipe.tags,
            ingredients=recipe.ingredients,
            instructions=recipe.instructions,
            prep_time_minutes=recipe.prep_time_minutes,
            difficulty=recipe.difficulty,
            image_url=recipe.image_url,
        )
