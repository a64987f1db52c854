"""Seeded in-memory recipe catalog."""

from dataclasses import dataclass, field

from diet_hub.domain.recipes import MealType, Recipe
from diet_hub.services.recipes import RecipeSource

_IMAGE = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=800&q=80"


def default_recipes() -> list[Recipe]:
    """Return the built-in catalog in display order."""
    return [
        Recipe(
            id=1,
            name="Avocado & Poached Egg Toast",
            description=(
                "Creamy avocado on toasted sourdough topped with a perfectly "
                "poached egg."
            ),
            calories=320,
            protein=14,
            carbs=28,
            fat=18,
            meal_type=MealType.BREAKFAST,
            category="Balanced",
            tags="Vegetarian, High Fiber",
            ingredients=(
                "1 slice Sourdough Bread, 1/2 Avocado, 1 Large Egg, Chili Flakes"
            ),
            instructions=(
                "1. Toast sourdough. 2. Mash avocado. 3. Poach egg. "
                "4. Assemble and season."
            ),
            prep_time_minutes=10,
            difficulty="Easy",
            image_url=_IMAGE.format("photo-1613769049987-b31b641f25b1"),
        ),
        Recipe(
            id=2,
            name="Grilled Lemon Herb Chicken",
            description=(
                "Juicy grilled chicken marinated in zesty lemon and fresh herbs."
            ),
            calories=450,
            protein=52,
            carbs=5,
            fat=20,
            meal_type=MealType.LUNCH,
            category="Main Course",
            tags="High Protein, Low Carb",
            ingredients="200g Chicken Breast, Lemon, Rosemary, Garlic, Olive Oil",
            instructions=(
                "1. Marinate chicken. 2. Grill 6-7 mins per side. "
                "3. Serve with greens."
            ),
            prep_time_minutes=45,
            difficulty="Medium",
            image_url=_IMAGE.format("photo-1604908176997-125f25cc6f3d"),
        ),
        Recipe(
            id=3,
            name="Quinoa & Black Bean Power Bowl",
            description="A nutrient-packed vegan bowl perfect for energy.",
            calories=380,
            protein=15,
            carbs=55,
            fat=12,
            meal_type=MealType.LUNCH,
            category="Bowl",
            tags="Vegan, High Fiber",
            ingredients="Quinoa, Black Beans, Avocado, Corn, Tomatoes",
            instructions=(
                "1. Assemble all ingredients in a bowl. "
                "2. Dress with lime vinaigrette."
            ),
            prep_time_minutes=15,
            difficulty="Easy",
            image_url=_IMAGE.format("photo-1504674900247-0877df9cc836"),
        ),
        Recipe(
            id=4,
            name="Pan-Seared Salmon with Asparagus",
            description=(
                "Crispy skin salmon served with tender butter-garlic asparagus."
            ),
            calories=480,
            protein=40,
            carbs=8,
            fat=32,
            meal_type=MealType.DINNER,
            category="Main Course",
            tags="High Protein, Omega-3",
            ingredients="Salmon Fillet, Asparagus, Butter, Lemon, Garlic",
            instructions=(
                "1. Sear salmon skin-side down. 2. Flip and finish. "
                "3. Sauté asparagus in pan juices."
            ),
            prep_time_minutes=20,
            difficulty="Medium",
            image_url=_IMAGE.format("photo-1485921325833-c519f76c4927"),
        ),
        Recipe(
            id=5,
            name="Greek Yogurt Berry Parfait",
            description="Layers of creamy yogurt, fresh berries, and crunchy granola.",
            calories=250,
            protein=20,
            carbs=30,
            fat=6,
            meal_type=MealType.BREAKFAST,
            category="Bowl",
            tags="High Protein, Antioxidants",
            ingredients="Greek Yogurt, Mixed Berries, Honey, Granola",
            instructions=(
                "1. Layer yogurt, berries, and granola in a glass. 2. Drizzle honey."
            ),
            prep_time_minutes=5,
            difficulty="Easy",
            image_url=_IMAGE.format("photo-1570145820259-b5b80c5c8bd6"),
        ),
        Recipe(
            id=6,
            name="Hearty Lentil Soup",
            description="A comforting and filling plant-based soup.",
            calories=220,
            protein=12,
            carbs=35,
            fat=4,
            meal_type=MealType.DINNER,
            category="Soup",
            tags="Vegan, Warm, Low Calorie",
            ingredients="Lentils, Onion, Carrots, Celery, Vegetable Broth",
            instructions=(
                "1. Sauté veggies. 2. Add lentils and broth. 3. Simmer 25 mins."
            ),
            prep_time_minutes=35,
            difficulty="Easy",
            image_url=_IMAGE.format("photo-1547592180-85f173990554"),
        ),
        Recipe(
            id=7,
            name="Turkey & Broccoli Stir-Fry",
            description="Quick lean protein stir-fry with crunchy veggies.",
            calories=340,
            protein=38,
            carbs=15,
            fat=12,
            meal_type=MealType.DINNER,
            category="Main Course",
            tags="High Protein, Low Carb",
            ingredients="Turkey Breast, Broccoli, Soy Sauce, Ginger, Sesame Oil",
            instructions=(
                "1. Stir-fry turkey strips. 2. Add broccoli. "
                "3. Add sauce and simmer."
            ),
            prep_time_minutes=20,
            difficulty="Medium",
            image_url=_IMAGE.format("photo-1512058564366-18510be2db19"),
        ),
        Recipe(
            id=8,
            name="Chia Seed Pudding",
            description="Creamy nutrient-dense pudding.",
            calories=180,
            protein=6,
            carbs=15,
            fat=10,
            meal_type=MealType.SNACK,
            category="Bowl",
            tags="Vegan, Omega-3",
            ingredients="Chia Seeds, Almond Milk, Vanilla, Maple Syrup",
            instructions="1. Mix all ingredients. 2. Refrigerate overnight.",
            prep_time_minutes=5,
            difficulty="Easy",
            image_url=_IMAGE.format("photo-1578985545062-69928b1d9587"),
        ),
        Recipe(
            id=9,
            name="Shrimp Tacos with Slaw",
            description="Spicy shrimp served in soft tortillas with crunchy slaw.",
            calories=310,
            protein=24,
            carbs=28,
            fat=10,
            meal_type=MealType.DINNER,
            category="Main Course",
            tags="Pescatarian, Spicy",
            ingredients="Shrimp, Corn Tortillas, Cabbage Slaw, Lime",
            instructions=(
                "1. Sauté shrimp. 2. Warm tortillas. 3. Assemble with slaw."
            ),
            prep_time_minutes=20,
            difficulty="Medium",
            image_url=_IMAGE.format("photo-1512838243147-844c040702aa"),
        ),
        Recipe(
            id=10,
            name="Creamy Mushroom Risotto",
            description="Rich and creamy Italian rice dish.",
            calories=420,
            protein=12,
            carbs=60,
            fat=14,
            meal_type=MealType.DINNER,
            category="Main Course",
            tags="Vegetarian, Comfort",
            ingredients="Arborio Rice, Mushrooms, Broth, Parmesan",
            instructions=(
                "1. Sauté mushrooms. 2. Toast rice and add broth slowly. "
                "3. Stir in cheese."
            ),
            prep_time_minutes=40,
            difficulty="Hard",
            image_url=_IMAGE.format("photo-1476124369491-e7addf5db371"),
        ),
        Recipe(
            id=11,
            name="Classic Cobb Salad",
            description="A loaded salad that eats like a meal.",
            calories=490,
            protein=45,
            carbs=10,
            fat=30,
            meal_type=MealType.LUNCH,
            category="Salad",
            tags="High Protein, Keto",
            ingredients="Chicken, Bacon, Egg, Avocado, Blue Cheese, Lettuce",
            instructions="1. Chop ingredients. 2. Arrange in rows. 3. Dress.",
            prep_time_minutes=20,
            difficulty="Easy",
            image_url=_IMAGE.format("photo-1540420773420-3366772f4999"),
        ),
        Recipe(
            id=12,
            name="Green Detox Smoothie Bowl",
            description="Refreshing green smoothie topped with fruit.",
            calories=260,
            protein=8,
            carbs=45,
            fat=6,
            meal_type=MealType.BREAKFAST,
            category="Bowl",
            tags="Vegan, Detox",
            ingredients="Spinach, Banana, Pineapple, Coconut Water",
            instructions=(
                "1. Blend ingredients. 2. Pour into bowl. 3. Top with fruit."
            ),
            prep_time_minutes=10,
            difficulty="Easy",
            image_url=_IMAGE.format("photo-1610970881699-44a5587cabec"),
        ),
        Recipe(
            id=13,
            name="Zucchini Noodles with Pesto",
            description="Light and fresh alternative to pasta.",
            calories=190,
            protein=6,
            carbs=12,
            fat=14,
            meal_type=MealType.DINNER,
            category="Main Course",
            tags="Low Carb, Vegetarian",
            ingredients="Zucchinis, Basil Pesto, Cherry Tomatoes, Pine Nuts",
            instructions=(
                "1. Spiralize zucchini. 2. Sauté briefly. 3. Toss with pesto."
            ),
            prep_time_minutes=15,
            difficulty="Easy",
            image_url=_IMAGE.format("photo-1555939594-58d7cb561ad1"),
        ),
        Recipe(
            id=14,
            name="Sweet Potato & Black Bean Tacos",
            description="Flavorful plant-based tacos.",
            calories=340,
            protein=10,
            carbs=58,
            fat=8,
            meal_type=MealType.LUNCH,
            category="Main Course",
            tags="Vegan, Fiber Rich",
            ingredients="Sweet Potato, Black Beans, Corn Tortillas, Avocado",
            instructions=(
                "1. Roast sweet potatoes. 2. Fill tortillas with beans and potato. "
                "3. Top with salsa."
            ),
            prep_time_minutes=30,
            difficulty="Medium",
            image_url=_IMAGE.format("photo-1624300629298-e9de39c13be5"),
        ),
        Recipe(
            id=15,
            name="Tuna Poke Bowl",
            description="Restaurant-quality raw fish bowl at home.",
            calories=440,
            protein=35,
            carbs=45,
            fat=12,
            meal_type=MealType.DINNER,
            category="Bowl",
            tags="High Protein, Seafood",
            ingredients="Sushi Tuna, Rice, Edamame, Cucumber, Seaweed",
            instructions="1. Cube tuna. 2. Serve over rice. 3. Arrange toppings.",
            prep_time_minutes=20,
            difficulty="Medium",
            image_url=_IMAGE.format("photo-1546069901-ba9599a7e63c"),
        ),
    ]


@dataclass
class StaticRecipeSource(RecipeSource):
    """Recipe source serving a fixed, in-memory catalog."""

    recipes: list[Recipe] = field(default_factory=default_recipes)

    def get_all(self) -> list[Recipe]:
        """Return a copy of the catalog."""
        return list(self.recipes)
