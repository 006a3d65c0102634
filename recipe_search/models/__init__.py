"""Data schemas and static vocabularies."""
from .schemas import (
    DigestSchema,
    HitListSchema,
    HitSchema,
    IngredientSchema,
    NutrientSchema,
    RecipeLinkSchema,
    RecipeResponseSchema,
    RecipeSchema,
    RecipeSummarySchema,
    recipe_id_from_uri,
)
from .vocabulary import (
    CuisineType,
    DietLabel,
    DishType,
    HealthLabel,
    ImageSize,
    MealType,
)

__all__ = [
    "DigestSchema",
    "HitListSchema",
    "HitSchema",
    "IngredientSchema",
    "NutrientSchema",
    "RecipeLinkSchema",
    "RecipeResponseSchema",
    "RecipeSchema",
    "RecipeSummarySchema",
    "recipe_id_from_uri",
    "CuisineType",
    "DietLabel",
    "DishType",
    "HealthLabel",
    "ImageSize",
    "MealType",
]
