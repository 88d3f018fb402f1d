"""ORM models; importing this package registers every table on Base.metadata."""

from grandma_recipes.models.grandma import Grandma
from grandma_recipes.models.recipe import Image, Ingredient, Recipe, RecipeIngredient
from grandma_recipes.models.user import User, UserGrandma

__all__ = [
    "Grandma",
    "Image",
    "Ingredient",
    "Recipe",
    "RecipeIngredient",
    "User",
    "UserGrandma",
]
