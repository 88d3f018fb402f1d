"""
Grandma Recipes API: Recipe Schemas
====================================

What:  Nested recipe entity produced by the aggregation engine, the list /
       search / detail envelopes around it, and the recipe submission body.

Nested shape (as JSON):
    {
        "idRecipe": 1,
        "nameRecipe": "Tortilla de patatas",
        "descRecipe": "...",
        "cookingTime": 45,
        "ingredients": [
            {"idIngredient": 7, "nameIngredient": "egg", "quantity": 6, "unit": "u"}
        ],
        "directions": "...",
        "background": "...",
        "images": ["https://..."],
        "grandma": {
            "idGrandma": 3,
            "nameGrandma": {"name": "Carmen", "lastname": "Ruiz"},
            "location": {"city": "Sevilla", "province": "Sevilla"},
            "photo": null
        }
    }
"""

from typing import List, Optional

from pydantic import Field

from grandma_recipes.schemas.common import CamelModel, ListInfo


# ══════════════════════════════════════════════════════════════════════════
# Nested entity
# ══════════════════════════════════════════════════════════════════════════


class GrandmaName(CamelModel):
    name: Optional[str] = None
    lastname: Optional[str] = None


class GrandmaLocation(CamelModel):
    city: Optional[str] = None
    province: Optional[str] = None


class RecipeGrandma(CamelModel):
    id_grandma: int
    name_grandma: GrandmaName
    location: GrandmaLocation
    photo: Optional[str] = None


class RecipeIngredientItem(CamelModel):
    id_ingredient: int
    name_ingredient: str
    quantity: Optional[float] = None
    unit: Optional[str] = None


class RecipeResponse(CamelModel):
    id_recipe: int
    name_recipe: str
    desc_recipe: str
    cooking_time: int
    ingredients: List[RecipeIngredientItem] = Field(default_factory=list)
    directions: str
    background: str
    images: List[str] = Field(default_factory=list)
    grandma: RecipeGrandma


class RecipeListResponse(CamelModel):
    """GET /recipes"""
    success: bool = True
    info: ListInfo
    results: List[RecipeResponse]


class RecipeSearchResponse(CamelModel):
    """GET /recipes/{nameRecipe}"""
    success: bool = True
    count: int
    data: List[RecipeResponse]


class RecipeDetailResponse(CamelModel):
    """GET /recipe/{idRecipe}"""
    success: bool = True
    data: RecipeResponse


# ══════════════════════════════════════════════════════════════════════════
# Submission body (POST /recipes/new)
# ══════════════════════════════════════════════════════════════════════════


class IngredientIn(CamelModel):
    name_ingredient: str
    quantity: Optional[float] = None
    unit: Optional[str] = None


class RecipeGrandmaIn(CamelModel):
    name_grandma: GrandmaName = Field(default_factory=GrandmaName)
    location: GrandmaLocation = Field(default_factory=GrandmaLocation)
    photo: Optional[str] = None


class RecipeCreate(CamelModel):
    """
    Recipe submission.

    Every top-level field is optional at the schema level; presence is
    checked by RecipeService so that a missing field is reported as a single
    400 "Missing required fields" rather than a per-field 422.
    """
    name_recipe: Optional[str] = None
    desc_recipe: Optional[str] = None
    cooking_time: Optional[int] = None
    ingredients: Optional[List[IngredientIn]] = None
    directions: Optional[str] = None
    background: Optional[str] = None
    images: Optional[List[str]] = None
    grandma: Optional[RecipeGrandmaIn] = None


class RecipeCreatedResponse(CamelModel):
    success: bool = True
    message: str = "Recipe added successfully"
    id_recipe: int
