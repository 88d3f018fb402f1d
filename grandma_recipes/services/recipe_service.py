"""
Grandma Recipes API: Recipe Service
====================================

What:  Recipe reads (list, name search, id lookup) and the recipe write
       pipeline.
Who:   Called by routes/recipes.py.

Read path:
    one SELECT over grandmas ⋈ recipes ⋈ recipes_have_ingredients
    ⋈ ingredients ⋈ images (all INNER), then aggregate_recipes().
    A recipe without at least one ingredient and one image produces no row
    and is therefore invisible to every read.

Write path (POST /recipes/new), inside the request's transaction:
    1. INSERT grandmas                     → grandma.id
    2. INSERT recipes (grandma, caller)    → recipe.id
    3. per ingredient, in order:
         INSERT ingredients                → ingredient.id
         INSERT recipes_have_ingredients
    4. per image, in order: INSERT images
    Each step flushes so the next one can reference generated ids. Any
    failure raises StorageError and get_db_session rolls back all steps.
"""

import logging
from typing import Any, List

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from grandma_recipes.database import is_storable_id
from grandma_recipes.exceptions import NotFoundError, StorageError, ValidationError
from grandma_recipes.models import Grandma, Image, Ingredient, Recipe, RecipeIngredient
from grandma_recipes.schemas.common import ListInfo
from grandma_recipes.schemas.recipe import (
    IngredientIn,
    RecipeCreate,
    RecipeCreatedResponse,
    RecipeDetailResponse,
    RecipeListResponse,
    RecipeResponse,
    RecipeSearchResponse,
)
from grandma_recipes.services.aggregation import aggregate_recipes

logger = logging.getLogger(__name__)

# Submission fields that must be present, as (attribute, wire name)
REQUIRED_RECIPE_FIELDS = (
    ("name_recipe", "nameRecipe"),
    ("desc_recipe", "descRecipe"),
    ("cooking_time", "cookingTime"),
    ("ingredients", "ingredients"),
    ("directions", "directions"),
    ("background", "background"),
    ("images", "images"),
    ("grandma", "grandma"),
)


def is_missing(value: Any) -> bool:
    """
    Presence predicate for recipe submissions.

    Missing means absent/None, False, an empty string or numeric zero.
    Collections are present even when empty.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


class RecipeService:
    """Business logic for recipe reads and recipe submission."""

    # ── Reads ─────────────────────────────────────────────────────────────

    @staticmethod
    def _joined_rows_query() -> Select:
        """
        The five-way INNER JOIN, labelled with the keys aggregation reads.

        Ordered by recipe, then junction, then image, so recipes come out by
        ascending id and ingredients in submission order.
        """
        return (
            select(
                Recipe.id.label("id_recipe"),
                Recipe.name.label("name_recipe"),
                Recipe.description.label("desc_recipe"),
                Recipe.cooking_time.label("cooking_time"),
                Recipe.directions.label("directions"),
                Recipe.background.label("background"),
                Ingredient.id.label("id_ingredient"),
                Ingredient.name.label("name_ingredient"),
                RecipeIngredient.quantity.label("quantity"),
                RecipeIngredient.unit.label("unit"),
                Image.image.label("image"),
                Grandma.id.label("id_grandma"),
                Grandma.name.label("grandma_name"),
                Grandma.lastname.label("grandma_lastname"),
                Grandma.city.label("grandma_city"),
                Grandma.province.label("grandma_province"),
                Grandma.photo.label("grandma_photo"),
            )
            .select_from(Grandma)
            .join(Recipe, Recipe.grandma_id == Grandma.id)
            .join(RecipeIngredient, RecipeIngredient.recipe_id == Recipe.id)
            .join(Ingredient, Ingredient.id == RecipeIngredient.ingredient_id)
            .join(Image, Image.recipe_id == Recipe.id)
            .order_by(Recipe.id, RecipeIngredient.id, Image.id)
        )

    async def _fetch_recipes(self, db: AsyncSession, query: Select) -> List[RecipeResponse]:
        try:
            result = await db.execute(query)
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            logger.error("Database error reading recipes: %s", str(e), exc_info=True)
            raise StorageError(
                message="Could not retrieve recipes. Please try again.",
                context={"error_type": type(e).__name__},
            )
        recipes = aggregate_recipes(rows)
        logger.debug("Aggregated %d join rows into %d recipes", len(rows), len(recipes))
        return recipes

    async def list_recipes(self, db: AsyncSession) -> RecipeListResponse:
        recipes = await self._fetch_recipes(db, self._joined_rows_query())
        if not recipes:
            raise NotFoundError(message="We couldn't find any recipe", resource="recipe")
        return RecipeListResponse(info=ListInfo(count=len(recipes)), results=recipes)

    async def search_recipes(self, db: AsyncSession, name: str) -> RecipeSearchResponse:
        """Case-insensitive "name contains" search; LIKE wildcards in `name` are literal."""
        query = self._joined_rows_query().where(
            Recipe.name.icontains(name, autoescape=True)
        )
        recipes = await self._fetch_recipes(db, query)
        if not recipes:
            raise NotFoundError(
                message="We couldn't find any recipe by that name",
                resource="recipe",
                context={"name": name},
            )
        return RecipeSearchResponse(count=len(recipes), data=recipes)

    async def get_recipe(self, db: AsyncSession, recipe_id: int) -> RecipeDetailResponse:
        recipes = []
        if is_storable_id(recipe_id):
            query = self._joined_rows_query().where(Recipe.id == recipe_id)
            recipes = await self._fetch_recipes(db, query)
        if not recipes:
            raise NotFoundError(
                message="We couldn't find any recipe by that id",
                resource="recipe",
                resource_id=recipe_id,
            )
        return RecipeDetailResponse(data=recipes[0])

    # ── Write pipeline ────────────────────────────────────────────────────

    def validate_submission(self, payload: RecipeCreate) -> None:
        """Raises ValidationError listing every missing required field."""
        missing = [
            wire_name
            for attribute, wire_name in REQUIRED_RECIPE_FIELDS
            if is_missing(getattr(payload, attribute))
        ]
        if missing:
            raise ValidationError(
                message="Missing required fields",
                context={"fields": missing},
            )

    async def create_recipe(
        self,
        db: AsyncSession,
        payload: RecipeCreate,
        user_id: int,
    ) -> RecipeCreatedResponse:
        """
        Runs the write pipeline for one submission.

        Args:
            db: Request-scoped session; committed or rolled back by get_db_session
            payload: Submission body
            user_id: Verified caller identity from the authorization gate

        Raises:
            ValidationError: A required field is missing
            StorageError: Any insert failed (nothing is persisted)
        """
        self.validate_submission(payload)

        try:
            grandma = await self._add_grandma(db, payload)
            recipe = await self._add_recipe(db, payload, grandma.id, user_id)
            await self._add_ingredients(db, recipe.id, payload.ingredients)
            await self._add_images(db, recipe.id, payload.images)
        except SQLAlchemyError as e:
            logger.error("Recipe submission failed for user %d: %s", user_id, str(e), exc_info=True)
            raise StorageError(
                message="Failed to add recipe",
                context={"error_type": type(e).__name__},
            )

        logger.info(
            "Recipe %d created by user %d (grandma=%d, ingredients=%d, images=%d)",
            recipe.id,
            user_id,
            grandma.id,
            len(payload.ingredients),
            len(payload.images),
        )
        return RecipeCreatedResponse(id_recipe=recipe.id)

    async def _add_grandma(self, db: AsyncSession, payload: RecipeCreate) -> Grandma:
        embedded = payload.grandma
        grandma = Grandma(
            name=embedded.name_grandma.name,
            lastname=embedded.name_grandma.lastname,
            city=embedded.location.city,
            province=embedded.location.province,
            photo=embedded.photo,
        )
        db.add(grandma)
        await db.flush()
        return grandma

    async def _add_recipe(
        self,
        db: AsyncSession,
        payload: RecipeCreate,
        grandma_id: int,
        user_id: int,
    ) -> Recipe:
        recipe = Recipe(
            name=payload.name_recipe,
            description=payload.desc_recipe,
            cooking_time=payload.cooking_time,
            directions=payload.directions,
            background=payload.background,
            grandma_id=grandma_id,
            user_id=user_id,
        )
        db.add(recipe)
        await db.flush()
        return recipe

    async def _add_ingredients(
        self,
        db: AsyncSession,
        recipe_id: int,
        ingredients: List[IngredientIn],
    ) -> None:
        # A new ingredients row per entry, never reused across recipes
        for item in ingredients:
            ingredient = Ingredient(name=item.name_ingredient)
            db.add(ingredient)
            await db.flush()
            db.add(
                RecipeIngredient(
                    recipe_id=recipe_id,
                    ingredient_id=ingredient.id,
                    quantity=item.quantity,
                    unit=item.unit,
                )
            )
            await db.flush()

    async def _add_images(self, db: AsyncSession, recipe_id: int, images: List[str]) -> None:
        for image in images:
            db.add(Image(recipe_id=recipe_id, image=image))
            await db.flush()


recipe_service = RecipeService()
