"""
Grandma Recipes API: Recipe Route Handlers
===========================================

What:  GET /recipes, GET /recipes/{nameRecipe}, GET /recipe/{idRecipe}
       and POST /recipes/new.
How:   Thin handlers; RecipeService does the join, aggregation and the write
       pipeline. Empty results arrive as NotFoundError and are rendered as
       HTTP 200 with success=false by the global handler.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from grandma_recipes.database import get_db_session
from grandma_recipes.dependencies import get_current_user
from grandma_recipes.schemas.common import ErrorResponse, NotFoundResponse
from grandma_recipes.schemas.recipe import (
    RecipeCreate,
    RecipeCreatedResponse,
    RecipeDetailResponse,
    RecipeListResponse,
    RecipeSearchResponse,
)
from grandma_recipes.schemas.user import TokenIdentity
from grandma_recipes.services.recipe_service import recipe_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Recipes"])


@router.get(
    "/recipes",
    response_model=RecipeListResponse,
    responses={200: {"description": "All recipes, or success=false when there are none"}},
    summary="List every recipe with its grandma, ingredients and images",
)
async def list_recipes(db: AsyncSession = Depends(get_db_session)) -> RecipeListResponse:
    return await recipe_service.list_recipes(db)


@router.get(
    "/recipes/{name_recipe}",
    response_model=RecipeSearchResponse,
    responses={200: {"description": "Matching recipes, or success=false when none match"}},
    summary="Search recipes whose name contains the given text (case-insensitive)",
)
async def search_recipes(
    name_recipe: str,
    db: AsyncSession = Depends(get_db_session),
) -> RecipeSearchResponse:
    return await recipe_service.search_recipes(db, name_recipe)


@router.get(
    "/recipe/{id_recipe}",
    response_model=RecipeDetailResponse,
    responses={200: {"description": "The recipe, or success=false", "model": NotFoundResponse}},
    summary="Get one recipe by id",
)
async def get_recipe(
    id_recipe: int,
    db: AsyncSession = Depends(get_db_session),
) -> RecipeDetailResponse:
    return await recipe_service.get_recipe(db, id_recipe)


@router.post(
    "/recipes/new",
    status_code=201,
    response_model=RecipeCreatedResponse,
    responses={
        400: {"description": "Missing required fields or not authorized", "model": ErrorResponse},
        500: {"description": "Storage failure; nothing was saved", "model": ErrorResponse},
    },
    summary="Submit a recipe together with its grandma, ingredients and images",
)
async def create_recipe(
    payload: RecipeCreate,
    user: TokenIdentity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> RecipeCreatedResponse:
    return await recipe_service.create_recipe(db, payload, user_id=user.id)
