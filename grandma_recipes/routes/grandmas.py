"""
Grandma Recipes API: Contributor Route Handlers
================================================

Public:     GET /grandmas, GET /grandma/{id}
Protected:  POST /grandma, PUT /grandma/{id}, DELETE /grandma/{id}
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from grandma_recipes.database import get_db_session
from grandma_recipes.dependencies import get_current_user
from grandma_recipes.schemas.common import ErrorResponse
from grandma_recipes.schemas.grandma import (
    GrandmaCreate,
    GrandmaCreatedResponse,
    GrandmaDetailResponse,
    GrandmaListResponse,
    GrandmaMutationResponse,
)
from grandma_recipes.schemas.user import TokenIdentity
from grandma_recipes.services.grandma_service import grandma_service

router = APIRouter(tags=["Grandmas"])

_PROTECTED_RESPONSES = {
    400: {"description": "Not authorized", "model": ErrorResponse},
    500: {"description": "Storage failure", "model": ErrorResponse},
}


@router.get("/grandmas", response_model=GrandmaListResponse, summary="List grandmas")
async def list_grandmas(db: AsyncSession = Depends(get_db_session)) -> GrandmaListResponse:
    return await grandma_service.list_grandmas(db)


@router.get("/grandma/{grandma_id}", response_model=GrandmaDetailResponse, summary="Get one grandma")
async def get_grandma(
    grandma_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> GrandmaDetailResponse:
    return await grandma_service.get_grandma(db, grandma_id)


@router.post(
    "/grandma",
    response_model=GrandmaCreatedResponse,
    responses=_PROTECTED_RESPONSES,
    summary="Add a grandma linked to the calling user",
)
async def create_grandma(
    payload: GrandmaCreate,
    user: TokenIdentity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> GrandmaCreatedResponse:
    return await grandma_service.create_grandma(db, payload, user_id=user.id)


@router.put(
    "/grandma/{grandma_id}",
    response_model=GrandmaMutationResponse,
    responses=_PROTECTED_RESPONSES,
    summary="Replace every field of a grandma",
)
async def update_grandma(
    grandma_id: int,
    payload: GrandmaCreate,
    user: TokenIdentity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> GrandmaMutationResponse:
    return await grandma_service.update_grandma(db, grandma_id, payload)


@router.delete(
    "/grandma/{grandma_id}",
    response_model=GrandmaMutationResponse,
    responses=_PROTECTED_RESPONSES,
    summary="Delete a grandma",
)
async def delete_grandma(
    grandma_id: int,
    user: TokenIdentity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> GrandmaMutationResponse:
    return await grandma_service.delete_grandma(db, grandma_id)
