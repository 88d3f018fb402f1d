"""
Grandma Recipes API: Account Route Handlers
============================================

Public:     POST /signup, POST /login, PUT /logout
Protected:  GET /users, GET /user/{id}

Logout is stateless: access tokens are not stored server-side, so there is
nothing to revoke. A token stays valid until its `exp` claim passes.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from grandma_recipes.database import get_db_session
from grandma_recipes.dependencies import get_current_user
from grandma_recipes.schemas.common import ErrorResponse, MessageResponse
from grandma_recipes.schemas.user import (
    LoginResponse,
    SignupResponse,
    TokenIdentity,
    UserCredentials,
    UserDetailResponse,
    UserListResponse,
)
from grandma_recipes.services.auth_service import auth_service
from grandma_recipes.services.user_service import user_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Users"])


@router.post(
    "/signup",
    status_code=201,
    response_model=SignupResponse,
    responses={409: {"description": "Email already registered", "model": ErrorResponse}},
    summary="Register a new account",
)
async def signup(
    credentials: UserCredentials,
    db: AsyncSession = Depends(get_db_session),
) -> SignupResponse:
    return await auth_service.register(db, credentials.email, credentials.password)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"description": "Wrong email or wrong password", "model": ErrorResponse}},
    summary="Exchange credentials for a one-hour access token",
)
async def login(
    credentials: UserCredentials,
    db: AsyncSession = Depends(get_db_session),
) -> LoginResponse:
    return await auth_service.authenticate(db, credentials.email, credentials.password)


@router.get("/users", response_model=UserListResponse, summary="List accounts")
async def list_users(
    user: TokenIdentity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UserListResponse:
    return await user_service.list_users(db)


@router.get("/user/{user_id}", response_model=UserDetailResponse, summary="Get one account")
async def get_user(
    user_id: int,
    user: TokenIdentity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UserDetailResponse:
    return await user_service.get_user(db, user_id)


@router.put("/logout", response_model=MessageResponse, summary="End the client session")
async def logout(authorization: Optional[str] = Header(default=None)) -> MessageResponse:
    if not authorization:
        return MessageResponse(success=False, message="Error while logging out")
    return MessageResponse(message="Session ended")
