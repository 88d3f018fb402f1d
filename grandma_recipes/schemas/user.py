"""User account, credential and token schemas."""

from typing import List

from pydantic import BaseModel, Field

from grandma_recipes.schemas.common import CamelModel


class UserCredentials(CamelModel):
    """Body of POST /signup and POST /login."""
    email: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)


class SignupResponse(CamelModel):
    success: bool = True
    id_user: int


class LoginResponse(CamelModel):
    success: bool = True
    token: str


class UserResponse(CamelModel):
    """Public view of a user; the password hash is never serialized."""
    id_user: int
    email: str


class UserListResponse(CamelModel):
    success: bool = True
    data: List[UserResponse]


class UserDetailResponse(CamelModel):
    success: bool = True
    data: UserResponse


class TokenIdentity(BaseModel):
    """Verified claims of an access token, handed to protected handlers."""
    id: int
    email: str
