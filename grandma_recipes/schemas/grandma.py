"""Contributor ("grandma") request and response schemas."""

from typing import List, Optional

from pydantic import Field

from grandma_recipes.schemas.common import CamelModel, ListInfo


class GrandmaCreate(CamelModel):
    """Body of POST /grandma and PUT /grandma/{id} (full replace)."""
    name: str = Field(min_length=1)
    lastname: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    birth_year: Optional[int] = None
    bio: Optional[str] = None
    photo: Optional[str] = None


class GrandmaResponse(CamelModel):
    id_grandma: int
    name: Optional[str] = None
    lastname: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    birth_year: Optional[int] = None
    bio: Optional[str] = None
    photo: Optional[str] = None


class GrandmaListResponse(CamelModel):
    success: bool = True
    info: ListInfo
    results: List[GrandmaResponse]


class GrandmaDetailResponse(CamelModel):
    success: bool = True
    data: GrandmaResponse


class GrandmaCreatedInfo(CamelModel):
    id_grandma: int
    id_user: int


class GrandmaCreatedResponse(CamelModel):
    success: bool = True
    info: GrandmaCreatedInfo


class GrandmaMutationResponse(CamelModel):
    """Result of an update or delete that touched at least one row."""
    success: bool = True
    message: str
    affected_rows: int
