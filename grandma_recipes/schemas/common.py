"""
Grandma Recipes API: Shared Schema Pieces
==========================================

What:  Base model with the API's camelCase wire names, plus envelope parts
       and error/health models shared by every router.

Wire format:
    Python fields are snake_case; JSON keys are camelCase (`id_recipe` ↔
    `idRecipe`). Both spellings are accepted on input, responses are
    serialized by alias.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every request/response model exchanged with clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ListInfo(CamelModel):
    count: int = Field(description="Number of items in `results`")


class MessageResponse(CamelModel):
    success: bool = Field(default=True)
    message: str


class ErrorResponse(BaseModel):
    """
    Error envelope produced by the global exception handlers.

    Example:
        {
            "success": false,
            "error": "unauthorized",
            "message": "User not authorized",
            "request_id": "a1b2c3d4"
        }
    """
    success: bool = Field(default=False)
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class NotFoundResponse(BaseModel):
    """Returned with HTTP 200 when a lookup or listing matched nothing."""
    success: bool = Field(default=False)
    message: str
    request_id: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
