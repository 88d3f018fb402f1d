"""
Grandma Recipes API: Custom Exception Hierarchy
===============================================

What:  Application exceptions raised by services and the authorization gate.
How:   Each exception carries a user-facing message and an optional context
       dict. Global handlers registered in main.py turn them into JSON
       envelopes with the status codes below.

Exception Hierarchy:
    GrandmaRecipesError (base)        → 500
    ├── ValidationError               → 400 Bad Request
    ├── NotFoundError                 → 200 OK with success=false
    ├── ConflictError                 → 409 Conflict
    ├── InvalidCredentialsError       → 401 Unauthorized
    ├── UnauthorizedError             → 400 Bad Request
    └── StorageError                  → 500 Internal Server Error

NotFoundError deliberately keeps a 200 status: clients of this API read
`success: false` as "nothing matched", not as a failed request.
"""

from typing import Any, Dict, Optional


class GrandmaRecipesError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, only partially returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(GrandmaRecipesError):
    """
    Raised when client input fails a business-rule check.

    Example response:
        {
            "success": false,
            "error": "validation_error",
            "message": "Missing required fields",
            "details": {"fields": ["ingredients"]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(GrandmaRecipesError):
    """Raised when a lookup or a filtered listing matched nothing."""

    def __init__(
        self,
        message: str = "The requested resource was not found",
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class ConflictError(GrandmaRecipesError):
    """Raised when a create would duplicate a unique business key (user email)."""

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidCredentialsError(GrandmaRecipesError):
    """
    Raised by login when the email is unknown or the password does not match.

    The two cases carry different messages ("Wrong email" / "Wrong password").
    """

    def __init__(
        self,
        message: str = "Invalid credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnauthorizedError(GrandmaRecipesError):
    """Raised by the authorization gate for a missing, invalid or expired token."""

    def __init__(
        self,
        message: str = "User not authorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StorageError(GrandmaRecipesError):
    """
    Raised when a database operation fails.

    The client only sees a generic message and the driver error type; the
    original error text is logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
