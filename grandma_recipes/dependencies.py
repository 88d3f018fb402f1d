"""
Grandma Recipes API: Authorization Gate
========================================

What:  FastAPI dependency guarding protected routes.

Per request:
    no Authorization header          → UnauthorizedError("User not authorized")
    header, not "Bearer <token>"      → UnauthorizedError(<parse error>)
    header, token fails verification  → UnauthorizedError(<PyJWT error>)
    header, token verifies            → TokenIdentity returned to the handler
                                        and stored on request.state.user

Every rejection is raised before the route handler runs, so a rejected
request never reaches a service. The token is trusted as issued: the user row
is not looked up again.
"""

import logging
from typing import Optional

from fastapi import Header, Request

from grandma_recipes.exceptions import UnauthorizedError
from grandma_recipes.schemas.user import TokenIdentity
from grandma_recipes.security import decode_access_token

logger = logging.getLogger(__name__)


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> TokenIdentity:
    if not authorization:
        raise UnauthorizedError(message="User not authorized")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise UnauthorizedError(message="Authorization header must be 'Bearer <token>'")

    identity = decode_access_token(token)
    request.state.user = identity
    logger.debug("Authorized user %d", identity.id)
    return identity
