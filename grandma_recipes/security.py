"""
Grandma Recipes API: Credential Primitives
===========================================

What:  Password hashing (werkzeug.security) and access-token signing (PyJWT).
Who:   AuthService uses hash/verify and token issue; the authorization gate
       uses token decode.

Token claims:
    {"email": "...", "id": 12, "iat": <issued>, "exp": <issued + 60 min>}
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from grandma_recipes.config import settings
from grandma_recipes.exceptions import UnauthorizedError
from grandma_recipes.schemas.user import TokenIdentity


def hash_password(password: str) -> str:
    """Salted one-way hash; the method comes from PASSWORD_HASH_METHOD."""
    return generate_password_hash(password, method=settings.password_hash_method)


def verify_password(stored_hash: str, password: str) -> bool:
    return check_password_hash(stored_hash, password)


def create_access_token(
    user_id: int,
    email: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Issues a signed token embedding the user's id and email.

    Args:
        user_id: Identity stored in the `id` claim
        email: Stored in the `email` claim
        expires_delta: Lifetime override; defaults to TOKEN_EXPIRE_MINUTES
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_delta if expires_delta is not None else timedelta(
        minutes=settings.token_expire_minutes
    )
    payload = {
        "email": email,
        "id": user_id,
        "iat": issued_at,
        "exp": issued_at + lifetime,
    }
    return jwt.encode(payload, settings.token_secret_key, algorithm=settings.token_algorithm)


def decode_access_token(token: str) -> TokenIdentity:
    """
    Verifies signature and expiry and returns the embedded identity.

    Raises:
        UnauthorizedError: carrying the PyJWT error text ("Signature has
            expired", "Signature verification failed", ...)
    """
    try:
        claims = jwt.decode(
            token,
            settings.token_secret_key,
            algorithms=[settings.token_algorithm],
            options={"require": ["exp", "id", "email"]},
        )
    except jwt.PyJWTError as e:
        raise UnauthorizedError(message=str(e), context={"error_type": type(e).__name__})

    return TokenIdentity(id=claims["id"], email=claims["email"])
