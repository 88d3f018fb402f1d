"""
Grandma Recipes API: Credential Service
========================================

What:  Account registration and login.
Who:   Called by POST /signup and POST /login.

register:      email taken? → ConflictError
               otherwise hash password, INSERT users, return id
authenticate:  unknown email → InvalidCredentialsError("Wrong email")
               hash mismatch → InvalidCredentialsError("Wrong password")
               otherwise issue a signed one-hour token

The separate "Wrong email" / "Wrong password" messages reveal whether an
email is registered. They are kept for client compatibility.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from grandma_recipes.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    StorageError,
)
from grandma_recipes.models import User
from grandma_recipes.schemas.user import LoginResponse, SignupResponse
from grandma_recipes.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:

    async def _find_by_email(self, db: AsyncSession, email: str) -> Optional[User]:
        # Exact, case-sensitive match
        result = await db.execute(select(User).where(User.email == email).order_by(User.id))
        return result.scalars().first()

    async def register(self, db: AsyncSession, email: str, password: str) -> SignupResponse:
        """
        Creates a user account.

        Raises:
            ConflictError: A user with this email already exists
            StorageError: Lookup or insert failed
        """
        try:
            if await self._find_by_email(db, email) is not None:
                raise ConflictError(message="User already exists")

            user = User(email=email, password=hash_password(password))
            db.add(user)
            await db.flush()
        except SQLAlchemyError as e:
            logger.error("Database error during signup: %s", str(e), exc_info=True)
            raise StorageError(
                message="Could not create the user. Please try again.",
                context={"error_type": type(e).__name__},
            )

        logger.info("User %d registered", user.id)
        return SignupResponse(id_user=user.id)

    async def authenticate(self, db: AsyncSession, email: str, password: str) -> LoginResponse:
        """
        Verifies credentials and issues an access token.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
            StorageError: Lookup failed
        """
        try:
            user = await self._find_by_email(db, email)
        except SQLAlchemyError as e:
            logger.error("Database error during login: %s", str(e), exc_info=True)
            raise StorageError(
                message="Could not log in. Please try again.",
                context={"error_type": type(e).__name__},
            )

        if user is None:
            logger.warning("Login rejected: unknown email")
            raise InvalidCredentialsError(message="Wrong email")

        if not verify_password(user.password, password):
            logger.warning("Login rejected for user %d: wrong password", user.id)
            raise InvalidCredentialsError(message="Wrong password")

        token = create_access_token(user_id=user.id, email=user.email)
        logger.info("User %d logged in", user.id)
        return LoginResponse(token=token)


auth_service = AuthService()
