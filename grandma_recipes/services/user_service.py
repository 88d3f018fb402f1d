"""User account reads for authorized callers. Password hashes never leave this module."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from grandma_recipes.database import is_storable_id
from grandma_recipes.exceptions import NotFoundError, StorageError
from grandma_recipes.models import User
from grandma_recipes.schemas.user import UserDetailResponse, UserListResponse, UserResponse

logger = logging.getLogger(__name__)


class UserService:

    async def list_users(self, db: AsyncSession) -> UserListResponse:
        try:
            result = await db.execute(select(User).order_by(User.id))
            users = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Database error listing users: %s", str(e), exc_info=True)
            raise StorageError(
                message="Could not retrieve users. Please try again.",
                context={"error_type": type(e).__name__},
            )
        return UserListResponse(data=[UserResponse(id_user=u.id, email=u.email) for u in users])

    async def get_user(self, db: AsyncSession, user_id: int) -> UserDetailResponse:
        user = None
        if is_storable_id(user_id):
            try:
                result = await db.execute(select(User).where(User.id == user_id))
                user = result.scalar_one_or_none()
            except SQLAlchemyError as e:
                logger.error("Database error fetching user %d: %s", user_id, str(e), exc_info=True)
                raise StorageError(
                    message="Could not retrieve the user. Please try again.",
                    context={"error_type": type(e).__name__, "user_id": user_id},
                )

        if user is None:
            raise NotFoundError(message="User not found", resource="user", resource_id=user_id)
        return UserDetailResponse(data=UserResponse(id_user=user.id, email=user.email))


user_service = UserService()
