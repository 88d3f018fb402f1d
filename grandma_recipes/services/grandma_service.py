"""
Grandma Recipes API: Contributor Service
=========================================

What:  Create / read / full-update / delete for contributors ("grandmas").
Who:   Called by routes/grandmas.py.

Permissions: any authorized caller may update or delete any contributor.
The users_have_grandmas link written on create records who registered the
contributor; it is not consulted on update or delete.
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from grandma_recipes.database import is_storable_id
from grandma_recipes.exceptions import NotFoundError, StorageError
from grandma_recipes.models import Grandma, UserGrandma
from grandma_recipes.schemas.common import ListInfo
from grandma_recipes.schemas.grandma import (
    GrandmaCreate,
    GrandmaCreatedInfo,
    GrandmaCreatedResponse,
    GrandmaDetailResponse,
    GrandmaListResponse,
    GrandmaMutationResponse,
    GrandmaResponse,
)

logger = logging.getLogger(__name__)

UNKNOWN_GRANDMA_MESSAGE = "That id does not exist in our data base"


def _to_response(grandma: Grandma) -> GrandmaResponse:
    return GrandmaResponse(
        id_grandma=grandma.id,
        name=grandma.name,
        lastname=grandma.lastname,
        city=grandma.city,
        province=grandma.province,
        country=grandma.country,
        birth_year=grandma.birth_year,
        bio=grandma.bio,
        photo=grandma.photo,
    )


def _unknown_grandma(grandma_id: int) -> NotFoundError:
    return NotFoundError(
        message=UNKNOWN_GRANDMA_MESSAGE, resource="grandma", resource_id=grandma_id
    )


def _storage_error(action: str, e: Exception) -> StorageError:
    logger.error("Database error while trying to %s: %s", action, str(e), exc_info=True)
    return StorageError(
        message=f"Could not {action}. Please try again.",
        context={"error_type": type(e).__name__},
    )


class GrandmaService:

    async def list_grandmas(self, db: AsyncSession) -> GrandmaListResponse:
        try:
            result = await db.execute(select(Grandma).order_by(Grandma.id))
            grandmas = result.scalars().all()
        except SQLAlchemyError as e:
            raise _storage_error("retrieve grandmas", e)

        results = [_to_response(g) for g in grandmas]
        return GrandmaListResponse(info=ListInfo(count=len(results)), results=results)

    async def get_grandma(self, db: AsyncSession, grandma_id: int) -> GrandmaDetailResponse:
        if not is_storable_id(grandma_id):
            raise _unknown_grandma(grandma_id)

        try:
            result = await db.execute(select(Grandma).where(Grandma.id == grandma_id))
            grandma = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise _storage_error("retrieve the grandma", e)

        if grandma is None:
            raise _unknown_grandma(grandma_id)
        return GrandmaDetailResponse(data=_to_response(grandma))

    async def create_grandma(
        self,
        db: AsyncSession,
        payload: GrandmaCreate,
        user_id: int,
    ) -> GrandmaCreatedResponse:
        """Inserts the contributor and links it to the calling user."""
        try:
            grandma = Grandma(**payload.model_dump())
            db.add(grandma)
            await db.flush()
            db.add(UserGrandma(user_id=user_id, grandma_id=grandma.id))
            await db.flush()
        except SQLAlchemyError as e:
            raise _storage_error("add the grandma", e)

        logger.info("Grandma %d created by user %d", grandma.id, user_id)
        return GrandmaCreatedResponse(
            info=GrandmaCreatedInfo(id_grandma=grandma.id, id_user=user_id)
        )

    async def update_grandma(
        self,
        db: AsyncSession,
        grandma_id: int,
        payload: GrandmaCreate,
    ) -> GrandmaMutationResponse:
        """
        Full-row replace: every mutable column is overwritten, omitted
        optional fields become NULL.
        """
        if not is_storable_id(grandma_id):
            raise _unknown_grandma(grandma_id)

        try:
            result = await db.execute(
                update(Grandma)
                .where(Grandma.id == grandma_id)
                .values(**payload.model_dump())
            )
        except SQLAlchemyError as e:
            raise _storage_error("update the grandma", e)

        affected = result.rowcount
        if not affected:
            raise _unknown_grandma(grandma_id)

        logger.info("Grandma %d updated", grandma_id)
        return GrandmaMutationResponse(
            message=f"{affected} row(s) updated",
            affected_rows=affected,
        )

    async def delete_grandma(self, db: AsyncSession, grandma_id: int) -> GrandmaMutationResponse:
        """
        Deletes the contributor and its user links.

        Recipes still pointing at the contributor are not checked here; the
        database's foreign key decides, and a violation surfaces as
        StorageError.
        """
        if not is_storable_id(grandma_id):
            raise _unknown_grandma(grandma_id)

        try:
            await db.execute(delete(UserGrandma).where(UserGrandma.grandma_id == grandma_id))
            result = await db.execute(delete(Grandma).where(Grandma.id == grandma_id))
        except SQLAlchemyError as e:
            raise _storage_error("delete the grandma", e)

        affected = result.rowcount
        if not affected:
            raise _unknown_grandma(grandma_id)

        logger.info("Grandma %d deleted", grandma_id)
        return GrandmaMutationResponse(
            message=f"The row with idGrandma = {grandma_id} has been deleted.",
            affected_rows=affected,
        )


grandma_service = GrandmaService()
