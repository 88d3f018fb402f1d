"""
Grandma Recipes API: Contributor Model
=======================================

What:  ORM model for the `grandmas` table, the people credited as the source
       of a recipe.
Who:   Written by the contributor CRUD and by the recipe write pipeline;
       read through the recipe join and the contributor endpoints.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from grandma_recipes.database import Base


class Grandma(Base):
    """
    A recipe contributor.

    Lifecycle:
        - Created on POST /grandma, or as the first step of POST /recipes/new
        - Fully replaced on PUT /grandma/{id}
        - The only entity with a hard delete (DELETE /grandma/{id})
    """

    __tablename__ = "grandmas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    lastname: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    province: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    birth_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # URL or base64 data URI; stored as text since blobs arrive inline in JSON
    photo: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Grandma(id={self.id}, name='{self.name} {self.lastname}')>"
