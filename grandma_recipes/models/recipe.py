"""
Grandma Recipes API: Recipe Models
===================================

What:  ORM models for the normalized recipe schema:
       `recipes`, `ingredients`, `recipes_have_ingredients` (junction) and
       `images`.

Relationships:
    grandmas 1 ──< recipes 1 ──< recipes_have_ingredients >── 1 ingredients
                           1 ──< images

    The read path joins all five tables with INNER JOINs, which yields one
    row per (recipe, ingredient link, image) combination. See
    services/aggregation.py for how those rows are folded back.

Ingredients are never shared between recipes: every submission inserts fresh
`ingredients` rows, even for names that already exist.
"""

from typing import Optional

from sqlalchemy import Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from grandma_recipes.database import Base


class Recipe(Base):
    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Minutes
    cooking_time: Mapped[int] = mapped_column(Integer, nullable=False)

    directions: Mapped[str] = mapped_column(Text, nullable=False)
    background: Mapped[str] = mapped_column(Text, nullable=False)

    # Every recipe has exactly one contributor
    grandma_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("grandmas.id"),
        nullable=False,
        index=True,
    )

    # Submitting user; optional so recipes outlive the account model
    user_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, name='{self.name}', grandma_id={self.grandma_id})>"


class Ingredient(Base):
    __tablename__ = "ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Ingredient(id={self.id}, name='{self.name}')>"


class RecipeIngredient(Base):
    """
    Junction row linking a recipe to one of its ingredients.

    Carries the link-specific attributes (quantity, unit). The surrogate `id`
    grows in insertion order, which is the order ingredients were submitted.
    """

    __tablename__ = "recipes_have_ingredients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipe_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("recipes.id"),
        nullable=False,
        index=True,
    )
    ingredient_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("ingredients.id"),
        nullable=False,
    )
    quantity: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    unit: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)


class Image(Base):
    __tablename__ = "images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipe_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("recipes.id"),
        nullable=False,
        index=True,
    )
    # URL or base64 data URI
    image: Mapped[str] = mapped_column(Text, nullable=False)
