"""
Grandma Recipes API: User Models
=================================

What:  ORM models for `users` and the `users_have_grandmas` link table.

Email uniqueness is a business rule checked by the credential pipeline
before insert; the column is indexed but carries no UNIQUE constraint.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from grandma_recipes.database import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Salted hash produced by werkzeug.security; never the plaintext
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class UserGrandma(Base):
    """Records which user registered a contributor through POST /grandma."""

    __tablename__ = "users_have_grandmas"

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        primary_key=True,
    )
    grandma_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("grandmas.id", ondelete="CASCADE"),
        primary_key=True,
    )
