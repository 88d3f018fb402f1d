"""Create recipe schema

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the seven tables of the recipe catalogue: grandmas, users,
       recipes, ingredients, recipes_have_ingredients, images and
       users_have_grandmas.

Rollback: downgrade() drops every table (all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "grandmas",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("lastname", sa.String(100), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("province", sa.String(100), nullable=True),
        sa.Column("country", sa.String(100), nullable=True),
        sa.Column("birth_year", sa.Integer(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("photo", sa.Text(), nullable=True, comment="URL or base64 data URI"),
        sa.PrimaryKeyConstraint("id", name="pk_grandmas"),
    )

    # No UNIQUE on email: uniqueness is checked by the signup pipeline
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False, comment="werkzeug password hash"),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
    )
    op.create_index("ix_users_email", "users", ["email"])

    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("cooking_time", sa.Integer(), nullable=False, comment="Minutes"),
        sa.Column("directions", sa.Text(), nullable=False),
        sa.Column("background", sa.Text(), nullable=False),
        sa.Column("grandma_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_recipes"),
        sa.ForeignKeyConstraint(["grandma_id"], ["grandmas.id"], name="fk_recipes_grandma_id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="fk_recipes_user_id"),
    )
    op.create_index("ix_recipes_name", "recipes", ["name"])
    op.create_index("ix_recipes_grandma_id", "recipes", ["grandma_id"])

    op.create_table(
        "ingredients",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_ingredients"),
    )

    op.create_table(
        "recipes_have_ingredients",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("recipe_id", sa.Integer(), nullable=False),
        sa.Column("ingredient_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Float(), nullable=True),
        sa.Column("unit", sa.String(50), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_recipes_have_ingredients"),
        sa.ForeignKeyConstraint(
            ["recipe_id"], ["recipes.id"], name="fk_recipes_have_ingredients_recipe_id"
        ),
        sa.ForeignKeyConstraint(
            ["ingredient_id"], ["ingredients.id"], name="fk_recipes_have_ingredients_ingredient_id"
        ),
    )
    op.create_index(
        "ix_recipes_have_ingredients_recipe_id", "recipes_have_ingredients", ["recipe_id"]
    )

    op.create_table(
        "images",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("recipe_id", sa.Integer(), nullable=False),
        sa.Column("image", sa.Text(), nullable=False, comment="URL or base64 data URI"),
        sa.PrimaryKeyConstraint("id", name="pk_images"),
        sa.ForeignKeyConstraint(["recipe_id"], ["recipes.id"], name="fk_images_recipe_id"),
    )
    op.create_index("ix_images_recipe_id", "images", ["recipe_id"])

    op.create_table(
        "users_have_grandmas",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("grandma_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("user_id", "grandma_id", name="pk_users_have_grandmas"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], name="fk_users_have_grandmas_user_id"),
        sa.ForeignKeyConstraint(
            ["grandma_id"],
            ["grandmas.id"],
            name="fk_users_have_grandmas_grandma_id",
            ondelete="CASCADE",
        ),
    )


def downgrade() -> None:
    op.drop_table("users_have_grandmas")
    op.drop_index("ix_images_recipe_id", table_name="images")
    op.drop_table("images")
    op.drop_index("ix_recipes_have_ingredients_recipe_id", table_name="recipes_have_ingredients")
    op.drop_table("recipes_have_ingredients")
    op.drop_table("ingredients")
    op.drop_index("ix_recipes_grandma_id", table_name="recipes")
    op.drop_index("ix_recipes_name", table_name="recipes")
    op.drop_table("recipes")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    op.drop_table("grandmas")
