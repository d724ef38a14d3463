"""Create users, recipes and recipe instructions tables

Revision ID: 1a2b3c4d
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "1a2b3c4d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Users",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index("ix_Users_email", "Users", ["email"], unique=True)

    op.create_table(
        "Recipes",
        sa.Column("recipe_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["Users.user_id"]),
        sa.PrimaryKeyConstraint("recipe_id"),
    )
    op.create_index("ix_Recipes_user_id", "Recipes", ["user_id"])

    op.create_table(
        "RecipeInstructions",
        sa.Column("instruction_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("recipe_id", sa.Integer(), nullable=False),
        sa.Column("step_number", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.CheckConstraint("step_number >= 1", name="ck_instruction_step_positive"),
        sa.ForeignKeyConstraint(
            ["recipe_id"], ["Recipes.recipe_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("instruction_id"),
    )
    op.create_index(
        "idx_instructions_recipe_step",
        "RecipeInstructions",
        ["recipe_id", "step_number"],
    )


def downgrade() -> None:
    op.drop_index("idx_instructions_recipe_step", table_name="RecipeInstructions")
    op.drop_table("RecipeInstructions")
    op.drop_index("ix_Recipes_user_id", table_name="Recipes")
    op.drop_table("Recipes")
    op.drop_index("ix_Users_email", table_name="Users")
    op.drop_table("Users")
