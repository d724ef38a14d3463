from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Text,
    ForeignKey,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import declarative_base, relationship
from datetime import datetime, timezone

Base = declarative_base()


class User(Base):
    __tablename__ = "Users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(
        String(255), unique=True, nullable=False, index=True
    )  # unique email for login
    username = Column(String(100), nullable=False)
    hashed_password = Column(
        String, nullable=False
    )  # Store hashed password for authentication
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # Relationships
    recipes = relationship("Recipe", back_populates="owner")


class Recipe(Base):
    __tablename__ = "Recipes"

    recipe_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("Users.user_id"), nullable=False, index=True
    )  # owning user
    title = Column(String(200), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    # Relationships
    owner = relationship("User", back_populates="recipes")
    instructions = relationship(
        "RecipeInstruction",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by=lambda: [RecipeInstruction.step_number, RecipeInstruction.instruction_id],
    )


class RecipeInstruction(Base):
    """One ordered step of a recipe's procedure."""

    __tablename__ = "RecipeInstructions"

    instruction_id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer, ForeignKey("Recipes.recipe_id", ondelete="CASCADE"), nullable=False
    )
    step_number = Column(Integer, nullable=False)  # display order, not unique
    description = Column(Text, nullable=False)

    # Relationships
    recipe = relationship("Recipe", back_populates="instructions")

    __table_args__ = (
        CheckConstraint("step_number >= 1", name="ck_instruction_step_positive"),
        Index("idx_instructions_recipe_step", recipe_id, step_number),
    )
