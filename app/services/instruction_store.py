import logging
from typing import Any, Dict, List, Optional, Sequence
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.constants import (
    DATABASE_ERROR,
    INSTRUCTION_NOT_FOUND,
    MAX_DB_INTEGER,
    NOT_RECIPE_OWNER,
    RECIPE_NOT_FOUND,
)
from app.core.errors import ForbiddenError, InternalError, NotFoundError, ValidationError
from app.models import Recipe, RecipeInstruction

logger = logging.getLogger(__name__)


def is_positive_int(value: Any) -> bool:
    """True for integers the step_number column can hold. Booleans are not step numbers."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 1 <= value <= MAX_DB_INTEGER
    )


def is_blank(value: Any) -> bool:
    return value is None or not isinstance(value, str) or not value.strip()


class InstructionStore:
    """
    Ordered-list CRUD over recipe instructions.

    Reads are public. Every write re-derives authorization from the recipe
    (its owning user), then targets rows by ``instruction_id AND recipe_id``
    so an instruction can never be reached through another recipe's id.
    """

    # Ownership

    def resolve_recipe_owner(self, recipe_id: int, db: Session) -> Optional[int]:
        """Return the owning user id of a recipe, or None if it does not exist."""
        try:
            return db.scalar(select(Recipe.user_id).where(Recipe.recipe_id == recipe_id))
        except SQLAlchemyError as e:
            self._fail(db, DATABASE_ERROR, e)

    def authorize(self, recipe_id: int, acting_user_id: int, db: Session) -> None:
        owner_id = self.resolve_recipe_owner(recipe_id, db)
        if owner_id is None:
            raise NotFoundError(RECIPE_NOT_FOUND)
        if owner_id != acting_user_id:
            logger.warning(
                "User %s denied write access to recipe %s (owner %s)",
                acting_user_id,
                recipe_id,
                owner_id,
            )
            raise ForbiddenError(NOT_RECIPE_OWNER)

    # Reads

    def list_by_recipe(self, recipe_id: int, db: Session) -> List[RecipeInstruction]:
        """
        All instructions of a recipe ordered by step number.

        Equal step numbers keep insertion order. An unknown recipe yields an
        empty list, the same as a recipe without steps.
        """
        try:
            return list(
                db.scalars(
                    select(RecipeInstruction)
                    .where(RecipeInstruction.recipe_id == recipe_id)
                    .order_by(
                        RecipeInstruction.step_number.asc(),
                        RecipeInstruction.instruction_id.asc(),
                    )
                ).all()
            )
        except SQLAlchemyError as e:
            self._fail(db, DATABASE_ERROR, e)

    def get_by_id(self, instruction_id: int, db: Session) -> RecipeInstruction:
        try:
            instruction = db.get(RecipeInstruction, instruction_id)
        except SQLAlchemyError as e:
            self._fail(db, DATABASE_ERROR, e)
        if instruction is None:
            raise NotFoundError(INSTRUCTION_NOT_FOUND)
        return instruction

    def next_step_number(self, recipe_id: int, db: Session) -> int:
        """One past the highest step number of the recipe (1 when it has none)."""
        try:
            max_step = db.scalar(
                select(func.max(RecipeInstruction.step_number)).where(
                    RecipeInstruction.recipe_id == recipe_id
                )
            )
        except SQLAlchemyError as e:
            self._fail(db, DATABASE_ERROR, e)
        return (max_step or 0) + 1

    # Writes

    def create(
        self,
        recipe_id: int,
        step_number: int,
        description: str,
        acting_user_id: int,
        db: Session,
    ) -> RecipeInstruction:
        if recipe_id is None or step_number is None or is_blank(description):
            raise ValidationError(
                "recipe_id, step_number, and description are required"
            )
        if not is_positive_int(step_number):
            raise ValidationError("step_number must be a positive integer")

        self.authorize(recipe_id, acting_user_id, db)

        instruction = RecipeInstruction(
            recipe_id=recipe_id, step_number=step_number, description=description
        )
        try:
            db.add(instruction)
            db.commit()
            db.refresh(instruction)
        except SQLAlchemyError as e:
            self._fail(db, "Failed to add instruction", e)

        logger.info(
            "Added instruction %s (step %s) to recipe %s",
            instruction.instruction_id,
            step_number,
            recipe_id,
        )
        return instruction

    def create_batch(
        self,
        recipe_id: int,
        items: Optional[Sequence[Dict[str, Any]]],
        acting_user_id: int,
        db: Session,
    ) -> List[RecipeInstruction]:
        """
        Insert several instructions in one transaction.

        Every item is validated before the datastore is touched. Items are
        inserted in input order, so generated ids follow the input rather than
        the step numbers. A failing insert rolls the whole batch back.
        """
        if recipe_id is None or not isinstance(items, (list, tuple)) or not items:
            raise ValidationError(
                "recipe_id and instructions array (non-empty) are required"
            )
        for index, item in enumerate(items):
            step_number = item.get("step_number")
            if step_number is None or is_blank(item.get("description")):
                raise ValidationError(
                    f"Instruction {index} must have step_number and description"
                )
            if not is_positive_int(step_number):
                raise ValidationError(
                    f"Instruction {index} step_number must be a positive integer"
                )

        self.authorize(recipe_id, acting_user_id, db)

        created = []
        position = 0
        try:
            for position, item in enumerate(items, start=1):
                instruction = RecipeInstruction(
                    recipe_id=recipe_id,
                    step_number=item["step_number"],
                    description=item["description"],
                )
                db.add(instruction)
                db.flush()
                created.append(instruction)
            db.commit()
        except SQLAlchemyError as e:
            self._fail(db, f"Failed to add instruction {position}", e)

        try:
            for instruction in created:
                db.refresh(instruction)
        except SQLAlchemyError as e:
            self._fail(db, DATABASE_ERROR, e)
        logger.info("Added %d instruction(s) to recipe %s", len(created), recipe_id)
        return created

    def update_description(
        self,
        instruction_id: int,
        recipe_id: int,
        description: str,
        acting_user_id: int,
        db: Session,
    ) -> None:
        if is_blank(description):
            raise ValidationError("Description is required")

        self.authorize(recipe_id, acting_user_id, db)
        self._update_row(
            instruction_id,
            recipe_id,
            {"description": description},
            "Failed to update instruction",
            db,
        )
        logger.info("Updated description of instruction %s", instruction_id)

    def update_step_number(
        self,
        instruction_id: int,
        recipe_id: int,
        step_number: int,
        acting_user_id: int,
        db: Session,
    ) -> None:
        if not is_positive_int(step_number):
            raise ValidationError("step_number must be a positive integer")

        self.authorize(recipe_id, acting_user_id, db)
        self._update_row(
            instruction_id,
            recipe_id,
            {"step_number": step_number},
            "Failed to update instruction step number",
            db,
        )
        logger.info(
            "Moved instruction %s to step %s", instruction_id, step_number
        )

    def delete(
        self, instruction_id: int, recipe_id: int, acting_user_id: int, db: Session
    ) -> None:
        self.authorize(recipe_id, acting_user_id, db)
        try:
            result = db.execute(
                delete(RecipeInstruction).where(
                    RecipeInstruction.instruction_id == instruction_id,
                    RecipeInstruction.recipe_id == recipe_id,
                )
            )
            db.commit()
        except SQLAlchemyError as e:
            self._fail(db, "Failed to delete instruction", e)

        if result.rowcount == 0:
            raise NotFoundError(INSTRUCTION_NOT_FOUND)
        logger.info("Deleted instruction %s from recipe %s", instruction_id, recipe_id)

    def delete_all_for_recipe(
        self, recipe_id: int, acting_user_id: int, db: Session
    ) -> int:
        """Remove every instruction of a recipe. Returns the number deleted."""
        self.authorize(recipe_id, acting_user_id, db)
        try:
            result = db.execute(
                delete(RecipeInstruction).where(
                    RecipeInstruction.recipe_id == recipe_id
                )
            )
            db.commit()
        except SQLAlchemyError as e:
            self._fail(db, "Failed to delete instructions", e)

        logger.info(
            "Cleared %d instruction(s) from recipe %s", result.rowcount, recipe_id
        )
        return result.rowcount

    # Helpers

    def _update_row(
        self,
        instruction_id: int,
        recipe_id: int,
        values: Dict[str, Any],
        failure_message: str,
        db: Session,
    ) -> None:
        try:
            result = db.execute(
                update(RecipeInstruction)
                .where(
                    RecipeInstruction.instruction_id == instruction_id,
                    RecipeInstruction.recipe_id == recipe_id,
                )
                .values(**values)
            )
            db.commit()
        except SQLAlchemyError as e:
            self._fail(db, failure_message, e)

        if result.rowcount == 0:
            raise NotFoundError(INSTRUCTION_NOT_FOUND)

    def _fail(self, db: Session, message: str, exc: SQLAlchemyError):
        db.rollback()
        logger.exception(message)
        raise InternalError(message, str(getattr(exc, "orig", None) or exc)) from exc
