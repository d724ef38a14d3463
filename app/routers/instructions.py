"""Recipe instruction endpoints.

Reads are public. Writes need a bearer token and ownership of the recipe,
which InstructionStore checks before touching any row.
"""

from typing import Annotated
from fastapi import APIRouter, Depends, Path, Request, status
from sqlalchemy.orm import Session
from app.constants import MAX_DB_INTEGER
from app.core.rate_limit import limiter, WRITE_LIMIT
from app.database import get_db
from app.models import User
from app.schemas import (
    InstructionBatchCreate,
    InstructionBatchCreatedResponse,
    InstructionCreate,
    InstructionCreatedResponse,
    InstructionDescriptionUpdate,
    InstructionDetailResponse,
    InstructionListResponse,
    InstructionResponse,
    InstructionStepUpdate,
    InstructionSummary,
    MessageResponse,
    NextStepResponse,
)
from app.services.instruction_store import InstructionStore
from app.utils.auth import get_current_user

router = APIRouter()
instruction_store = InstructionStore()

RowId = Annotated[int, Path(ge=1, le=MAX_DB_INTEGER)]


def get_instruction_store() -> InstructionStore:
    return instruction_store


# Public routes


@router.get("/recipe/{recipe_id}", response_model=InstructionListResponse)
def list_recipe_instructions(
    recipe_id: RowId,
    db: Session = Depends(get_db),
    store: InstructionStore = Depends(get_instruction_store),
):
    """Get all instructions for a recipe, ordered by step number"""
    rows = store.list_by_recipe(recipe_id, db)
    return InstructionListResponse(
        count=len(rows),
        data=[InstructionSummary.model_validate(row) for row in rows],
    )


@router.get("/recipe/{recipe_id}/next-step", response_model=NextStepResponse)
def get_next_step_number(
    recipe_id: RowId,
    db: Session = Depends(get_db),
    store: InstructionStore = Depends(get_instruction_store),
):
    """Get the step number that would append a new instruction to a recipe"""
    return {
        "success": True,
        "data": {
            "recipe_id": recipe_id,
            "next_step_number": store.next_step_number(recipe_id, db),
        },
    }


@router.get("/{instruction_id}", response_model=InstructionDetailResponse)
def get_instruction(
    instruction_id: RowId,
    db: Session = Depends(get_db),
    store: InstructionStore = Depends(get_instruction_store),
):
    """Get instruction by ID"""
    instruction = store.get_by_id(instruction_id, db)
    return InstructionDetailResponse(data=InstructionResponse.model_validate(instruction))


# Protected routes


@router.post(
    "/",
    response_model=InstructionCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(WRITE_LIMIT)
def add_instruction(
    request: Request,
    payload: InstructionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    store: InstructionStore = Depends(get_instruction_store),
):
    """Add an instruction to a recipe the current user owns"""
    instruction = store.create(
        payload.recipe_id,
        payload.step_number,
        payload.description,
        current_user.user_id,
        db,
    )
    return InstructionCreatedResponse(
        message="Instruction added successfully",
        data=InstructionResponse.model_validate(instruction),
    )


@router.post(
    "/batch/add",
    response_model=InstructionBatchCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(WRITE_LIMIT)
def add_instructions_batch(
    request: Request,
    payload: InstructionBatchCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    store: InstructionStore = Depends(get_instruction_store),
):
    """Add several instructions to a recipe in one all-or-nothing call"""
    items = (
        [item.model_dump() for item in payload.instructions]
        if payload.instructions is not None
        else None
    )
    created = store.create_batch(payload.recipe_id, items, current_user.user_id, db)
    return InstructionBatchCreatedResponse(
        message=f"{len(created)} instruction(s) added successfully",
        data=[InstructionResponse.model_validate(row) for row in created],
    )


@router.put("/{instruction_id}/recipe/{recipe_id}", response_model=MessageResponse)
@limiter.limit(WRITE_LIMIT)
def update_instruction(
    request: Request,
    instruction_id: RowId,
    recipe_id: RowId,
    payload: InstructionDescriptionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    store: InstructionStore = Depends(get_instruction_store),
):
    """Replace the description of an instruction"""
    store.update_description(
        instruction_id, recipe_id, payload.description, current_user.user_id, db
    )
    return MessageResponse(message="Instruction updated successfully")


@router.put(
    "/{instruction_id}/recipe/{recipe_id}/step", response_model=MessageResponse
)
@limiter.limit(WRITE_LIMIT)
def update_instruction_step(
    request: Request,
    instruction_id: RowId,
    recipe_id: RowId,
    payload: InstructionStepUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    store: InstructionStore = Depends(get_instruction_store),
):
    """Move an instruction to a different step number"""
    store.update_step_number(
        instruction_id, recipe_id, payload.step_number, current_user.user_id, db
    )
    return MessageResponse(message="Instruction step number updated successfully")


@router.delete("/{instruction_id}/recipe/{recipe_id}", response_model=MessageResponse)
@limiter.limit(WRITE_LIMIT)
def delete_instruction(
    request: Request,
    instruction_id: RowId,
    recipe_id: RowId,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    store: InstructionStore = Depends(get_instruction_store),
):
    """Delete an instruction"""
    store.delete(instruction_id, recipe_id, current_user.user_id, db)
    return MessageResponse(message="Instruction deleted successfully")
