from pydantic import BaseModel, Field, StrictInt
from typing import Any, List, Optional
from datetime import datetime
from app.constants import MAX_DB_INTEGER


# Auth schemas
class LoginRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    user_id: int
    email: str
    username: str
    created_at: datetime

    model_config = {"from_attributes": True}


# Registration request/response schemas
class RegisterRequest(BaseModel):
    email: str
    password: str
    username: str


class RegisterResponse(BaseModel):
    success: bool
    message: str
    access_token: Optional[str] = None
    user: Optional["UserResponse"] = None


# Token response for login
class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse

    model_config = {"from_attributes": True}


# Instruction request schemas
# Fields stay optional so missing values reach the store's own validation
# and come back as 400 with a readable message.
class InstructionCreate(BaseModel):
    recipe_id: Optional[StrictInt] = Field(None, ge=1, le=MAX_DB_INTEGER)
    step_number: Optional[StrictInt] = None
    description: Optional[str] = None


class InstructionBatchItem(BaseModel):
    step_number: Optional[StrictInt] = None
    description: Optional[str] = None


class InstructionBatchCreate(BaseModel):
    recipe_id: Optional[StrictInt] = Field(None, ge=1, le=MAX_DB_INTEGER)
    instructions: Optional[List[InstructionBatchItem]] = None


class InstructionDescriptionUpdate(BaseModel):
    description: Optional[str] = None


class InstructionStepUpdate(BaseModel):
    step_number: Optional[StrictInt] = None


# Instruction response schemas
class InstructionSummary(BaseModel):
    instruction_id: int
    step_number: int
    description: str

    model_config = {"from_attributes": True}


class InstructionResponse(InstructionSummary):
    recipe_id: int


class InstructionListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[InstructionSummary]


class InstructionDetailResponse(BaseModel):
    success: bool = True
    data: InstructionResponse


class InstructionCreatedResponse(BaseModel):
    success: bool = True
    message: str
    data: InstructionResponse


class InstructionBatchCreatedResponse(BaseModel):
    success: bool = True
    message: str
    data: List[InstructionResponse]


class NextStepData(BaseModel):
    recipe_id: int
    next_step_number: int


class NextStepResponse(BaseModel):
    success: bool = True
    data: NextStepData


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None
    errors: Optional[List[Any]] = None
