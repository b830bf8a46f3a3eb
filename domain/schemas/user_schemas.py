from pydantic import BaseModel, Field
from typing import Optional

from domain.enums import UserRole
from domain.schemas.common_schemas import EntityId


class LoginRequest(BaseModel):
    """Phone-number login; unknown numbers are registered on the spot"""

    phone: str = Field(..., min_length=1, max_length=20, description="Phone number")


class ProfileUpdateRequest(BaseModel):
    id: EntityId = Field(..., description="User id")
    name: Optional[str] = Field(None, max_length=200)
    address: Optional[str] = Field(None, max_length=500)


class UserResponse(BaseModel):
    id: int
    phone: str
    name: Optional[str] = None
    address: Optional[str] = None
    role: UserRole

    model_config = {"from_attributes": True}


class UserEnvelope(BaseModel):
    """Login and profile responses wrap the user"""

    user: UserResponse
