from pydantic import BaseModel, Field
from typing import Optional
from datetime import date

from domain.enums import CateringStatus
from domain.schemas.common_schemas import EntityId, MAX_SQLITE_INTEGER


class CateringRequestCreate(BaseModel):
    """Schema for a new event catering inquiry"""

    user_id: EntityId
    event_type: str = Field(..., min_length=1, description="e.g. 'Wedding', 'Birthday'")
    event_date: date
    pax: int = Field(..., gt=0, le=MAX_SQLITE_INTEGER, description="Expected headcount")
    requirements: Optional[str] = None


class CateringStatusUpdate(BaseModel):
    """Admin update of workflow status and quote"""

    id: EntityId
    status: CateringStatus
    quote_amount: Optional[int] = Field(
        None, ge=0, le=MAX_SQLITE_INTEGER, description="Quote in minor currency units"
    )


class CateringRequestResponse(BaseModel):
    id: int
    user_id: int
    event_type: str
    event_date: date
    pax: int
    requirements: Optional[str] = None
    status: CateringStatus
    quote_amount: Optional[int] = None

    model_config = {"from_attributes": True}


class CateringRequestAdminResponse(CateringRequestResponse):
    """Catering request with the requester's identity"""

    user_name: Optional[str] = None
    user_phone: str
