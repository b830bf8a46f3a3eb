from pydantic import BaseModel, Field
from typing import Optional

from domain.enums import PlanCategory, DietType, Weekday


class PlanResponse(BaseModel):
    """Schema for a plan catalog entry"""

    id: int
    name: str
    description: Optional[str] = None
    price: int = Field(..., description="Price in minor currency units")
    duration_days: int
    type: Optional[DietType] = None
    category: PlanCategory

    model_config = {"from_attributes": True}


class MenuEntryResponse(BaseModel):
    id: int
    day: Weekday
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None

    model_config = {"from_attributes": True}


class MenuUpdateRequest(BaseModel):
    """Replace the three meals of one weekday"""

    day: Weekday
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None
