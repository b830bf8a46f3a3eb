from pydantic import BaseModel, Field
from datetime import datetime

from domain.enums import PlanCategory, SubscriptionStatus
from domain.schemas.common_schemas import EntityId


class SubscriptionCreate(BaseModel):
    """Schema for purchasing a plan"""

    user_id: EntityId
    plan_id: EntityId


class PauseRequest(BaseModel):
    id: EntityId = Field(..., description="Subscription id")


class SubscriptionResponse(BaseModel):
    id: int
    user_id: int
    plan_id: int
    start_date: datetime
    end_date: datetime
    status: SubscriptionStatus
    paused_days: int
    max_pause_days: int

    model_config = {"from_attributes": True}


class SubscriptionWithPlanResponse(SubscriptionResponse):
    """Subscription joined with the plan fields the client displays"""

    plan_name: str
    price: int
    plan_category: PlanCategory
