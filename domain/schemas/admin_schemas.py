from pydantic import BaseModel, Field


class AdminStatsResponse(BaseModel):
    """Dashboard counters; serialized with camelCase keys"""

    active_subscribers: int = Field(..., alias="activeSubscribers")
    monthly_revenue: int = Field(0, alias="monthlyRevenue")
    pending_catering: int = Field(..., alias="pendingCatering")
    breakfast_subscribers: int = Field(..., alias="breakfastSubscribers")
    mess_subscribers: int = Field(..., alias="messSubscribers")

    model_config = {"populate_by_name": True}


class SuccessResponse(BaseModel):
    success: bool = True
