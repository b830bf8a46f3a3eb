"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.common_schemas import EntityId, MAX_SQLITE_INTEGER
from domain.schemas.user_schemas import (
    LoginRequest,
    ProfileUpdateRequest,
    UserResponse,
    UserEnvelope,
)
from domain.schemas.catalog_schemas import (
    PlanResponse,
    MenuEntryResponse,
    MenuUpdateRequest,
)
from domain.schemas.subscription_schemas import (
    SubscriptionCreate,
    PauseRequest,
    SubscriptionResponse,
    SubscriptionWithPlanResponse,
)
from domain.schemas.catering_schemas import (
    CateringRequestCreate,
    CateringStatusUpdate,
    CateringRequestResponse,
    CateringRequestAdminResponse,
)
from domain.schemas.admin_schemas import AdminStatsResponse, SuccessResponse

__all__ = [
    # Shared field types
    "EntityId",
    "MAX_SQLITE_INTEGER",
    # User schemas
    "LoginRequest",
    "ProfileUpdateRequest",
    "UserResponse",
    "UserEnvelope",
    # Catalog schemas
    "PlanResponse",
    "MenuEntryResponse",
    "MenuUpdateRequest",
    # Subscription schemas
    "SubscriptionCreate",
    "PauseRequest",
    "SubscriptionResponse",
    "SubscriptionWithPlanResponse",
    # Catering schemas
    "CateringRequestCreate",
    "CateringStatusUpdate",
    "CateringRequestResponse",
    "CateringRequestAdminResponse",
    # Admin schemas
    "AdminStatsResponse",
    "SuccessResponse",
]
