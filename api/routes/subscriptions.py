"""Subscription purchase and pause routes"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db
from domain.schemas.common_schemas import MAX_SQLITE_INTEGER
from domain.schemas.subscription_schemas import (
    SubscriptionCreate,
    PauseRequest,
    SubscriptionWithPlanResponse,
)
from domain.schemas.admin_schemas import SuccessResponse
from services.subscription_service import SubscriptionService

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])
logger = logging.getLogger("wagholi.api.subscriptions")


@router.post("/pause", response_model=SuccessResponse)
def pause_subscription(body: PauseRequest, db: Session = Depends(get_db)):
    """
    Use one day of the subscription's pause allowance.

    Returns 400 with ``error: "Max pause limit reached"`` once the allowance
    is exhausted and 404 for an unknown subscription.
    """
    logger.debug(f"Pause requested for subscription {body.id}")
    SubscriptionService.pause_subscription(db, body.id)
    return SuccessResponse()


@router.get("/{user_id}", response_model=List[SubscriptionWithPlanResponse])
def list_subscriptions(
    user_id: int = Path(..., ge=1, le=MAX_SQLITE_INTEGER),
    db: Session = Depends(get_db),
):
    """All subscriptions of a user with plan name, price and category."""
    rows = SubscriptionService.list_for_user(db, user_id)
    logger.debug(f"Listed {len(rows)} subscriptions for user {user_id}")
    return [SubscriptionWithPlanResponse.model_validate(r) for r in rows]


@router.post("", response_model=SuccessResponse)
def create_subscription(body: SubscriptionCreate, db: Session = Depends(get_db)):
    logger.debug(f"Subscription requested: user={body.user_id}, plan={body.plan_id}")
    SubscriptionService.create_subscription(db, body.user_id, body.plan_id)
    return SuccessResponse()
