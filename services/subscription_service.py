from typing import Any, Dict, List, Optional
from sqlalchemy.orm import Session
import logging
from datetime import datetime, timedelta, timezone

from domain.models import Plan, Subscription
from domain.enums import PlanCategory, MAX_PAUSE_DAYS
from repositories import SubscriptionRepository, UserRepository
from services.catalog_service import CatalogService
from app.exceptions import NotFoundError, PauseLimitError

logger = logging.getLogger("wagholi.subscription")


class SubscriptionService:
    """Purchase and pause rules for subscriptions"""

    @staticmethod
    def max_pause_days_for(plan: Plan) -> int:
        """Breakfast plans may be paused 26 days, everything else 4"""
        return MAX_PAUSE_DAYS.get(
            PlanCategory(plan.category), MAX_PAUSE_DAYS[PlanCategory.MESS]
        )

    @staticmethod
    def create_subscription(
        db: Session, user_id: int, plan_id: int, now: Optional[datetime] = None
    ) -> Subscription:
        """
        Subscribe a user to a plan.

        The validity window runs from now for ``plan.duration_days`` days and
        is never recomputed afterwards. The pause ceiling is fixed here from
        the plan category.

        Raises:
            NotFoundError: If the plan or the user does not exist
        """
        plan = CatalogService.get_plan(db, plan_id)

        if not UserRepository(db).exists(user_id):
            logger.warning(f"create_subscription failed: user {user_id} not found")
            raise NotFoundError(f"User {user_id} not found")

        # Stored as naive UTC
        start_date = now or datetime.now(timezone.utc).replace(tzinfo=None)
        end_date = start_date + timedelta(days=plan.duration_days)
        max_pause_days = SubscriptionService.max_pause_days_for(plan)

        subscription = SubscriptionRepository(db).create_subscription(
            user_id=user_id,
            plan_id=plan_id,
            start_date=start_date,
            end_date=end_date,
            max_pause_days=max_pause_days,
        )

        logger.info(
            f"subscription_created subscription_id={subscription.id} user_id={user_id} "
            f"plan_id={plan_id} end_date={end_date.isoformat()} max_pause_days={max_pause_days}"
        )
        return subscription

    @staticmethod
    def pause_subscription(db: Session, subscription_id: int) -> Subscription:
        """
        Record one paused day.

        The end date is left unchanged; pausing only consumes allowance.

        Raises:
            NotFoundError: If the subscription does not exist
            PauseLimitError: If ``paused_days`` already equals ``max_pause_days``
        """
        repo = SubscriptionRepository(db)
        updated = repo.increment_paused_days(subscription_id)
        subscription = repo.get_by_id(subscription_id)

        if subscription is None:
            logger.warning(f"pause failed: subscription {subscription_id} not found")
            raise NotFoundError(f"Subscription {subscription_id} not found")

        db.refresh(subscription)
        if not updated:
            logger.info(
                f"pause_rejected subscription_id={subscription_id} "
                f"paused_days={subscription.paused_days} max={subscription.max_pause_days}"
            )
            raise PauseLimitError(
                details={
                    "subscription_id": subscription_id,
                    "paused_days": subscription.paused_days,
                    "max_pause_days": subscription.max_pause_days,
                }
            )

        logger.info(
            f"subscription_paused subscription_id={subscription_id} "
            f"paused_days={subscription.paused_days}/{subscription.max_pause_days}"
        )
        return subscription

    @staticmethod
    def list_for_user(db: Session, user_id: int) -> List[Dict[str, Any]]:
        """Subscriptions of a user with plan name, price and category"""
        return SubscriptionRepository(db).list_for_user_with_plan(user_id)
