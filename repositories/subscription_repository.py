"""
Subscription and Payment Repositories - Data access for purchased plans and payments
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Subscription, Plan, Payment
from domain.enums import PlanCategory, SubscriptionStatus, PaymentStatus


class SubscriptionRepository(BaseRepository[Subscription]):
    """Repository for subscription data access"""

    def __init__(self, db: Session):
        super().__init__(db, Subscription)

    def create_subscription(
        self,
        user_id: int,
        plan_id: int,
        start_date: datetime,
        end_date: datetime,
        max_pause_days: int,
    ) -> Subscription:
        """Insert an active subscription with no pauses used"""
        subscription = Subscription(
            user_id=user_id,
            plan_id=plan_id,
            start_date=start_date,
            end_date=end_date,
            status=SubscriptionStatus.ACTIVE,
            paused_days=0,
            max_pause_days=max_pause_days,
        )
        return self.create(subscription)

    def list_for_user_with_plan(self, user_id: int) -> List[Dict[str, Any]]:
        """All subscriptions of a user joined with plan name, price and category"""
        rows = (
            self.db.query(
                Subscription,
                Plan.name.label("plan_name"),
                Plan.price.label("price"),
                Plan.category.label("plan_category"),
            )
            .join(Plan, Subscription.plan_id == Plan.id)
            .filter(Subscription.user_id == user_id)
            .order_by(Subscription.id)
            .all()
        )
        return [
            {
                "id": sub.id,
                "user_id": sub.user_id,
                "plan_id": sub.plan_id,
                "start_date": sub.start_date,
                "end_date": sub.end_date,
                "status": sub.status,
                "paused_days": sub.paused_days,
                "max_pause_days": sub.max_pause_days,
                "plan_name": plan_name,
                "price": price,
                "plan_category": plan_category,
            }
            for sub, plan_name, price, plan_category in rows
        ]

    def increment_paused_days(self, subscription_id: int) -> int:
        """
        Add one paused day if the allowance is not used up.

        Check and increment happen in a single conditional UPDATE, so two
        concurrent calls cannot both pass the ceiling check.

        Returns:
            Number of rows updated (0 when the subscription is missing or at its ceiling)
        """
        count = (
            self.db.query(Subscription)
            .filter(
                Subscription.id == subscription_id,
                Subscription.paused_days < Subscription.max_pause_days,
            )
            .update(
                {Subscription.paused_days: Subscription.paused_days + 1},
                synchronize_session=False,
            )
        )
        self.db.commit()
        return count

    def count_by_status(self, status: SubscriptionStatus) -> int:
        return (
            self.db.query(func.count(Subscription.id))
            .filter(Subscription.status == status)
            .scalar()
            or 0
        )

    def count_active_by_category(self, category: PlanCategory) -> int:
        """Active subscriptions whose plan is in the given category"""
        return (
            self.db.query(func.count(Subscription.id))
            .join(Plan, Subscription.plan_id == Plan.id)
            .filter(
                Subscription.status == SubscriptionStatus.ACTIVE,
                Plan.category == category,
            )
            .scalar()
            or 0
        )


class PaymentRepository(BaseRepository[Payment]):
    """Repository for payment records (read-only in the API)"""

    def __init__(self, db: Session):
        super().__init__(db, Payment)

    def total_amount(self, status: PaymentStatus = PaymentStatus.SUCCESS) -> int:
        """Sum of payment amounts with the given status; 0 when there are none"""
        total: Optional[int] = (
            self.db.query(func.sum(Payment.amount))
            .filter(Payment.status == status)
            .scalar()
        )
        return total or 0
