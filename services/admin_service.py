from sqlalchemy.orm import Session
import logging

from domain.enums import (
    CateringStatus,
    PaymentStatus,
    PlanCategory,
    SubscriptionStatus,
)
from domain.schemas.admin_schemas import AdminStatsResponse
from repositories import (
    CateringRepository,
    PaymentRepository,
    SubscriptionRepository,
)

logger = logging.getLogger("wagholi.admin")


class AdminService:
    """Read-only aggregates for the admin dashboard"""

    @staticmethod
    def get_stats(db: Session) -> AdminStatsResponse:
        subs = SubscriptionRepository(db)
        stats = AdminStatsResponse(
            active_subscribers=subs.count_by_status(SubscriptionStatus.ACTIVE),
            # All successful payments, not only the current month
            monthly_revenue=PaymentRepository(db).total_amount(PaymentStatus.SUCCESS),
            pending_catering=CateringRepository(db).count_by_status(
                CateringStatus.PENDING
            ),
            breakfast_subscribers=subs.count_active_by_category(PlanCategory.BREAKFAST),
            mess_subscribers=subs.count_active_by_category(PlanCategory.MESS),
        )
        logger.debug(f"admin_stats {stats.model_dump()}")
        return stats
