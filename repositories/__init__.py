"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.plan_repository import PlanRepository, MenuRepository
from repositories.subscription_repository import (
    SubscriptionRepository,
    PaymentRepository,
)
from repositories.catering_repository import CateringRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "PlanRepository",
    "MenuRepository",
    "SubscriptionRepository",
    "PaymentRepository",
    "CateringRepository",
]
