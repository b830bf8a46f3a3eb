"""
Subscription and payment models.
"""

from sqlalchemy import (
    Column,
    Integer,
    Text,
    DateTime,
    ForeignKey,
    CheckConstraint,
    Enum as SQLEnum,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base
from domain.models.user import enum_values
from domain.enums import SubscriptionStatus, PaymentStatus


class Subscription(Base):
    """A user's purchase of a plan with a fixed validity window and pause allowance"""

    __tablename__ = "subscriptions"
    __table_args__ = (
        CheckConstraint(
            "paused_days >= 0 AND paused_days <= max_pause_days",
            name="ck_subscriptions_paused_days",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    plan_id = Column(Integer, ForeignKey("plans.id"), nullable=False)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    status = Column(
        SQLEnum(
            SubscriptionStatus, values_callable=enum_values, name="subscription_status"
        ),
        nullable=False,
        default=SubscriptionStatus.ACTIVE,
    )
    paused_days = Column(Integer, nullable=False, default=0)
    max_pause_days = Column(Integer, nullable=False, default=4)

    user = relationship("User", back_populates="subscriptions")
    plan = relationship("Plan", back_populates="subscriptions")


class Payment(Base):
    """Payment record; summed by the admin revenue figure"""

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"))
    amount = Column(Integer, nullable=False)
    status = Column(
        SQLEnum(PaymentStatus, values_callable=enum_values, name="payment_status")
    )
    payment_id = Column(Text)  # external gateway reference
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="payments")
