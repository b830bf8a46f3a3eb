"""
User account model.
"""

from sqlalchemy import Column, Integer, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.enums import UserRole


def enum_values(enum_cls):
    """Persist enum values ("admin") rather than member names ("ADMIN")"""
    return [member.value for member in enum_cls]


class User(Base):
    """Customer or admin, identified by phone number"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    phone = Column(Text, unique=True, nullable=False)
    name = Column(Text)
    address = Column(Text)
    role = Column(
        SQLEnum(UserRole, values_callable=enum_values, name="user_role"),
        nullable=False,
        default=UserRole.USER,
    )

    # Relationships
    subscriptions = relationship("Subscription", back_populates="user")
    catering_requests = relationship("CateringRequest", back_populates="user")
    payments = relationship("Payment", back_populates="user")
