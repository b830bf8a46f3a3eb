"""
Catering request model.
"""

from sqlalchemy import Column, Integer, Text, Date, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.models.user import enum_values
from domain.enums import CateringStatus


class CateringRequest(Base):
    """Event catering inquiry; quoted and moved through its states by an admin"""

    __tablename__ = "catering_requests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    event_type = Column(Text, nullable=False)
    event_date = Column(Date, nullable=False)
    pax = Column(Integer, nullable=False)
    requirements = Column(Text)
    status = Column(
        SQLEnum(CateringStatus, values_callable=enum_values, name="catering_status"),
        nullable=False,
        default=CateringStatus.PENDING,
    )
    quote_amount = Column(Integer, nullable=True)

    user = relationship("User", back_populates="catering_requests")
