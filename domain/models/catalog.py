"""
Plan catalog and weekly menu models.
"""

from sqlalchemy import Column, Integer, Text, Enum as SQLEnum
from sqlalchemy.orm import relationship

from domain.models.database import Base
from domain.models.user import enum_values
from domain.enums import PlanCategory, DietType, Weekday


class Plan(Base):
    """Purchasable offering; immutable after seeding"""

    __tablename__ = "plans"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text)
    price = Column(Integer, nullable=False)  # minor currency units
    duration_days = Column(Integer, nullable=False)
    type = Column(SQLEnum(DietType, values_callable=enum_values, name="diet_type"))
    category = Column(
        SQLEnum(PlanCategory, values_callable=enum_values, name="plan_category"),
        nullable=False,
        default=PlanCategory.MESS,
    )

    subscriptions = relationship("Subscription", back_populates="plan")


class MenuEntry(Base):
    """Breakfast/lunch/dinner for one weekday"""

    __tablename__ = "menu"

    id = Column(Integer, primary_key=True, autoincrement=True)
    day = Column(
        SQLEnum(Weekday, values_callable=enum_values, name="weekday"), nullable=False
    )
    breakfast = Column(Text)
    lunch = Column(Text)
    dinner = Column(Text)
