from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import Plan, MenuEntry
from domain.enums import Weekday
from repositories import PlanRepository, MenuRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("wagholi.catalog")


class CatalogService:
    """Read access to plans, read/write access to the weekly menu"""

    @staticmethod
    def list_plans(db: Session) -> List[Plan]:
        return PlanRepository(db).get_all()

    @staticmethod
    def get_plan(db: Session, plan_id: int) -> Plan:
        plan = PlanRepository(db).get_by_id(plan_id)
        if not plan:
            logger.warning(f"plan lookup failed: plan {plan_id} not found")
            raise NotFoundError(f"Plan {plan_id} not found")
        return plan

    @staticmethod
    def get_menu(db: Session) -> List[MenuEntry]:
        return MenuRepository(db).get_all()

    @staticmethod
    def update_menu_day(
        db: Session,
        day: Weekday,
        breakfast: Optional[str],
        lunch: Optional[str],
        dinner: Optional[str],
    ) -> None:
        """Overwrite the meals of one weekday"""
        updated = MenuRepository(db).update_day(day, breakfast, lunch, dinner)
        if not updated:
            logger.warning(f"menu_update failed: no row for day={day.value}")
            raise NotFoundError(f"Menu for {day.value} not found")
        logger.info(f"menu_updated day={day.value}")
