"""
Plan and Menu Repositories - Data access for the plan catalog and weekly menu
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Plan, MenuEntry
from domain.enums import Weekday


class PlanRepository(BaseRepository[Plan]):
    """Repository for the plan catalog"""

    def __init__(self, db: Session):
        super().__init__(db, Plan)

    def bulk_create(self, plans: List[dict]) -> List[Plan]:
        """Insert several plans in one transaction"""
        plan_objs = [Plan(**plan) for plan in plans]
        self.db.add_all(plan_objs)
        self.db.commit()
        return plan_objs


class MenuRepository(BaseRepository[MenuEntry]):
    """Repository for weekday menu rows"""

    def __init__(self, db: Session):
        super().__init__(db, MenuEntry)

    def update_day(
        self,
        day: Weekday,
        breakfast: Optional[str],
        lunch: Optional[str],
        dinner: Optional[str],
    ) -> int:
        """Overwrite the meals of one day; returns the number of rows updated"""
        count = (
            self.db.query(MenuEntry)
            .filter(MenuEntry.day == day)
            .update(
                {
                    MenuEntry.breakfast: breakfast,
                    MenuEntry.lunch: lunch,
                    MenuEntry.dinner: dinner,
                },
                synchronize_session=False,
            )
        )
        self.db.commit()
        return count

    def bulk_create(self, entries: List[dict]) -> List[MenuEntry]:
        """Insert several menu rows in one transaction"""
        entry_objs = [MenuEntry(**entry) for entry in entries]
        self.db.add_all(entry_objs)
        self.db.commit()
        return entry_objs
