from typing import Any, Dict, List
from sqlalchemy.orm import Session
import logging

from domain.enums import PlanCategory, DietType, Weekday
from repositories import PlanRepository, MenuRepository

logger = logging.getLogger("wagholi.seed")

DEFAULT_PLANS: List[Dict[str, Any]] = [
    # Mess plans
    {"name": "Veg Basic", "description": "Lunch only - 26 days", "price": 2400, "duration_days": 26, "type": DietType.VEG, "category": PlanCategory.MESS},
    {"name": "Veg Premium", "description": "Lunch + Dinner - 26 days", "price": 3800, "duration_days": 26, "type": DietType.VEG, "category": PlanCategory.MESS},
    {"name": "Non-Veg Combo", "description": "Lunch + Dinner + Chicken 3 days/week", "price": 4500, "duration_days": 26, "type": DietType.NON_VEG, "category": PlanCategory.MESS},
    # Breakfast plans
    {"name": "Breakfast Basic", "description": "Mon–Sat - 26 days", "price": 1200, "duration_days": 26, "type": DietType.VEG, "category": PlanCategory.BREAKFAST},
    {"name": "Breakfast Premium", "description": "Mon–Sat + Special Sunday - 30 days", "price": 1600, "duration_days": 30, "type": DietType.VEG, "category": PlanCategory.BREAKFAST},
]

DEFAULT_MENU: Dict[str, str] = {
    "breakfast": "Poha / Upma / Idli",
    "lunch": "Dal Tadka, Jeera Rice, Roti, Sabzi",
    "dinner": "Paneer Masala, Roti, Rice, Salad",
}


class SeedService:
    """Populates the plan catalog and weekly menu on an empty store"""

    @staticmethod
    def seed_plans(db: Session) -> int:
        """Insert the default plans if the catalog is empty. Returns rows inserted."""
        repo = PlanRepository(db)
        if repo.count() > 0:
            return 0
        plans = repo.bulk_create(DEFAULT_PLANS)
        logger.info(f"plans_seeded count={len(plans)}")
        return len(plans)

    @staticmethod
    def seed_menu(db: Session) -> int:
        """Insert one default menu row per weekday if the menu is empty"""
        repo = MenuRepository(db)
        if repo.count() > 0:
            return 0
        entries = repo.bulk_create([{"day": day, **DEFAULT_MENU} for day in Weekday])
        logger.info(f"menu_seeded count={len(entries)}")
        return len(entries)

    @staticmethod
    def seed_all(db: Session) -> Dict[str, int]:
        return {
            "plans": SeedService.seed_plans(db),
            "menu": SeedService.seed_menu(db),
        }
