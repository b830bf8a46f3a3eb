"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import Base, Database
from domain.models.user import User
from domain.models.catalog import Plan, MenuEntry
from domain.models.subscription import Subscription, Payment
from domain.models.catering import CateringRequest

__all__ = [
    # Database
    "Base",
    "Database",
    # User models
    "User",
    # Catalog models
    "Plan",
    "MenuEntry",
    # Subscription models
    "Subscription",
    "Payment",
    # Catering models
    "CateringRequest",
]
