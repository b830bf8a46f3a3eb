"""Services package - Business logic layer"""

from services.auth_service import AuthService
from services.catalog_service import CatalogService
from services.subscription_service import SubscriptionService
from services.catering_service import CateringService
from services.admin_service import AdminService
from services.seed_service import SeedService

__all__ = [
    "AuthService",
    "CatalogService",
    "SubscriptionService",
    "CateringService",
    "AdminService",
    "SeedService",
]
