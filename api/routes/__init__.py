"""API routes package"""

from . import auth, catalog, subscriptions, catering, admin, health

__all__ = ["auth", "catalog", "subscriptions", "catering", "admin", "health"]
