"""
App package - Application configuration and core utilities.
Contains settings and the exception taxonomy.
"""

from app.config import settings, Settings
from app.exceptions import (
    AppError,
    ServiceValidationError,
    PauseLimitError,
    NotFoundError,
)

__all__ = [
    "settings",
    "Settings",
    "AppError",
    "ServiceValidationError",
    "PauseLimitError",
    "NotFoundError",
]
