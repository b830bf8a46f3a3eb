"""
Domain enums for the Wagholi Mess application.
Contains all enumeration types used across the domain models and schemas.
"""

import enum


class UserRole(str, enum.Enum):
    """Account roles"""

    USER = "user"
    ADMIN = "admin"


class PlanCategory(str, enum.Enum):
    """Plan catalog categories; each has its own pause allowance"""

    MESS = "mess"
    BREAKFAST = "breakfast"


class DietType(str, enum.Enum):
    """Dietary type of a plan"""

    VEG = "veg"
    NON_VEG = "non-veg"


class SubscriptionStatus(str, enum.Enum):
    """Subscription lifecycle states"""

    ACTIVE = "active"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class CateringStatus(str, enum.Enum):
    """Catering request workflow states"""

    PENDING = "pending"
    QUOTED = "quoted"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"
    REJECTED = "rejected"


class PaymentStatus(str, enum.Enum):
    """Payment outcomes"""

    PENDING = "pending"
    SUCCESS = "success"
    FAILED = "failed"


class Weekday(str, enum.Enum):
    """Menu days, Monday first"""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


# Pause ceiling per plan category, fixed on the subscription at creation time
MAX_PAUSE_DAYS = {
    PlanCategory.MESS: 4,
    PlanCategory.BREAKFAST: 26,
}
