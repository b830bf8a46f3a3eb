from typing import List, Optional
from sqlalchemy.orm import Session
import logging

from domain.models import User
from domain.enums import UserRole
from repositories import UserRepository
from app.config import settings
from app.exceptions import ServiceValidationError, NotFoundError

logger = logging.getLogger("wagholi.auth")


class AuthService:
    """Phone-number login and profile management"""

    @staticmethod
    def role_for_phone(phone: str, admin_phone: Optional[str] = None) -> UserRole:
        admin_phone = admin_phone if admin_phone is not None else settings.admin_phone
        return UserRole.ADMIN if phone == admin_phone else UserRole.USER

    @staticmethod
    def login(db: Session, phone: str, admin_phone: Optional[str] = None) -> User:
        """
        Find the user registered with ``phone`` or register a new one.

        No OTP or password is checked. The reserved admin number is
        registered with the admin role, any other number as a plain user.
        """
        user_repo = UserRepository(db)
        user = user_repo.get_by_phone(phone)
        if user:
            logger.info(f"login user_id={user.id} created=False")
            return user

        role = AuthService.role_for_phone(phone, admin_phone)
        try:
            user = user_repo.create_user(phone, role=role)
        except ServiceValidationError:
            # Registered concurrently between lookup and insert
            user = user_repo.get_by_phone(phone)
            if user is None:
                raise
            logger.info(f"login user_id={user.id} created=False race=True")
            return user

        logger.info(f"login user_id={user.id} created=True role={role.value}")
        return user

    @staticmethod
    def update_profile(
        db: Session, user_id: int, name: Optional[str], address: Optional[str]
    ) -> User:
        """Set name and address of an existing user"""
        user_repo = UserRepository(db)
        user = user_repo.get_by_id(user_id)
        if not user:
            logger.warning(f"profile_update failed: user {user_id} not found")
            raise NotFoundError(f"User {user_id} not found")

        user = user_repo.update_profile(user, name, address)
        logger.info(f"profile_updated user_id={user_id}")
        return user

    @staticmethod
    def get_all_users(db: Session) -> List[User]:
        """Return all users (no pagination)."""
        return UserRepository(db).get_all()
