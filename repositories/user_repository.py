"""
User Repository - Data access layer for user accounts
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from domain.enums import UserRole
from app.exceptions import ServiceValidationError


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_phone(self, phone: str) -> Optional[User]:
        """Get user by phone number"""
        return self.db.query(User).filter(User.phone == phone).first()

    def create_user(self, phone: str, role: UserRole = UserRole.USER) -> User:
        """Create a new user; raises if the phone is already registered"""
        user = User(phone=phone, role=role)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ServiceValidationError(f"User with phone {phone} already exists")

    def update_profile(self, user: User, name: Optional[str], address: Optional[str]) -> User:
        """Set display name and address"""
        user.name = name
        user.address = address
        return self.update(user)
