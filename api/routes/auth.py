"""Phone login and profile routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_db, get_settings
from app.config import Settings
from domain.schemas.user_schemas import (
    LoginRequest,
    ProfileUpdateRequest,
    UserEnvelope,
    UserResponse,
)
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger("wagholi.api.auth")


@router.post("/login", response_model=UserEnvelope)
def login(
    body: LoginRequest,
    db: Session = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
):
    """Find the user for a phone number, registering it on first login."""
    logger.debug("Login requested")
    user = AuthService.login(db, body.phone, admin_phone=app_settings.admin_phone)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.post("/profile", response_model=UserEnvelope)
def update_profile(body: ProfileUpdateRequest, db: Session = Depends(get_db)):
    """Update name and address of an existing user."""
    logger.debug(f"Profile update requested for user {body.id}")
    user = AuthService.update_profile(db, body.id, body.name, body.address)
    return UserEnvelope(user=UserResponse.model_validate(user))
