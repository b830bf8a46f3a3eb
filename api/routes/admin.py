"""Admin dashboard routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db
from domain.schemas.admin_schemas import AdminStatsResponse, SuccessResponse
from domain.schemas.catering_schemas import (
    CateringRequestAdminResponse,
    CateringStatusUpdate,
)
from domain.schemas.user_schemas import UserResponse
from services.admin_service import AdminService
from services.auth_service import AuthService
from services.catering_service import CateringService

router = APIRouter(prefix="/admin", tags=["Admin"])
logger = logging.getLogger("wagholi.api.admin")


@router.get("/stats", response_model=AdminStatsResponse)
def get_stats(db: Session = Depends(get_db)):
    """Subscriber counts, revenue and pending catering for the dashboard."""
    logger.info("Fetching admin dashboard stats")
    return AdminService.get_stats(db)


@router.get("/catering", response_model=List[CateringRequestAdminResponse])
def list_all_catering(db: Session = Depends(get_db)):
    rows = CateringService.list_all_with_requester(db)
    logger.debug(f"Listed {len(rows)} catering requests for admin")
    return [CateringRequestAdminResponse.model_validate(r) for r in rows]


@router.post("/catering/status", response_model=SuccessResponse)
def update_catering_status(body: CateringStatusUpdate, db: Session = Depends(get_db)):
    logger.info(f"Catering request {body.id} status update to {body.status.value}")
    CateringService.update_status(db, body)
    return SuccessResponse()


@router.get("/users", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    users = AuthService.get_all_users(db)
    logger.debug(f"Listed {len(users)} users for admin")
    return [UserResponse.model_validate(u) for u in users]
