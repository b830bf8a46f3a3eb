"""Customer catering request routes"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db
from domain.schemas.common_schemas import MAX_SQLITE_INTEGER
from domain.schemas.catering_schemas import (
    CateringRequestCreate,
    CateringRequestResponse,
)
from domain.schemas.admin_schemas import SuccessResponse
from services.catering_service import CateringService

router = APIRouter(prefix="/catering", tags=["Catering"])
logger = logging.getLogger("wagholi.api.catering")


@router.post("", response_model=SuccessResponse)
def create_catering_request(
    body: CateringRequestCreate, db: Session = Depends(get_db)
):
    logger.debug(
        f"Catering request from user {body.user_id}: "
        f"{body.event_type} on {body.event_date}, pax={body.pax}"
    )
    CateringService.create_request(db, body)
    return SuccessResponse()


@router.get("/{user_id}", response_model=List[CateringRequestResponse])
def list_catering_requests(
    user_id: int = Path(..., ge=1, le=MAX_SQLITE_INTEGER),
    db: Session = Depends(get_db),
):
    requests = CateringService.list_for_user(db, user_id)
    logger.debug(f"Listed {len(requests)} catering requests for user {user_id}")
    return [CateringRequestResponse.model_validate(r) for r in requests]
