"""Plan catalog and weekly menu routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from typing import List

from api.dependencies import get_db
from domain.schemas.catalog_schemas import (
    PlanResponse,
    MenuEntryResponse,
    MenuUpdateRequest,
)
from domain.schemas.admin_schemas import SuccessResponse
from services.catalog_service import CatalogService

router = APIRouter(tags=["Catalog"])
logger = logging.getLogger("wagholi.api.catalog")


@router.get("/plans", response_model=List[PlanResponse])
def list_plans(db: Session = Depends(get_db)):
    plans = CatalogService.list_plans(db)
    logger.debug(f"Listed {len(plans)} plans")
    return [PlanResponse.model_validate(p) for p in plans]


@router.get("/menu", response_model=List[MenuEntryResponse])
def get_menu(db: Session = Depends(get_db)):
    """Return the seven weekday menu rows, Monday first."""
    entries = CatalogService.get_menu(db)
    return [MenuEntryResponse.model_validate(e) for e in entries]


@router.post("/menu", response_model=SuccessResponse)
def update_menu(body: MenuUpdateRequest, db: Session = Depends(get_db)):
    """Overwrite breakfast, lunch and dinner for one day."""
    logger.info(f"Menu update requested for {body.day.value}")
    CatalogService.update_menu_day(db, body.day, body.breakfast, body.lunch, body.dinner)
    return SuccessResponse()
