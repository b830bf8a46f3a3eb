"""Health check routes"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
import logging

from api.dependencies import get_database, get_settings
from app.config import Settings
from domain.models import Database

router = APIRouter(tags=["Health"])
logger = logging.getLogger("wagholi.api.health")


@router.get("/health-check")
def health_check(
    database: Database = Depends(get_database),
    app_settings: Settings = Depends(get_settings),
):
    """Basic health check endpoint, including a store round trip"""
    try:
        with database.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "ok"
    except SQLAlchemyError as e:
        logger.exception("Database health check failed")
        db_status = f"error: {e}"
    return {
        "status": "ok",
        "service": app_settings.app_name,
        "version": app_settings.app_version,
        "database": db_status,
    }
