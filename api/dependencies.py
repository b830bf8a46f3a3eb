"""
API dependencies for dependency injection
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from app.config import Settings
from domain.models import Database


def get_settings(request: Request) -> Settings:
    """Settings the running application was created with"""
    return request.app.state.settings


def get_database(request: Request) -> Database:
    """The store-access object opened by the application lifespan"""
    return request.app.state.database


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_database(request).get_db_session()
