"""
Wagholi Mess FastAPI Application
Main entry point: application factory, lifespan, middleware and routers
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import auth, catalog, subscriptions, catering, admin, health

from domain.models import Database
from services.seed_service import SeedService

from app.config import settings, Settings

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    pause_limit_exception_handler,
    service_validation_exception_handler,
    not_found_exception_handler,
    general_exception_handler,
)
from app.exceptions import ServiceValidationError, NotFoundError, PauseLimitError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("wagholi.main")


def open_database(app_settings: Settings) -> Database:
    """Create the schema and seed defaults; any failure here is fatal"""
    database = Database(app_settings.database_url, echo=app_settings.db_echo)
    database.init_schema()
    with database.session() as db:
        seeded = SeedService.seed_all(db)
    _logger.info(f"Seed check complete: {seeded}")
    return database


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for application startup and shutdown.
        Opens the store once, seeds it, and closes it on shutdown.
        """
        _logger.info(f"Starting {app_settings.app_name} in {app_settings.environment.value} mode")

        database: Optional[Database] = None
        for attempt in range(1, app_settings.db_init_attempts + 1):
            try:
                # Run blocking init in a thread to avoid blocking the event loop
                database = await anyio.to_thread.run_sync(open_database, app_settings)
                _logger.info("Database initialization succeeded")
                break
            except Exception as exc:
                _logger.warning(
                    "Database init attempt %d/%d failed: %s",
                    attempt,
                    app_settings.db_init_attempts,
                    exc,
                )
                if attempt < app_settings.db_init_attempts:
                    await anyio.sleep(app_settings.db_init_delay_sec)
                else:
                    _logger.error(
                        "Database initialization failed after %d attempts", attempt
                    )
                    raise

        app.state.database = database
        try:
            yield
        finally:
            _logger.info(f"Shutting down {app_settings.app_name}")
            database.dispose()

    app = FastAPI(
        title=app_settings.api_title,
        version=app_settings.app_version,
        description=app_settings.api_description,
        lifespan=lifespan,
        debug=app_settings.debug,
        openapi_url=(
            f"{app_settings.api_prefix}/openapi.json"
            if not app_settings.is_production()
            else None
        ),
        docs_url=(
            f"{app_settings.api_prefix}/docs" if not app_settings.is_production() else None
        ),
        redoc_url=(
            f"{app_settings.api_prefix}/redoc" if not app_settings.is_production() else None
        ),
    )

    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=app_settings.cors_allow_credentials,
        allow_methods=app_settings.cors_allow_methods,
        allow_headers=app_settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PauseLimitError, pause_limit_exception_handler)
    app.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
    app.add_exception_handler(NotFoundError, not_found_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    for module in (auth, catalog, subscriptions, catering, admin, health):
        app.include_router(module.router, prefix=app_settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
