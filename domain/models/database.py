"""
Database configuration and session management.

The store handle is an explicit ``Database`` object: the application
lifespan constructs it once, hands it to request handlers through a
dependency and disposes it on shutdown.
"""

import logging
from contextlib import contextmanager
from typing import Generator, Iterator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger("wagholi.database")

# Create SQLAlchemy Base
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Engine plus session factory for one database URL."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        connect_args = {}
        if url.startswith("sqlite"):
            # Sync FastAPI endpoints run in a thread pool
            connect_args["check_same_thread"] = False

        self.engine: Engine = create_engine(
            url, echo=echo, future=True, connect_args=connect_args
        )
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(
            bind=self.engine, autoflush=False, future=True
        )

    def init_schema(self) -> None:
        """Create all tables that do not exist yet"""
        # Register every model on Base.metadata before create_all
        import domain.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created successfully")

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Scoped session for scripts and startup code"""
        db = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def get_db_session(self) -> Generator[Session, None, None]:
        """Get database session (for FastAPI dependency injection)"""
        with self.session() as db:
            yield db

    def dispose(self) -> None:
        """Close every pooled connection"""
        self.engine.dispose()
        logger.info("Database connections closed")
