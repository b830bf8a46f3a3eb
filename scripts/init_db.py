#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the tables and seeds the default plans and weekly menu.
"""

import sys
import logging
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import inspect

from app.config import settings
from domain.models import Database
from services.seed_service import SeedService

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("init_db")


def main(database_url: str = None) -> int:
    database_url = database_url or settings.database_url
    logger.info("=" * 60)
    logger.info(f"Initializing {database_url}")
    logger.info("=" * 60)

    database = Database(database_url, echo=settings.db_echo)
    try:
        database.init_schema()
        tables = inspect(database.engine).get_table_names()
        logger.info(f"✓ {len(tables)} tables: {', '.join(tables)}")

        with database.session() as db:
            seeded = SeedService.seed_all(db)
        logger.info(f"✓ Seeded plans={seeded['plans']} menu={seeded['menu']}")
        return 0
    except Exception as e:
        logger.exception(f"✗ Failed to initialize database: {e}")
        return 1
    finally:
        database.dispose()


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
