"""
Database initialization and verification script.

This script creates the blog tables and verifies database connectivity.
It can be run independently or as part of the application startup.
"""

from asyncio import run as asyncio_run
from logging import getLogger

from app.configs import file_logger
from app.db.database import close_db, init_db
from app.errors.database import DatabaseInitializationError

logger = file_logger(getLogger(__name__))


async def main() -> None:
    """Create tables and verify the database connection."""
    try:
        logger.info("Verifying database connection...")
        await init_db()
        logger.info("Database ready!")
    except Exception as e:
        logger.exception("Failed to connect to database")
        raise DatabaseInitializationError from e
    finally:
        await close_db()


def run() -> None:
    """Console entry point."""
    asyncio_run(main())


if __name__ == "__main__":
    run()
