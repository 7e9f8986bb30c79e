"""Database initialization script."""
import asyncio
import logging

from messagely.database import init_db

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s - %(message)s")
logger = logging.getLogger("init_db")


async def init_database():
    """Create all tables."""
    logger.info("Creating database tables...")
    await init_db()
    logger.info("Database initialization complete!")


if __name__ == "__main__":
    asyncio.run(init_database())
