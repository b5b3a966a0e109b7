"""
Create all tables

    python -m app.db.init_db
"""
import asyncio
import logging

from app.db.database import Base, engine
import app.models  # noqa: F401  registers the mappers

logger = logging.getLogger(__name__)


async def create_tables():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(create_tables())
    logger.info("Tables created: %s", ", ".join(sorted(Base.metadata.tables)))
