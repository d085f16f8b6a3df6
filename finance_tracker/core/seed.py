import logging
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from finance_tracker.models.category import GlobalCategory
from finance_tracker.services.catalog import DEFAULT_GLOBAL_CATEGORIES

logger = logging.getLogger(__name__)


async def seed_global_categories(db: AsyncSession, categories: list[dict] | None = None) -> int:
    if categories is None:
        categories = DEFAULT_GLOBAL_CATEGORIES

    result = await db.execute(select(func.count(GlobalCategory.id)))
    count = result.scalar()
    if count > 0:
        logger.info("Database already has %d global categories. Skipping seed.", count)
        return 0

    db.add_all([GlobalCategory(**cat) for cat in categories])
    await db.commit()
    logger.info("Seeded %d global categories.", len(categories))
    return len(categories)
