import logging
from pathlib import Path
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool
from finance_tracker.config import settings

logger = logging.getLogger(__name__)

_url = make_url(settings.DATABASE_URL)
_is_sqlite = _url.get_backend_name() == "sqlite"

_engine_kwargs = {"poolclass": NullPool} if _is_sqlite else {"pool_pre_ping": True}
engine = create_async_engine(settings.DATABASE_URL, **_engine_kwargs)

if _is_sqlite:
    # SQLite ships with foreign keys off; every new connection turns them on
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

AsyncSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


async def init_db():
    # models must be imported so their tables are registered on Base.metadata
    from finance_tracker.models import category, profile, transaction  # noqa: F401

    if _is_sqlite and _url.database and _url.database != ":memory:":
        Path(_url.database).parent.mkdir(parents=True, exist_ok=True)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready at %s", _url.render_as_string(hide_password=True))


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session
