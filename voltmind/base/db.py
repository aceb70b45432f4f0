import os

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from voltmind.base.models import BaseDbModel

DATABASE_URI = os.environ.get("VOLTMIND_DATABASE_URI", "sqlite+aiosqlite:///voltmind.db")

engine = create_async_engine(DATABASE_URI)
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables() -> None:
    """Create all tables known to the ORM metadata (no-op for existing ones)."""
    # Import models so metadata knows about them
    import voltmind.history.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(BaseDbModel.metadata.create_all)
