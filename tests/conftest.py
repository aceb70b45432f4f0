from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from voltmind.base.models import BaseDbModel

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def stations_answer() -> str:
    return (FIXTURES_DIR / "stations_answer.txt").read_text()


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'voltmind.db'}"


@pytest.fixture
async def db_engine(database_url: str) -> AsyncGenerator[AsyncEngine]:
    # Import all models so metadata knows about them
    import voltmind.history.models  # noqa: F401

    engine = create_async_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(BaseDbModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(BaseDbModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    session_factory = async_sessionmaker(
        db_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session
        await session.rollback()
