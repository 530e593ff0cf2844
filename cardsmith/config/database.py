# cardsmith/config/database.py
from typing import AsyncIterator, Tuple

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from cardsmith.config.settings import settings
from cardsmith.infrastructure.database.models import Base


def create_engine_and_sessions(url: str = None) -> Tuple[AsyncEngine, async_sessionmaker]:
    # Created per application so tests can point each app at its own database.
    engine = create_async_engine(url or settings.DATABASE_URL, echo=False)
    session_factory = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    return engine, session_factory


# Dependency for FastAPI routes
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.session_factory() as session:
        yield session


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.execute(text("SELECT 1"))
        await conn.run_sync(Base.metadata.create_all)
