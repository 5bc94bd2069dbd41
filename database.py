from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import Pool, StaticPool

from config import settings


def build_engine(url: str, echo: bool = False, poolclass: Optional[type[Pool]] = None) -> AsyncEngine:
    """
    Async engine for SQLite (aiosqlite) or PostgreSQL (asyncpg).
    SQLite gets one shared connection unless another pool class is given.
    """
    kwargs = {"echo": echo}
    if url.split(":", 1)[0].lower().startswith("sqlite"):
        kwargs["poolclass"] = poolclass or StaticPool
        kwargs["connect_args"] = {"check_same_thread": False}
    elif poolclass is not None:
        kwargs["poolclass"] = poolclass
    return create_async_engine(url, **kwargs)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: entities are serialized after the transaction commits
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False, autoflush=False)


engine = build_engine(settings.database_url, echo=settings.debug)
AsyncSessionLocal = build_sessionmaker(engine)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


async def get_db():
    """One session per request. Writes commit inside their own transaction scope."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def create_tables(bind: AsyncEngine) -> None:
    import models  # noqa: F401  (registers tables on Base.metadata)

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db():
    await create_tables(engine)


async def ping_db(session: AsyncSession) -> bool:
    result = await session.execute(text("SELECT 1"))
    return result.scalar() == 1
