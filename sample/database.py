"""Database engine and session management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from sample.config.settings import settings

# Tables are created from Base.metadata, so every model module must be imported.
from sample.models import Base  # noqa: F401
from sample.models import log  # noqa: F401
from sample.models import message  # noqa: F401

logger = logging.getLogger(__name__)


def _create_engine() -> AsyncEngine:
    """Create an async engine, without pooling for serverless databases or debug runs."""

    engine_options: dict[str, Any] = {
        "echo": settings.debug,
        "pool_pre_ping": True,
    }
    if settings.database.serverless or settings.debug:
        engine_options["poolclass"] = NullPool

    return create_async_engine(settings.database.url, **engine_options)


engine: AsyncEngine = _create_engine()

SessionFactory = async_sessionmaker(
    engine,
    expire_on_commit=False,
    class_=AsyncSession,
)


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    async with SessionFactory() as session:
        yield session


async def get_session() -> AsyncIterator[AsyncSession]:
    """One session per request; closed once the response has been produced."""

    async with session_scope() as session:
        yield session


async def init_models() -> None:
    """Create missing tables for every registered model."""

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Ensured database tables: %s", ", ".join(sorted(Base.metadata.tables)))


async def dispose_engine() -> None:
    await engine.dispose()
