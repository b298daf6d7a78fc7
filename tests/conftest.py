"""Shared fixtures: point the app at a throwaway SQLite database."""

from __future__ import annotations

import asyncio
import os
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

_TMP_DIR = Path(tempfile.mkdtemp(prefix="sample-tests-"))
os.environ["DB_DSN"] = f"sqlite+aiosqlite:///{_TMP_DIR / 'test.db'}"
os.environ["DB_SERVERLESS"] = "true"
os.environ["LOG_FILE"] = str(_TMP_DIR / "app.log")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import delete, select  # noqa: E402

from sample.database import init_models, session_scope  # noqa: E402
from sample.main import app  # noqa: E402
from sample.models import Message, RequestLog  # noqa: E402


async def _reset_tables() -> None:
    await init_models()
    async with session_scope() as session:
        await session.execute(delete(Message))
        await session.execute(delete(RequestLog))
        await session.commit()


async def _select_all(model):
    async with session_scope() as session:
        result = await session.execute(select(model).order_by(model.id))
        return list(result.scalars().all())


@pytest.fixture(autouse=True)
def clean_database():
    """Start every test with empty tables and no dependency overrides."""

    asyncio.run(_reset_tables())
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fetch_messages():
    """Return a callable reading every persisted message ordered by id."""

    return lambda: asyncio.run(_select_all(Message))


@pytest.fixture
def fetch_request_logs():
    return lambda: asyncio.run(_select_all(RequestLog))
