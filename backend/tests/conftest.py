"""
BlogAPI Backend: Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own SQLite database (aiosqlite) in a temporary
       directory; the FastAPI app is built fresh and its session dependency
       is pointed at that database.

Fixture Hierarchy:
    engine            → async engine on a per-test SQLite file, schema created
    ├── session_factory → sessions bound to that engine
    │   ├── db_session    → one open session
    │   ├── seeded_posts  → ten generated posts, store reset on teardown
    │   └── test_client   → HTTPX AsyncClient talking to a fresh app
    mock_db_session   → AsyncMock session for failure paths (no database)
"""

import os
import random
import tempfile

# Settings are read at import time; point them at throwaway values first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="blogapi_test_"), "test.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator, Dict, List  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blogapi.database import create_schema, get_db_session  # noqa: E402
from blogapi.main import create_app  # noqa: E402
from blogapi.models.post import Post  # noqa: E402
from blogapi.schemas.post import NewPostDraft  # noqa: E402
from blogapi.services.post_store import post_store  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Seed Data
# ══════════════════════════════════════════════════════════════════════════

TITLES = ["When enough is enough", "Beyond the sea", "Running on empty", "Building a better auto"]
CONTENTS = ["Some content 1", "Some content 2", "Some content 3"]
FIRST_NAMES = ["Bob", "Stan", "Susanne", "Bonny"]
LAST_NAMES = ["Smith", "Robinson", "Blando", "Griffin"]


def generate_post_data() -> Dict:
    """A create-request body with random title, content and author."""
    return {
        "title": random.choice(TITLES),
        "content": random.choice(CONTENTS),
        "author": {
            "firstName": random.choice(FIRST_NAMES),
            "lastName": random.choice(LAST_NAMES),
        },
    }


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def engine(tmp_path):
    test_engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'posts.db'}")
    await create_schema(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_posts(session_factory) -> AsyncGenerator[List[Post], None]:
    """
    Ten stored posts built from generate_post_data().

    Teardown resets the store explicitly, the same drop-all a shared test
    database needs between independent runs.
    """
    async with session_factory() as session:
        posts = [
            await post_store.insert(session, NewPostDraft.model_validate(generate_post_data()))
            for _ in range(10)
        ]
        await session.commit()

    yield posts

    async with session_factory() as session:
        await post_store.reset(session)
        await session.commit()


@pytest.fixture
def mock_db_session():
    """
    A MagicMock that simulates AsyncSession behavior.

    Usage:
        mock_db_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))
        with pytest.raises(StoreUnavailableError):
            await post_store.list_all(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app(session_factory):
    """A fresh app whose session dependency uses the per-test database."""
    application = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    application.dependency_overrides[get_db_session] = override_get_db_session
    return application


@pytest_asyncio.fixture
async def test_client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient routed straight into the app via ASGITransport.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/posts")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
