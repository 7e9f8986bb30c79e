"""Shared fixtures: in-memory SQLite database and an HTTP client bound to it."""

from __future__ import annotations

import os

# Must be set before messagely.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from messagely.database import Base, get_db
import messagely.models  # noqa: F401  register all models with Base
from messagely.models.message import Message
from messagely.schemas.auth import RegisterRequest
from messagely.services import user_service

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    """Fresh in-memory database per test; StaticPool keeps a single shared connection."""
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    from messagely.main import app

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def users(db):
    """Two registered users: alice (password 'secret1') and bob (password 'secret2')."""
    alice = await user_service.register(db, RegisterRequest(
        username="alice", password="secret1",
        first_name="Alice", last_name="Anders", phone="+15550001111",
    ))
    bob = await user_service.register(db, RegisterRequest(
        username="bob", password="secret2",
        first_name="Bob", last_name="Brown", phone="+15550002222",
    ))
    return alice, bob


@pytest_asyncio.fixture
async def messages(db, users):
    """alice -> bob twice, bob -> alice once."""
    rows = [
        Message(from_username="alice", to_username="bob", body="hi bob"),
        Message(from_username="alice", to_username="bob", body="you there?"),
        Message(from_username="bob", to_username="alice", body="hey alice"),
    ]
    db.add_all(rows)
    await db.commit()
    return rows
