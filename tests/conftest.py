"""
Pytest configuration and fixtures for the test suite.
"""
import os
from datetime import datetime, timedelta, timezone

import pytest

# Cheap bcrypt and in-memory SQLite before anything reads settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from chatstore.database.config.connection_engine import Database, set_database
from chatstore.database.core import create_user, save_chat


SQLALCHEMY_TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")

T0 = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture()
async def db():
    """Fresh schema for each test, registered as the default database."""
    database = Database(SQLALCHEMY_TEST_DATABASE_URL)
    await database.create_all()
    set_database(database)
    try:
        yield database
    finally:
        set_database(None)
        await database.drop_all()
        await database.dispose()


@pytest.fixture()
async def user(db):
    return await create_user(email="owner@example.com", password="Spear#123")


@pytest.fixture()
async def chat(user):
    return await save_chat(user_id=user.id, title="First chat", id="c1", created_at=T0)


@pytest.fixture()
def at():
    """Timestamp `seconds` after the fixed test epoch."""
    def _at(seconds: int) -> datetime:
        return T0 + timedelta(seconds=seconds)
    return _at
