import pytest
from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import make_url

from chatstore.database.config.config import settings
from chatstore.database.config.connection_engine import Database, get_database, set_database
from chatstore.database.core import get_chat_by_id, get_messages_by_chat_id, save_chat, save_messages
from chatstore.database.daos.chat_dao import ChatDao
from chatstore.database.exceptions import (
    ConflictError,
    ConstraintError,
    NotFoundError,
    TransientError,
    translate_error,
)
from chatstore.database.helpers.transactionManagement import db_session_context, transactional


class _FakeOrig(Exception):
    def __init__(self, message, sqlstate=None):
        super().__init__(message)
        self.sqlstate = sqlstate


def _integrity(message, sqlstate=None):
    return sa_exc.IntegrityError("INSERT ...", {}, _FakeOrig(message, sqlstate))


def test_translate_unique_violation_by_sqlstate():
    assert isinstance(translate_error(_integrity("boom", sqlstate="23505")), ConflictError)


def test_translate_unique_violation_by_message():
    assert isinstance(translate_error(_integrity("UNIQUE constraint failed: app_user.email")), ConflictError)


def test_translate_foreign_key_violation():
    error = translate_error(_integrity("FOREIGN KEY constraint failed", sqlstate="23503"))

    assert isinstance(error, ConstraintError)
    assert "FOREIGN KEY" in error.detail


def test_translate_operational_error_is_transient():
    error = sa_exc.OperationalError("SELECT 1", {}, _FakeOrig("connection refused"))

    assert isinstance(translate_error(error), TransientError)


def test_translate_passes_unknown_errors_through():
    error = KeyError("role")

    assert translate_error(error) is error


def test_translate_keeps_store_errors():
    error = NotFoundError("gone")

    assert translate_error(error) is error


async def test_nested_operations_share_one_transaction(user):
    @transactional
    async def chat_with_greeting(*, session=None):
        await save_chat(user_id=user.id, title="Greeting", id="g1")
        await save_messages(chat_id="g1", messages=[{"role": "assistant", "content": "hello"}])
        assert db_session_context.get() is session
        raise RuntimeError("abort after both writes")

    with pytest.raises(RuntimeError):
        await chat_with_greeting()

    assert await get_chat_by_id(id="g1") is None
    assert await get_messages_by_chat_id(id="g1") == []
    assert db_session_context.get() is None


async def test_explicit_database_is_used(user):
    other = Database("sqlite+aiosqlite://")
    await other.create_all()
    try:
        assert await get_chat_by_id(id="c1", db=other) is None
    finally:
        await other.dispose()


async def test_foreign_keys_are_enforced(chat):
    await save_messages(chat_id="c1", messages=[{"role": "user", "content": "hi"}])

    @transactional
    async def delete_parent_only(*, session=None):
        await ChatDao().deleteChat(session, "c1")

    with pytest.raises(ConstraintError):
        await delete_parent_only()

    assert await get_chat_by_id(id="c1") is not None


def test_get_database_builds_default_from_settings():
    set_database(None)
    try:
        database = get_database()
        assert database is get_database()
        assert database.url.drivername == make_url(settings.DATABASE_URL).drivername
    finally:
        set_database(None)
