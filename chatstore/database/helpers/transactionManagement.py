"""
Database Transaction Management
===============================

This module provides utilities for managing SQLAlchemy `AsyncSession` objects
using Python context variables and a decorator-based transaction wrapper.

It allows seamless propagation of a database session across coroutine calls
without explicitly threading it through arguments. Coroutines decorated with
``@transactional`` run inside a managed transactional context, and nested
decorated calls join the outer transaction.

Key features
~~~~~~~~~~~~
- Context variable to store the active session
- Implicit reuse of existing sessions
- Automatic commit and rollback handling
- Translation of driver errors into `StoreError` subclasses
- Clean session closure after execution
- Optional ``db=`` keyword to pick the `Database` a call runs against

"""

import contextvars
import logging
from functools import wraps

from chatstore.database.config.connection_engine import get_database
from chatstore.database.exceptions import translate_error

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------
# Context variable to store the current database session.
# --------------------------------------------------------------------
db_session_context = contextvars.ContextVar("db_session_context", default=None)
"""Context variable storing the active SQLAlchemy `AsyncSession`."""


def transactional(func):
    """
    Decorator to wrap coroutines in a managed SQLAlchemy transaction.

    Ensures that:
    - If a session already exists in context, it is reused.
    - Otherwise, a new session is opened from ``db`` (or the default
      `Database`), committed, and closed.
    - On errors, the session is rolled back, closed, and the error is
      translated (see `chatstore.database.exceptions.translate_error`).

    Parameters
    ----------
    func : coroutine function
        The coroutine to wrap. It must accept a `session` keyword argument.

    Returns
    -------
    coroutine function
        The wrapped coroutine, executed within a database transaction.
        Callers may pass ``db=<Database>``; it is not forwarded to ``func``.

    Example
    -------
    >>> @transactional
    ... async def save_chat(user_id: str, title: str, session=None):
    ...     session.add(Chat(user_id=user_id, title=title))
    ...
    >>> chat = await save_chat("u1", "Hello", db=database)
    """
    @wraps(func)
    async def wrap_func(*args, db=None, **kwargs):
        session = db_session_context.get()
        if session is not None:
            return await func(*args, session=session, **kwargs)

        database = db or get_database()
        session = database.session_factory()
        token = db_session_context.set(session)

        try:
            result = await func(*args, session=session, **kwargs)
            await session.flush()
            await session.commit()
        except Exception as e:
            await session.rollback()
            logger.warning("Rolled back %s: %s", func.__qualname__, e)
            translated = translate_error(e)
            if translated is e:
                raise
            raise translated from e
        finally:
            await session.close()
            db_session_context.reset(token)

        return result

    return wrap_func
