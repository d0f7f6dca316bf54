"""
Store exceptions and translation of driver errors.

Every failure a caller needs to react to is surfaced as a `StoreError`
subclass. Driver-level errors are translated once, by the outermost
`@transactional` frame, with the original exception chained.
"""

import logging

from sqlalchemy import exc as sa_exc

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
"""PostgreSQL SQLSTATE for unique_violation."""


class StoreError(Exception):
    """Base persistence exception."""

    def __init__(self, message: str, detail: str = None):
        self.message = message
        self.detail = detail or message
        super().__init__(self.message)


class NotFoundError(StoreError):
    """A row the caller required does not exist."""

    def __init__(self, message: str = "Record not found"):
        super().__init__(message)


class ConflictError(StoreError):
    """A unique constraint was violated (e.g. duplicate email)."""

    def __init__(self, message: str = "Record already exists", detail: str = None):
        super().__init__(message, detail)


class ConstraintError(StoreError):
    """A foreign-key, not-null or check constraint was violated."""

    def __init__(self, message: str = "Constraint violated", detail: str = None):
        super().__init__(message, detail)


class TransientError(StoreError):
    """Connection or timeout failure from the store. Safe to retry."""

    def __init__(self, message: str = "Database temporarily unavailable", detail: str = None):
        super().__init__(message, detail)


def _sqlstate(error: sa_exc.DBAPIError) -> str | None:
    orig = error.orig
    # asyncpg exposes `sqlstate`, psycopg exposes `pgcode`
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return code
    cause = getattr(orig, "__cause__", None)
    return getattr(cause, "sqlstate", None)


def _is_unique_violation(error: sa_exc.IntegrityError) -> bool:
    if _sqlstate(error) == UNIQUE_VIOLATION:
        return True
    text = str(error.orig).lower()
    return "unique constraint" in text or "duplicate key" in text


def translate_error(error: Exception) -> Exception:
    """
    Map a SQLAlchemy error onto the `StoreError` taxonomy.

    Parameters
    ----------
    error : Exception
        Exception raised while running a store operation.

    Returns
    -------
    Exception
        A `StoreError` subclass when the error is recognised, otherwise `error`
        itself (propagated unchanged).
    """
    if isinstance(error, StoreError):
        return error
    if isinstance(error, sa_exc.IntegrityError):
        detail = str(error.orig)
        if _is_unique_violation(error):
            return ConflictError(detail=detail)
        return ConstraintError(detail=detail)
    if isinstance(error, (sa_exc.OperationalError, sa_exc.InterfaceError)):
        return TransientError(detail=str(error.orig))
    if isinstance(error, (sa_exc.DisconnectionError, sa_exc.TimeoutError)):
        return TransientError(detail=str(error))
    if isinstance(error, (ConnectionError, TimeoutError)):
        return TransientError(detail=str(error))
    return error
