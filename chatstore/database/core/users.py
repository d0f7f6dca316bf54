"""
User store operations.

All functions are wrapped with the `@transactional` decorator, which manages
the `AsyncSession` and the transaction. Callers never pass `session`; they may
pass `db=` to pick the `Database`.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.daos.user_dao import UserDao
from chatstore.database.entities.user import User
from chatstore.database.helpers.transactionManagement import transactional

logger = logging.getLogger(__name__)


@transactional
async def create_user(email: str, password: str, hasher=None, *, session: AsyncSession = None) -> User:
    """
    Create a user, storing only a bcrypt hash of the password.

    Parameters
    ----------
    email : str
        Email address (must be unique).
    password : str
        Plaintext password.
    hasher : object | None
        Password hasher; `EncryptionDec` when omitted.
    session : AsyncSession
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    User
        The created user.

    Raises
    ------
    ConflictError
        If a user with this email already exists.
    """
    user = await UserDao(hasher).createUser(session, email=email, password=password)
    logger.info("Created user %s", user.id)
    return user


@transactional
async def get_user(email: str, *, session: AsyncSession = None) -> User | None:
    """
    Fetch a user by email.

    Returns
    -------
    User | None
        The user, or None when no user has this email.
    """
    return await UserDao().fetchUserByEmail(session, email)


get_user_by_email = get_user


@transactional
async def verify_user_password(email: str, password: str, hasher=None, *, session: AsyncSession = None) -> User | None:
    """
    Return the user when `password` matches the stored hash, otherwise None.

    An unknown email and a wrong password are indistinguishable to the caller.
    """
    dao = UserDao(hasher)
    user = await dao.fetchUserByEmail(session, email)
    if user is None:
        return None
    if await dao.checkPassword(user, password):
        return user
    return None
