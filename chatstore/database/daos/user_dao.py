"""
User DAO

Purpose
-------
Thin data-access layer for the `User` ORM entity. Provides:
- Creation with password hashing
- Lookup by email or id

Design
------
- The DAO expects an active SQLAlchemy `AsyncSession` supplied by the caller.
- Business rules and transaction boundaries live in `chatstore.database.core`;
  the DAO focuses on persistence operations.
- Passwords are hashed with the injected hasher (`EncryptionDec` by default)
  before insert. Hashing runs in a worker thread so bcrypt does not block the
  event loop.

Usage
-----
.. code-block:: python

    from chatstore.database.config.connection_engine import Database
    from chatstore.database.daos.user_dao import UserDao

    db = Database("sqlite+aiosqlite://")
    dao = UserDao()
    async with db.session_factory() as session:
        user = await dao.createUser(session, email="roman@tribalchief.com", password="Spear#123")
        await session.commit()
        found = await dao.fetchUserByEmail(session, "roman@tribalchief.com")

Error Handling
--------------
- Each method logs the failure and re-raises.
- A duplicate email surfaces as `IntegrityError` on flush; `@transactional`
  turns it into `ConflictError`.
"""

import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.crypt.encrypt_decrypt import EncryptionDec
from chatstore.database.entities.user import User

logger = logging.getLogger(__name__)


class UserDao:
    """
    Data Access Object (DAO) for managing User entities.

    Parameters
    ----------
    hasher : object | None
        Object exposing `hash_password(text)` and `check_passwords(plain, hashed)`.
        Defaults to `EncryptionDec()`.
    """

    def __init__(self, hasher=None):
        self.hasher = hasher or EncryptionDec()

    async def createUser(self, session: AsyncSession, email: str, password: str) -> User:
        """
        Create a new user with a hashed password.

        Parameters
        ----------
        session : AsyncSession
            Active SQLAlchemy session.
        email : str
            Email address (must be unique).
        password : str
            Plaintext password; only its hash is stored.

        Returns
        -------
        User
            The flushed user row.
        """
        try:
            hashed = await asyncio.to_thread(self.hasher.hash_password, password)
            user = User(email=email, password=hashed)
            session.add(user)
            await session.flush()
            return user
        except Exception as e:
            logger.error("Error in UserDao.createUser. Error Message: %s", e)
            raise

    async def fetchUserByEmail(self, session: AsyncSession, email: str) -> User | None:
        """
        Fetch a user by email.

        Returns
        -------
        User | None
            The matching user, or None.
        """
        try:
            result = await session.scalars(select(User).where(User.email == email).limit(1))
            return result.first()
        except Exception as e:
            logger.error("Error in UserDao.fetchUserByEmail. Error Message: %s", e)
            raise

    async def fetchUserById(self, session: AsyncSession, user_id: str) -> User | None:
        try:
            return await session.get(User, user_id)
        except Exception as e:
            logger.error("Error in UserDao.fetchUserById. Error Message: %s", e)
            raise

    async def checkPassword(self, user: User, password: str) -> bool:
        """Return True when `password` matches the stored hash of `user`."""
        return await asyncio.to_thread(self.hasher.check_passwords, password, user.password)
