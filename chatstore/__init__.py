"""
chatstore: async persistence gateway for users, chats, messages, votes,
versioned documents and suggestions, built on SQLAlchemy.

Typical use::

    from chatstore import Database, set_database, core

    db = Database.from_settings()
    set_database(db)
    await db.create_all()
    user = await core.create_user("ada@example.com", "s3cret")
"""

from chatstore.database import core
from chatstore.database.config.connection_engine import Database, get_database, set_database
from chatstore.database.exceptions import (
    ConflictError,
    ConstraintError,
    NotFoundError,
    StoreError,
    TransientError,
)

__version__ = "0.1.0"

__all__ = [
    "core",
    "Database",
    "get_database",
    "set_database",
    "StoreError",
    "NotFoundError",
    "ConflictError",
    "ConstraintError",
    "TransientError",
]
