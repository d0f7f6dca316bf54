"""
Entities Package - SQLAlchemy 2.0 ORM Models (string ids + UTC)
===============================================================

The `entities` package defines the ORM models of the persistence layer, mapping
database tables to Python classes using SQLAlchemy 2.0-typed mappings.
These classes are consumed by DAOs (`daos` package) and returned by the
operations in `core`.

Tech Stack & Conventions
------------------------
- PostgreSQL (asyncpg) in production, SQLite (aiosqlite) in tests
- String identifiers, UUID4 generated when the caller does not supply one
- Timezone-aware timestamps (UTC) through `UTCDateTime`
- Explicit foreign keys, no cascades: parents are deleted after their children

Contents
--------
- User
    A registered user. Unique `email`, bcrypt `password` hash.

- Chat
    A conversation owned by a user.
    * `visibility` ("private" | "public"), private by default
    * view-only `messages` relationship for eager loading

- Message
    One message of a chat: `role`, JSON `content`, `created_at`.

- Vote
    Up/down vote keyed by (`chat_id`, `message_id`).

- Document
    One version of a document, keyed by (`id`, `created_at`).

- Suggestion
    A proposed edit pinned to one document version through the composite
    foreign key (`document_id`, `document_created_at`).
"""

from chatstore.database.entities.user import User
from chatstore.database.entities.chats import Chat, VISIBILITY_TYPES
from chatstore.database.entities.messages import Message
from chatstore.database.entities.votes import Vote
from chatstore.database.entities.documents import Document
from chatstore.database.entities.suggestions import Suggestion

__all__ = [
    "User",
    "Chat",
    "VISIBILITY_TYPES",
    "Message",
    "Vote",
    "Document",
    "Suggestion",
]
