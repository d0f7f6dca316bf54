"""
DAOs Package - Data Access Layer (SQLAlchemy 2.0 asyncio)
=========================================================

The `daos` package provides the Data Access Layer. It encapsulates all
interactions with the SQLAlchemy ORM entities, providing clean query APIs for
the operations in `core` while hiding direct query details.

Conventions
-----------
- SQLAlchemy 2.0 `select()` / `delete()` statements on an `AsyncSession`
- Session lifecycle (open/commit/rollback) is handled by callers
- DAOs log and surface exceptions so upper layers decide error policy

Contents
--------
- UserDao
    * Creates users with password hashing (injectable hasher)
    * Fetches users by email or id, checks passwords

- ChatDao
    * Creates chats, fetches by id (optionally with messages) or owner
    * Updates visibility, deletes the chat row

- MessagesDao
    * Bulk-creates messages, fetches by chat (chronological) or id
    * Deletes messages of a chat, optionally from a timestamp on

- VoteDao
    * Atomic upsert keyed on (chat_id, message_id)
    * Fetches by chat, deletes by chat or message ids

- DocumentDao
    * Appends document versions, fetches history / latest / by owner
    * Deletes versions created after a timestamp

- SuggestionDao
    * Bulk-creates suggestions, fetches by document or id, marks resolved
    * Deletes suggestions pinned to versions created after a timestamp
"""

from chatstore.database.daos.user_dao import UserDao
from chatstore.database.daos.chat_dao import ChatDao
from chatstore.database.daos.message_dao import MessagesDao
from chatstore.database.daos.vote_dao import VoteDao
from chatstore.database.daos.document_dao import DocumentDao
from chatstore.database.daos.suggestion_dao import SuggestionDao

__all__ = ["UserDao", "ChatDao", "MessagesDao", "VoteDao", "DocumentDao", "SuggestionDao"]
