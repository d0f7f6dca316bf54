"""
Public async operations of the persistence layer, one module per store.

Every operation is a coroutine wrapped in `@transactional`: it opens (or joins)
a transaction, commits on success, and raises a `StoreError` subclass on
failure. Pass `db=<Database>` to run against a specific database.
"""

from chatstore.database.core.users import create_user, get_user, get_user_by_email, verify_user_password
from chatstore.database.core.chats import (
    delete_chat_by_id,
    get_chat_by_id,
    get_chats_by_user_id,
    save_chat,
    update_chat_visibility_by_id,
)
from chatstore.database.core.messages import (
    delete_messages_by_chat_id_after_timestamp,
    get_message_by_id,
    get_messages_by_chat_id,
    save_messages,
)
from chatstore.database.core.documents import (
    delete_documents_by_id_after_timestamp,
    get_document_by_id,
    get_documents_by_id,
    get_documents_by_user_id,
    get_latest_document,
    save_document,
)
from chatstore.database.core.suggestions import (
    get_suggestions_by_document_id,
    resolve_suggestion,
    save_suggestions,
)
from chatstore.database.core.votes import get_votes_by_chat_id, vote_message

__all__ = [
    "create_user",
    "get_user",
    "get_user_by_email",
    "verify_user_password",
    "save_chat",
    "get_chat_by_id",
    "get_chats_by_user_id",
    "delete_chat_by_id",
    "update_chat_visibility_by_id",
    "save_messages",
    "get_messages_by_chat_id",
    "get_message_by_id",
    "delete_messages_by_chat_id_after_timestamp",
    "save_document",
    "get_documents_by_id",
    "get_document_by_id",
    "get_latest_document",
    "get_documents_by_user_id",
    "delete_documents_by_id_after_timestamp",
    "save_suggestions",
    "get_suggestions_by_document_id",
    "resolve_suggestion",
    "vote_message",
    "get_votes_by_chat_id",
]
