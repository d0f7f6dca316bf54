"""
Message store operations.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, List, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.daos.message_dao import MessagesDao
from chatstore.database.daos.vote_dao import VoteDao
from chatstore.database.entities.messages import Message
from chatstore.database.helpers.transactionManagement import transactional
from chatstore.database.helpers.types import utcnow

logger = logging.getLogger(__name__)


@transactional
async def save_messages(
    chat_id: str,
    messages: Sequence[Mapping[str, Any]],
    *,
    session: AsyncSession = None,
) -> List[Message]:
    """
    Insert a batch of messages into a chat, all or nothing.

    Parameters
    ----------
    chat_id : str
        Chat the messages belong to.
    messages : Sequence[Mapping[str, Any]]
        Items with `role` and `content`, and optionally `id` and `created_at`.
        Items without `created_at` are stamped from one "now", each a
        microsecond after the previous one, so insertion order is chronological.
    session : AsyncSession
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    list[Message]
        The inserted messages, in the order given.

    Raises
    ------
    ConstraintError
        If the chat does not exist. Nothing is written.
    """
    now = utcnow()
    rows = [
        Message(
            chat_id=chat_id,
            role=item["role"],
            content=item["content"],
            message_id=item.get("id"),
            created_at=item.get("created_at") or now + timedelta(microseconds=position),
        )
        for position, item in enumerate(messages)
    ]
    saved = await MessagesDao().createMessages(session, rows)
    logger.debug("Saved %d messages in chat %s", len(saved), chat_id)
    return saved


@transactional
async def get_messages_by_chat_id(id: str, *, session: AsyncSession = None) -> List[Message]:
    """Return the messages of chat `id`, oldest first."""
    return await MessagesDao().fetchMessagesByChatId(session, id)


@transactional
async def get_message_by_id(id: str, *, session: AsyncSession = None) -> Message | None:
    """Return message `id`, or None when it does not exist."""
    return await MessagesDao().fetchMessageById(session, id)


@transactional
async def delete_messages_by_chat_id_after_timestamp(
    chat_id: str,
    timestamp: datetime,
    *,
    session: AsyncSession = None,
) -> int:
    """
    Truncate a chat's history from `timestamp` on (inclusive).

    Votes on the removed messages are deleted first. Messages created strictly
    before `timestamp` are kept.

    Returns
    -------
    int
        Number of messages deleted.
    """
    message_dao = MessagesDao()
    message_ids = await message_dao.fetchMessageIdsByChatIdAfterTimestamp(session, chat_id, timestamp)
    if not message_ids:
        return 0

    await VoteDao().deleteVotesByMessageIds(session, chat_id, message_ids)
    count = await message_dao.deleteMessagesByChatId(session, chat_id, timestamp=timestamp)
    logger.info("Deleted %d messages of chat %s from %s", count, chat_id, timestamp)
    return count
