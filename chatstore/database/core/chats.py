"""
Chat store operations.

Each function runs in one transaction (see `@transactional`). Deleting a chat
removes its votes, then its messages, then the chat row, so foreign keys are
never violated and a failure at any step leaves everything in place.
"""

import logging
from datetime import datetime
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.daos.chat_dao import ChatDao
from chatstore.database.daos.message_dao import MessagesDao
from chatstore.database.daos.vote_dao import VoteDao
from chatstore.database.entities.chats import VISIBILITY_TYPES, Chat
from chatstore.database.exceptions import NotFoundError
from chatstore.database.helpers.transactionManagement import transactional

logger = logging.getLogger(__name__)


@transactional
async def save_chat(
    user_id: str,
    title: str,
    id: str | None = None,
    created_at: datetime | None = None,
    *,
    session: AsyncSession = None,
) -> Chat:
    """
    Create a chat.

    Parameters
    ----------
    user_id : str
        Owner of the chat.
    title : str
        Title of the chat.
    id : str | None
        Caller-supplied id (idempotency); generated when omitted.
    created_at : datetime | None
        Creation time; now when omitted.
    session : AsyncSession
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    Chat
        The new chat, visibility "private".
    """
    chat = await ChatDao().createChat(session, user_id=user_id, title=title, chat_id=id, created_at=created_at)
    logger.debug("Saved chat %s for user %s", chat.id, user_id)
    return chat


@transactional
async def get_chat_by_id(id: str, with_messages: bool = False, *, session: AsyncSession = None) -> Chat | None:
    """
    Fetch a chat by id.

    Parameters
    ----------
    id : str
        Identifier of the chat.
    with_messages : bool
        Eagerly load `Chat.messages` in chronological order.

    Returns
    -------
    Chat | None
        The chat, or None when it does not exist.
    """
    return await ChatDao().fetchChatById(session, id, with_messages=with_messages)


@transactional
async def get_chats_by_user_id(id: str, *, session: AsyncSession = None) -> List[Chat]:
    """Return the chats owned by user `id`, newest first."""
    return await ChatDao().fetchChatsByUserId(session, id)


@transactional
async def delete_chat_by_id(id: str, *, session: AsyncSession = None) -> Chat:
    """
    Delete a chat together with its votes and messages.

    Returns
    -------
    Chat
        Snapshot of the deleted chat.

    Raises
    ------
    NotFoundError
        If the chat does not exist. Nothing is deleted.
    """
    chat_dao = ChatDao()
    chat = await chat_dao.fetchChatById(session, id)
    if chat is None:
        raise NotFoundError(f"Chat {id} not found")

    votes = await VoteDao().deleteVotesByChatId(session, id)
    messages = await MessagesDao().deleteMessagesByChatId(session, id)
    await chat_dao.deleteChat(session, id)
    logger.info("Deleted chat %s (%d messages, %d votes)", id, messages, votes)
    return chat


@transactional
async def update_chat_visibility_by_id(chat_id: str, visibility: str, *, session: AsyncSession = None) -> Chat:
    """
    Change the visibility of a chat.

    Parameters
    ----------
    chat_id : str
        Identifier of the chat.
    visibility : str
        "private" or "public".

    Raises
    ------
    ValueError
        If `visibility` is not an allowed value.
    NotFoundError
        If the chat does not exist.
    """
    if visibility not in VISIBILITY_TYPES:
        raise ValueError(f"visibility must be one of {VISIBILITY_TYPES}, got {visibility!r}")

    chat_dao = ChatDao()
    chat = await chat_dao.fetchChatById(session, chat_id)
    if chat is None:
        raise NotFoundError(f"Chat {chat_id} not found")
    return await chat_dao.updateChatVisibility(session, chat, visibility)
