"""
Vote store operations.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.daos.message_dao import MessagesDao
from chatstore.database.daos.vote_dao import VoteDao
from chatstore.database.entities.votes import Vote
from chatstore.database.exceptions import NotFoundError
from chatstore.database.helpers.transactionManagement import transactional

logger = logging.getLogger(__name__)

VOTE_TYPES = ("up", "down")


@transactional
async def vote_message(chat_id: str, message_id: str, type: str, *, session: AsyncSession = None) -> Vote:
    """
    Record an up or down vote on a message.

    Voting again on the same (chat, message) updates the existing vote; the
    write is a single atomic upsert.

    Parameters
    ----------
    chat_id : str
        Chat the message belongs to.
    message_id : str
        Message being voted on.
    type : str
        "up" or "down".

    Returns
    -------
    Vote
        The stored vote.

    Raises
    ------
    ValueError
        If `type` is not "up" or "down".
    NotFoundError
        If the message does not exist in chat `chat_id`.
    """
    if type not in VOTE_TYPES:
        raise ValueError(f"vote type must be one of {VOTE_TYPES}, got {type!r}")

    message = await MessagesDao().fetchMessageById(session, message_id)
    if message is None or message.chat_id != chat_id:
        raise NotFoundError(f"Message {message_id} not found in chat {chat_id}")

    vote = await VoteDao().upsertVote(session, chat_id=chat_id, message_id=message_id, is_upvoted=type == "up")
    logger.debug("Vote %s on message %s of chat %s", type, message_id, chat_id)
    return vote


@transactional
async def get_votes_by_chat_id(id: str, *, session: AsyncSession = None) -> List[Vote]:
    """Return every vote cast in chat `id`."""
    return await VoteDao().fetchVotesByChatId(session, id)
