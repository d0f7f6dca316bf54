"""
Vote DAO

Purpose
-------
Data-access layer for the `Vote` ORM entity. Provides:
- Atomic upsert keyed on (`chat_id`, `message_id`)
- Retrieval by chat
- Deletion by chat or by message ids

Design
------
- The upsert is a single ``INSERT .. ON CONFLICT (chat_id, message_id) DO UPDATE``
  built with the dialect-specific insert construct, so concurrent votes on the
  same message cannot race into a duplicate key.
- Dialects without ``ON CONFLICT`` support fall back to `AsyncSession.merge`.
"""

import logging
from typing import Iterable, List

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.entities.votes import Vote

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class VoteDao:
    """
    Data Access Object (DAO) for managing message votes.
    """

    async def upsertVote(self, session: AsyncSession, chat_id: str, message_id: str, is_upvoted: bool) -> Vote:
        """
        Insert a vote, or update the existing one for the same chat and message.

        Parameters
        ----------
        session : AsyncSession
            Active SQLAlchemy session.
        chat_id : str
            Chat the message belongs to.
        message_id : str
            Message being voted on.
        is_upvoted : bool
            Direction of the vote.

        Returns
        -------
        Vote
            The stored vote, reflecting `is_upvoted`.
        """
        try:
            insert = _UPSERT_INSERTS.get(session.bind.dialect.name)
            if insert is None:
                await session.merge(Vote(chat_id=chat_id, message_id=message_id, is_upvoted=is_upvoted))
                await session.flush()
            else:
                statement = insert(Vote).values(chat_id=chat_id, message_id=message_id, is_upvoted=is_upvoted)
                statement = statement.on_conflict_do_update(
                    index_elements=["chat_id", "message_id"],
                    set_={"is_upvoted": statement.excluded.is_upvoted},
                )
                await session.execute(statement)
            return await session.get(Vote, (chat_id, message_id), populate_existing=True)
        except Exception as e:
            logger.error("Error in VoteDao.upsertVote. Error Message: %s", e)
            raise

    async def fetchVotesByChatId(self, session: AsyncSession, chat_id: str) -> List[Vote]:
        try:
            result = await session.scalars(select(Vote).where(Vote.chat_id == chat_id))
            return list(result.all())
        except Exception as e:
            logger.error("Error in VoteDao.fetchVotesByChatId. Error Message: %s", e)
            raise

    async def deleteVotesByChatId(self, session: AsyncSession, chat_id: str) -> int:
        try:
            result = await session.execute(delete(Vote).where(Vote.chat_id == chat_id))
            return result.rowcount
        except Exception as e:
            logger.error("Error in VoteDao.deleteVotesByChatId. Error Message: %s", e)
            raise

    async def deleteVotesByMessageIds(self, session: AsyncSession, chat_id: str, message_ids: Iterable[str]) -> int:
        ids = list(message_ids)
        if not ids:
            return 0
        try:
            result = await session.execute(
                delete(Vote).where(Vote.chat_id == chat_id, Vote.message_id.in_(ids))
            )
            return result.rowcount
        except Exception as e:
            logger.error("Error in VoteDao.deleteVotesByMessageIds. Error Message: %s", e)
            raise
