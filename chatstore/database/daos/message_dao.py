"""
Messages DAO

Purpose
-------
Data-access layer for the `Message` ORM entity. Provides:
- Bulk message creation
- Retrieval by chat (chronological) and by id
- Deletion by chat, optionally limited to messages at or after a timestamp

Design
------
- Requires an active SQLAlchemy `AsyncSession` provided by the caller.
- Keeps business rules (ordering of cascades, validation) in `core`.

Usage
-----
.. code-block:: python

    dao = MessagesDao()
    async with db.session_factory() as session:
        rows = await dao.createMessages(session, [Message(chat_id="c1", role="user", content="hi")])
        await session.commit()
        messages = await dao.fetchMessagesByChatId(session, chat_id="c1")

Error Handling
--------------
- Methods log the failure and re-raise.
"""

import logging
from datetime import datetime
from typing import Iterable, List

from sqlalchemy import asc, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.entities.messages import Message

logger = logging.getLogger(__name__)


class MessagesDao:
    """
    Data Access Object (DAO) for managing chat messages.
    """

    async def createMessages(self, session: AsyncSession, messages: Iterable[Message]) -> List[Message]:
        """
        Stage and flush a batch of messages.

        Parameters
        ----------
        session : AsyncSession
            Active SQLAlchemy session.
        messages : Iterable[Message]
            Message entities to insert.

        Returns
        -------
        list[Message]
            The inserted messages, in the order given.
        """
        try:
            rows = list(messages)
            session.add_all(rows)
            await session.flush()
            return rows
        except Exception as e:
            logger.error("Error in MessagesDao.createMessages. Error Message: %s", e)
            raise

    async def fetchMessageById(self, session: AsyncSession, message_id: str) -> Message | None:
        try:
            return await session.get(Message, message_id)
        except Exception as e:
            logger.error("Error in MessagesDao.fetchMessageById (id=%s): %s", message_id, e)
            raise

    async def fetchMessagesByChatId(self, session: AsyncSession, chat_id: str) -> List[Message]:
        """
        Fetch all messages in a chat, ordered by creation time (ascending).
        """
        try:
            result = await session.scalars(
                select(Message)
                .where(Message.chat_id == chat_id)
                .order_by(asc(Message.created_at))
            )
            return list(result.all())
        except Exception as e:
            logger.error("Error in MessagesDao.fetchMessagesByChatId. Error Message: %s", e)
            raise

    async def fetchMessageIdsByChatIdAfterTimestamp(
        self, session: AsyncSession, chat_id: str, timestamp: datetime
    ) -> List[str]:
        try:
            result = await session.scalars(
                select(Message.id).where(Message.chat_id == chat_id, Message.created_at >= timestamp)
            )
            return list(result.all())
        except Exception as e:
            logger.error("Error in MessagesDao.fetchMessageIdsByChatIdAfterTimestamp. Error Message: %s", e)
            raise

    async def deleteMessagesByChatId(
        self, session: AsyncSession, chat_id: str, timestamp: datetime | None = None
    ) -> int:
        """
        Delete the messages of a chat.

        Parameters
        ----------
        session : AsyncSession
            Active SQLAlchemy session.
        chat_id : str
            Identifier of the chat.
        timestamp : datetime | None
            When given, only messages with `created_at >= timestamp` are deleted.

        Returns
        -------
        int
            Number of messages deleted.
        """
        try:
            query = delete(Message).where(Message.chat_id == chat_id)
            if timestamp is not None:
                query = query.where(Message.created_at >= timestamp)
            result = await session.execute(query)
            return result.rowcount
        except Exception as e:
            logger.error("Error in MessagesDao.deleteMessagesByChatId. Error Message: %s", e)
            raise
