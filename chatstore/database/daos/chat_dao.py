"""
Chat DAO

Purpose
-------
Data-access layer for the `Chat` ORM entity. Provides:
- Chat creation
- Retrieval by id (optionally with messages) and by owner (newest first)
- Visibility updates
- Row deletion (children must already be gone)

Design
------
- Requires an active SQLAlchemy `AsyncSession` provided by the caller.
- Deletes are issued as bulk `DELETE` statements; the view-only `messages`
  relationship is never used to cascade.

Error Handling
--------------
- Methods log the failure and re-raise.
- `deleteChat` on a chat that still has messages or votes raises
  `IntegrityError` (foreign key), translated to `ConstraintError` upstream.
"""

import logging
from datetime import datetime
from typing import List

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from chatstore.database.entities.chats import Chat

logger = logging.getLogger(__name__)


class ChatDao:
    """
    Data Access Object (DAO) for managing Chat entities.
    Provides CRUD operations on the `chat` table.
    """

    async def createChat(
        self,
        session: AsyncSession,
        user_id: str,
        title: str,
        chat_id: str | None = None,
        created_at: datetime | None = None,
    ) -> Chat:
        """
        Create a new chat record.

        Parameters
        ----------
        session : AsyncSession
            Active SQLAlchemy session.
        user_id : str
            Owner of the chat.
        title : str
            Title of the chat.
        chat_id : str | None
            Caller-supplied id, generated when omitted.
        created_at : datetime | None
            Creation time, now when omitted.

        Returns
        -------
        Chat
            The flushed chat row.
        """
        try:
            chat = Chat(user_id=user_id, title=title, chat_id=chat_id, created_at=created_at)
            session.add(chat)
            await session.flush()
            return chat
        except Exception as e:
            logger.error("Error in ChatDao.createChat. Error: %s", e)
            raise

    async def fetchChatById(self, session: AsyncSession, chat_id: str, with_messages: bool = False) -> Chat | None:
        """
        Fetch one chat by id.

        Parameters
        ----------
        session : AsyncSession
            Active SQLAlchemy session.
        chat_id : str
            Identifier of the chat.
        with_messages : bool
            Eagerly load `Chat.messages` (chronological).

        Returns
        -------
        Chat | None
            The chat, or None when it does not exist.
        """
        try:
            query = select(Chat).where(Chat.id == chat_id)
            if with_messages:
                query = query.options(selectinload(Chat.messages))
            result = await session.scalars(query)
            return result.first()
        except Exception as e:
            logger.error("Error in ChatDao.fetchChatById. Error: %s", e)
            raise

    async def fetchChatsByUserId(self, session: AsyncSession, user_id: str) -> List[Chat]:
        """
        Fetch all chats of a user, most recently created first.
        """
        try:
            result = await session.scalars(
                select(Chat).where(Chat.user_id == user_id).order_by(desc(Chat.created_at))
            )
            return list(result.all())
        except Exception as e:
            logger.error("Error in ChatDao.fetchChatsByUserId. Error: %s", e)
            raise

    async def updateChatVisibility(self, session: AsyncSession, chat: Chat, visibility: str) -> Chat:
        try:
            chat.visibility = visibility
            await session.flush()
            return chat
        except Exception as e:
            logger.error("Error in ChatDao.updateChatVisibility. Error: %s", e)
            raise

    async def deleteChat(self, session: AsyncSession, chat_id: str) -> int:
        """
        Delete the chat row itself.

        Returns
        -------
        int
            Number of rows deleted (0 or 1).
        """
        try:
            result = await session.execute(delete(Chat).where(Chat.id == chat_id))
            return result.rowcount
        except Exception as e:
            logger.error("Error in ChatDao.deleteChat. Error: %s", e)
            raise
