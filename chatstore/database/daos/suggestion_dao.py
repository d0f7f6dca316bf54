"""
Suggestion DAO

Purpose
-------
Data-access layer for the `Suggestion` ORM entity. Provides:
- Bulk creation
- Retrieval by document (all versions or one version) and by id
- Deletion of suggestions pinned to versions newer than a timestamp
"""

import logging
from datetime import datetime
from typing import Iterable, List

from sqlalchemy import asc, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.entities.suggestions import Suggestion

logger = logging.getLogger(__name__)


class SuggestionDao:
    """
    Data Access Object (DAO) for document suggestions.
    """

    async def createSuggestions(self, session: AsyncSession, suggestions: Iterable[Suggestion]) -> List[Suggestion]:
        try:
            rows = list(suggestions)
            session.add_all(rows)
            await session.flush()
            return rows
        except Exception as e:
            logger.error("Error in SuggestionDao.createSuggestions. Error Message: %s", e)
            raise

    async def fetchSuggestionById(self, session: AsyncSession, suggestion_id: str) -> Suggestion | None:
        try:
            return await session.get(Suggestion, suggestion_id)
        except Exception as e:
            logger.error("Error in SuggestionDao.fetchSuggestionById. Error Message: %s", e)
            raise

    async def fetchSuggestionsByDocumentId(
        self,
        session: AsyncSession,
        document_id: str,
        document_created_at: datetime | None = None,
    ) -> List[Suggestion]:
        """
        Fetch the suggestions of a document.

        Parameters
        ----------
        session : AsyncSession
            Active SQLAlchemy session.
        document_id : str
            Identity of the document.
        document_created_at : datetime | None
            Restrict to the suggestions pinned to this version.

        Returns
        -------
        list[Suggestion]
            Matching suggestions, oldest first.
        """
        try:
            query = select(Suggestion).where(Suggestion.document_id == document_id)
            if document_created_at is not None:
                query = query.where(Suggestion.document_created_at == document_created_at)
            result = await session.scalars(query.order_by(asc(Suggestion.created_at)))
            return list(result.all())
        except Exception as e:
            logger.error("Error in SuggestionDao.fetchSuggestionsByDocumentId. Error Message: %s", e)
            raise

    async def markResolved(self, session: AsyncSession, suggestion: Suggestion) -> Suggestion:
        try:
            suggestion.is_resolved = True
            await session.flush()
            return suggestion
        except Exception as e:
            logger.error("Error in SuggestionDao.markResolved. Error Message: %s", e)
            raise

    async def deleteSuggestionsAfterTimestamp(self, session: AsyncSession, document_id: str, timestamp: datetime) -> int:
        """
        Delete suggestions pinned to versions of `document_id` created strictly after `timestamp`.
        """
        try:
            result = await session.execute(
                delete(Suggestion).where(
                    Suggestion.document_id == document_id,
                    Suggestion.document_created_at > timestamp,
                )
            )
            return result.rowcount
        except Exception as e:
            logger.error("Error in SuggestionDao.deleteSuggestionsAfterTimestamp. Error Message: %s", e)
            raise
