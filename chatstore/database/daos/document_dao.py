"""
Document DAO

Purpose
-------
Data-access layer for the versioned `Document` ORM entity. Provides:
- Appending a version row
- Retrieval of the full version history, of the latest version, and of all
  versions owned by a user
- Deletion of the versions created after a timestamp

Design
------
- A document version is identified by (`id`, `created_at`). Nothing here ever
  updates a version in place.
- Suggestions pinned to removed versions must be deleted first; the DAO does not
  do this on its own (see `chatstore.database.core.documents`).

Error Handling
--------------
- Methods log the failure and re-raise.
"""

import logging
from datetime import datetime
from typing import List

from sqlalchemy import asc, delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.entities.documents import Document

logger = logging.getLogger(__name__)


class DocumentDao:
    """
    Data Access Object (DAO) for document versions.

    Responsibilities:
        - Add a new `Document` version to the active session.
        - Query versions by document id or owner.
        - Bulk-delete versions newer than a timestamp.

    Notes:
        - Session management (commit/rollback/close) is delegated to the caller.
    """

    async def createDocument(
        self,
        session: AsyncSession,
        user_id: str,
        title: str,
        content: str | None,
        document_id: str | None = None,
        created_at: datetime | None = None,
    ) -> Document:
        """
        Add a new `Document` version and flush it.

        Parameters
        ----------
        session : AsyncSession
            Active SQLAlchemy session (transaction boundary controlled by the caller).
        user_id : str
            Owner of the document.
        title : str
            Title of the version.
        content : str | None
            Body of the version.
        document_id : str | None
            Existing document identity to append to; new identity when omitted.
        created_at : datetime | None
            Version timestamp; now when omitted.

        Returns
        -------
        Document
            The flushed version row.
        """
        try:
            document = Document(
                user_id=user_id,
                title=title,
                content=content,
                document_id=document_id,
                created_at=created_at,
            )
            session.add(document)
            await session.flush()
            return document
        except Exception as e:
            logger.error("Error in DocumentDao.createDocument. Error Message: %s", e)
            raise

    async def fetchDocumentsById(self, session: AsyncSession, document_id: str) -> List[Document]:
        """
        Fetch every version of a document, oldest first.
        """
        try:
            result = await session.scalars(
                select(Document).where(Document.id == document_id).order_by(asc(Document.created_at))
            )
            return list(result.all())
        except Exception as e:
            logger.error("Error in DocumentDao.fetchDocumentsById. Error Message: %s", e)
            raise

    async def fetchLatestDocument(self, session: AsyncSession, document_id: str) -> Document | None:
        """
        Fetch the current version of a document (greatest `created_at`).

        Returns
        -------
        Document | None
            The latest version, or None when the document does not exist.
        """
        try:
            result = await session.scalars(
                select(Document)
                .where(Document.id == document_id)
                .order_by(desc(Document.created_at))
                .limit(1)
            )
            return result.first()
        except Exception as e:
            logger.error("Error in DocumentDao.fetchLatestDocument. Error Message: %s", e)
            raise

    async def fetchDocumentsByUserId(self, session: AsyncSession, user_id: str) -> List[Document]:
        try:
            result = await session.scalars(
                select(Document).where(Document.user_id == user_id).order_by(desc(Document.created_at))
            )
            return list(result.all())
        except Exception as e:
            logger.error("Error in DocumentDao.fetchDocumentsByUserId. Error Message: %s", e)
            raise

    async def deleteDocumentsAfterTimestamp(self, session: AsyncSession, document_id: str, timestamp: datetime) -> int:
        """
        Delete the versions of a document created strictly after `timestamp`.

        Returns
        -------
        int
            Number of versions deleted.
        """
        try:
            result = await session.execute(
                delete(Document).where(Document.id == document_id, Document.created_at > timestamp)
            )
            return result.rowcount
        except Exception as e:
            logger.error("Error in DocumentDao.deleteDocumentsAfterTimestamp. Error Message: %s", e)
            raise
