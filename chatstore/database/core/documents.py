"""
Document store operations.

Documents are versioned by creation time: saving with an existing id appends
a version, and the current version is the one with the latest `created_at`.
"""

import logging
from datetime import datetime
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.daos.document_dao import DocumentDao
from chatstore.database.daos.suggestion_dao import SuggestionDao
from chatstore.database.entities.documents import Document
from chatstore.database.helpers.transactionManagement import transactional

logger = logging.getLogger(__name__)


@transactional
async def save_document(
    user_id: str,
    title: str,
    content: str | None = None,
    id: str | None = None,
    created_at: datetime | None = None,
    *,
    session: AsyncSession = None,
) -> Document:
    """
    Append a document version.

    Parameters
    ----------
    user_id : str
        Owner of the document.
    title : str
        Title of the version.
    content : str | None
        Body of the version.
    id : str | None
        Identity of an existing document to add a version to; a new document
        is created when omitted.
    created_at : datetime | None
        Version timestamp; now when omitted.
    session : AsyncSession
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    Document
        The stored version.

    Raises
    ------
    ConflictError
        If a version with the same (id, created_at) already exists.
    """
    document = await DocumentDao().createDocument(
        session,
        user_id=user_id,
        title=title,
        content=content,
        document_id=id,
        created_at=created_at,
    )
    logger.debug("Saved document %s version %s", document.id, document.created_at)
    return document


@transactional
async def get_documents_by_id(id: str, *, session: AsyncSession = None) -> List[Document]:
    """Return the full version history of document `id`, oldest first."""
    return await DocumentDao().fetchDocumentsById(session, id)


@transactional
async def get_document_by_id(id: str, *, session: AsyncSession = None) -> Document | None:
    """Return the current (latest) version of document `id`, or None."""
    return await DocumentDao().fetchLatestDocument(session, id)


get_latest_document = get_document_by_id


@transactional
async def get_documents_by_user_id(id: str, *, session: AsyncSession = None) -> List[Document]:
    """Return every document version owned by user `id`, newest first."""
    return await DocumentDao().fetchDocumentsByUserId(session, id)


@transactional
async def delete_documents_by_id_after_timestamp(
    id: str,
    timestamp: datetime,
    *,
    session: AsyncSession = None,
) -> int:
    """
    Remove the versions of a document created strictly after `timestamp`.

    Suggestions pinned to those versions are deleted first, then the versions
    themselves, in one transaction.

    Returns
    -------
    int
        Number of document versions deleted.
    """
    suggestions = await SuggestionDao().deleteSuggestionsAfterTimestamp(session, id, timestamp)
    documents = await DocumentDao().deleteDocumentsAfterTimestamp(session, id, timestamp)
    logger.info(
        "Deleted %d versions of document %s after %s (%d suggestions)",
        documents,
        id,
        timestamp,
        suggestions,
    )
    return documents
