"""
Suggestion store operations.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, List, Mapping, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from chatstore.database.daos.document_dao import DocumentDao
from chatstore.database.daos.suggestion_dao import SuggestionDao
from chatstore.database.entities.suggestions import Suggestion
from chatstore.database.exceptions import NotFoundError
from chatstore.database.helpers.transactionManagement import transactional
from chatstore.database.helpers.types import utcnow

logger = logging.getLogger(__name__)


@transactional
async def save_suggestions(
    document_id: str,
    user_id: str,
    suggestions: Sequence[Mapping[str, Any]],
    *,
    session: AsyncSession = None,
) -> List[Suggestion]:
    """
    Store suggestions against the current version of a document.

    The latest version is resolved first; its `created_at` is stamped on every
    suggestion so each one is pinned to that exact version.

    Parameters
    ----------
    document_id : str
        Identity of the document.
    user_id : str
        Owner of the suggestions.
    suggestions : Sequence[Mapping[str, Any]]
        Items with `original_text`, `suggested_text` and optionally
        `description` and `id`.
    session : AsyncSession
        Active SQLAlchemy session (injected by @transactional).

    Returns
    -------
    list[Suggestion]
        The stored suggestions, in the order given.

    Raises
    ------
    NotFoundError
        If the document does not exist. Nothing is written.
    """
    document = await DocumentDao().fetchLatestDocument(session, document_id)
    if document is None:
        raise NotFoundError(f"Document {document_id} not found")

    now = utcnow()
    rows = [
        Suggestion(
            document_id=document.id,
            document_created_at=document.created_at,
            user_id=user_id,
            original_text=item["original_text"],
            suggested_text=item["suggested_text"],
            description=item.get("description"),
            suggestion_id=item.get("id"),
            created_at=now + timedelta(microseconds=position),
        )
        for position, item in enumerate(suggestions)
    ]
    saved = await SuggestionDao().createSuggestions(session, rows)
    logger.debug("Saved %d suggestions for document %s", len(saved), document_id)
    return saved


@transactional
async def get_suggestions_by_document_id(
    document_id: str,
    document_created_at: datetime | None = None,
    *,
    session: AsyncSession = None,
) -> List[Suggestion]:
    """
    Return the suggestions of a document, across all versions unless
    `document_created_at` names one.
    """
    return await SuggestionDao().fetchSuggestionsByDocumentId(
        session, document_id, document_created_at=document_created_at
    )


@transactional
async def resolve_suggestion(id: str, *, session: AsyncSession = None) -> Suggestion:
    """
    Mark suggestion `id` as resolved.

    Raises
    ------
    NotFoundError
        If the suggestion does not exist.
    """
    suggestion_dao = SuggestionDao()
    suggestion = await suggestion_dao.fetchSuggestionById(session, id)
    if suggestion is None:
        raise NotFoundError(f"Suggestion {id} not found")
    return await suggestion_dao.markResolved(session, suggestion)
