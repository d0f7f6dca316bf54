"""
Suggestion ORM Model
====================

The ``Suggestion`` ORM model captures an edit proposed against one exact
version of a document: ``original_text`` should be replaced by
``suggested_text``.

Table
-----
- ``suggestion`` (SQLAlchemy 2.0 typed mappings)

Key Features
~~~~~~~~~~~~
- String primary key (``id``)
- Composite foreign key (``document_id``, ``document_created_at``) →
  (``document.id``, ``document.created_at``) pinning the suggestion to a version
- Optional ``description`` explaining the change
- ``is_resolved`` flag (False until the owner accepts or dismisses it)
- Foreign key to the user (``user_id`` → ``app_user.id``)
- Timezone-aware creation timestamp (UTC)
"""

import uuid
from datetime import datetime

from sqlalchemy import TEXT, Boolean, ForeignKey, ForeignKeyConstraint, Index
from sqlalchemy.orm import Mapped, mapped_column

from chatstore.database.config.connection_engine import declarativeBase
from chatstore.database.helpers.types import UTCDateTime, utcnow


class Suggestion(declarativeBase):
    """
    ORM model for the `suggestion` table.

    Attributes
    ----------
    id : str
        Primary key of the suggestion.
    document_id : str
        Identity of the document the suggestion targets.
    document_created_at : datetime
        Version timestamp of the targeted document.
    original_text : str
        Text found in the document.
    suggested_text : str
        Replacement text.
    description : str | None
        Why the change is proposed.
    is_resolved : bool
        Whether the suggestion has been handled.
    user_id : str
        Owner of the suggestion.
    created_at : datetime
        Time the suggestion was stored (UTC).
    """

    __tablename__ = "suggestion"
    __table_args__ = (
        ForeignKeyConstraint(
            ["document_id", "document_created_at"],
            ["document.id", "document.created_at"],
        ),
        Index("ix_suggestion_document", "document_id", "document_created_at"),
    )

    id: Mapped[str] = mapped_column(TEXT, primary_key=True)

    document_id: Mapped[str] = mapped_column(TEXT, nullable=False)

    document_created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    original_text: Mapped[str] = mapped_column(TEXT, nullable=False)

    suggested_text: Mapped[str] = mapped_column(TEXT, nullable=False)

    description: Mapped[str | None] = mapped_column(TEXT, nullable=True)

    is_resolved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    user_id: Mapped[str] = mapped_column(TEXT, ForeignKey("app_user.id"), nullable=False)

    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)

    def __init__(
        self,
        document_id: str,
        document_created_at: datetime,
        user_id: str,
        original_text: str,
        suggested_text: str,
        description: str | None = None,
        suggestion_id: str | None = None,
        created_at: datetime | None = None,
    ):
        """
        Initialize a new Suggestion object.

        Parameters
        ----------
        document_id : str
            Identity of the target document.
        document_created_at : datetime
            Exact version timestamp of the target document.
        user_id : str
            Owner of the suggestion.
        original_text : str
            Text to be replaced.
        suggested_text : str
            Proposed replacement.
        description : str | None
            Optional explanation.
        suggestion_id : str | None
            Identifier to use; a UUID4 string is generated when omitted.
        created_at : datetime | None
            Creation time; defaults to now.
        """
        self.id = suggestion_id or str(uuid.uuid4())
        self.document_id = document_id
        self.document_created_at = document_created_at
        self.user_id = user_id
        self.original_text = original_text
        self.suggested_text = suggested_text
        self.description = description
        self.is_resolved = False
        self.created_at = created_at or utcnow()

    def __str__(self) -> str:
        return (
            f"Suggestion: id:{self.id}, document: {self.document_id}@{self.document_created_at}, "
            f"resolved: {self.is_resolved}"
        )
