"""
Document ORM Model
==================

The ``Document`` ORM model stores one *version* of a user-owned document in
the ``document`` table. Documents are append-only: every edit inserts a new
row sharing the same ``id`` with a later ``created_at``.

Key features
~~~~~~~~~~~~
- Composite primary key (``id``, ``created_at``); a row is a document version
- "Current" version of a document = the row with the greatest ``created_at``
- Nullable ``content`` (a document may be created before it has a body)
- Foreign key to the owning user (``user_id`` → ``app_user.id``)

Integration notes
~~~~~~~~~~~~~~~~~
- Suggestions reference an exact version through the composite foreign key
  (``document_id``, ``document_created_at``); see ``entities.suggestions``.
"""

import uuid
from datetime import datetime

from sqlalchemy import TEXT, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from chatstore.database.config.connection_engine import declarativeBase
from chatstore.database.helpers.types import UTCDateTime, utcnow


class Document(declarativeBase):
    """
    ORM model for the `document` table.

    Attributes
    ----------
    id : str
        Document identity, shared by all versions.
    created_at : datetime
        Version timestamp (UTC). Part of the primary key.
    title : str
        Title of this version.
    content : str | None
        Body of this version.
    user_id : str
        Owner of the document.
    """

    __tablename__ = "document"

    id: Mapped[str] = mapped_column(TEXT, primary_key=True)
    """Document identity (shared across versions)."""

    created_at: Mapped[datetime] = mapped_column(UTCDateTime, primary_key=True)
    """Version timestamp (UTC)."""

    title: Mapped[str] = mapped_column(TEXT, nullable=False)

    content: Mapped[str | None] = mapped_column(TEXT, nullable=True)

    user_id: Mapped[str] = mapped_column(TEXT, ForeignKey("app_user.id"), nullable=False, index=True)
    """Foreign key reference to the `app_user` table (owner)."""

    def __init__(
        self,
        user_id: str,
        title: str,
        content: str | None = None,
        document_id: str | None = None,
        created_at: datetime | str | None = None,
    ):
        """
        Initialize a new Document version.

        Parameters
        ----------
        user_id : str
            Owner of the document.
        title : str
            Title of the version.
        content : str | None
            Body of the version.
        document_id : str | None
            Identity of an existing document to append a version to. A new
            identity (UUID4 string) is generated when omitted.
        created_at : datetime | str | None
            Version timestamp. Accepts datetime or ISO8601 string; defaults to now.
        """
        self.id = document_id or str(uuid.uuid4())
        self.user_id = user_id
        self.title = title
        self.content = content
        if isinstance(created_at, str):
            self.created_at = datetime.fromisoformat(created_at)
        else:
            self.created_at = created_at or utcnow()

    def __str__(self) -> str:
        return f"Document: id:{self.id}, version: {self.created_at}, title: {self.title}"
