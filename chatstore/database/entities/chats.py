"""
Chat ORM Model
==============

The ``Chat`` ORM model represents a user-owned chat stored in the ``chat``
table. It is implemented with SQLAlchemy 2.0-style typing.

Key features
~~~~~~~~~~~~
- String primary key (``id``), caller-supplied for idempotency or generated
- Title and timezone-aware ``created_at`` timestamp (UTC)
- Foreign key to the owning user (``user_id`` → ``app_user.id``)
- ``visibility`` flag (``"private"`` | ``"public"``), private by default
- View-only ``messages`` relationship (chronological) for eager loading

Integration notes
~~~~~~~~~~~~~~~~~
- Deleting a chat never relies on ORM or database cascades: votes and messages
  are removed explicitly first (see ``chatstore.database.core.chats``).
"""

import uuid
from datetime import datetime
from typing import List

from sqlalchemy import TEXT, Enum, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from chatstore.database.config.connection_engine import declarativeBase
from chatstore.database.helpers.types import UTCDateTime, utcnow

VISIBILITY_TYPES = ("private", "public")
"""Allowed values of `Chat.visibility`."""


class Chat(declarativeBase):
    """
    ORM model for the `chat` table.

    Attributes
    ----------
    id : str
        Primary key. Unique identifier for the chat.
    created_at : datetime
        Creation time (timezone-aware, UTC).
    title : str
        Human-readable title of the chat.
    user_id : str
        Foreign key reference to the `app_user` table (the owner).
    visibility : str
        "private" or "public".
    """

    __tablename__ = "chat"

    id: Mapped[str] = mapped_column(TEXT, primary_key=True)
    """Primary key of the chat."""

    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    """Timestamp when the chat was created (UTC)."""

    title: Mapped[str] = mapped_column(TEXT, nullable=False)
    """Title of the chat (cannot be null)."""

    user_id: Mapped[str] = mapped_column(TEXT, ForeignKey("app_user.id"), nullable=False, index=True)
    """Foreign key reference to the `app_user` table (owner)."""

    visibility: Mapped[str] = mapped_column(
        Enum(*VISIBILITY_TYPES, name="chat_visibility"), nullable=False, default="private"
    )
    """Sharing flag; one of `VISIBILITY_TYPES`."""

    messages: Mapped[List["Message"]] = relationship(
        "Message",
        order_by="Message.created_at",
        viewonly=True,
        lazy="raise_on_sql",
    )
    """Messages of the chat, only available when eagerly loaded."""

    def __init__(
        self,
        user_id: str,
        title: str,
        chat_id: str | None = None,
        created_at: datetime | str | None = None,
        visibility: str = "private",
    ):
        """
        Initialize a new Chat object.

        Parameters
        ----------
        user_id : str
            The ID of the user who owns this chat.
        title : str
            Title of the chat.
        chat_id : str | None
            Identifier to use; a UUID4 string is generated when omitted.
        created_at : datetime | str | None
            Creation time. Accepts datetime or ISO8601 string; defaults to now.
        visibility : str
            Initial visibility, "private" unless stated otherwise.
        """
        self.id = chat_id or str(uuid.uuid4())
        self.user_id = user_id
        self.title = title
        self.visibility = visibility
        if isinstance(created_at, str):
            self.created_at = datetime.fromisoformat(created_at)
        else:
            self.created_at = created_at or utcnow()

    def __str__(self) -> str:
        return f"Chat: id:{self.id}, user: {self.user_id}, title: {self.title}, time_created: {self.created_at}"
