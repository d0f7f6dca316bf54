"""
Message ORM Model
=================

The ``Message`` ORM model represents a single message within a chat. Each
message is tied to a ``Chat`` via a foreign key.

Key features
~~~~~~~~~~~~
- String primary key (``id``)
- Foreign key reference to ``chat.id`` (``chat_id``)
- Sender role indicator (``role``)
- Structured ``content`` payload stored as JSON (text, parts, tool calls...)
- Timezone-aware ``created_at`` timestamp (UTC)

"""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, TEXT, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from chatstore.database.config.connection_engine import declarativeBase
from chatstore.database.helpers.types import UTCDateTime, utcnow


class Message(declarativeBase):
    """
    ORM model for the `message` table.

    Attributes
    ----------
    id : str
        Primary key. Unique identifier for the message.
    chat_id : str
        Foreign key reference to the `chat` table.
    role : str
        Role of the sender (e.g., "user", "assistant", "system", "tool").
    content : Any
        Opaque JSON payload of the message.
    created_at : datetime
        Timestamp when the message was created.
    """

    __tablename__ = "message"
    __table_args__ = (
        Index("ix_message_chat_id_created_at", "chat_id", "created_at"),
        # target of the composite vote foreign key
        UniqueConstraint("id", "chat_id", name="uq_message_id_chat_id"),
    )

    id: Mapped[str] = mapped_column(TEXT, primary_key=True)
    """Primary key of the message."""

    chat_id: Mapped[str] = mapped_column(TEXT, ForeignKey("chat.id"), nullable=False)
    """Foreign key to the chat this message belongs to."""

    role: Mapped[str] = mapped_column(TEXT, nullable=False)
    """Role of the message sender."""

    content: Mapped[Any] = mapped_column(JSON, nullable=False)
    """Structured content of the message."""

    created_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False, default=utcnow)
    """Timestamp when the message was created (UTC)."""

    def __init__(
        self,
        chat_id: str,
        role: str,
        content: Any,
        message_id: str | None = None,
        created_at: datetime | str | None = None,
    ):
        """
        Initialize a new Message object.

        Parameters
        ----------
        chat_id : str
            ID of the chat this message belongs to.
        role : str
            The role of the sender.
        content : Any
            JSON-serialisable content of the message.
        message_id : str | None
            Identifier to use; a UUID4 string is generated when omitted.
        created_at : datetime | str | None
            Creation time. Accepts datetime or ISO8601 string; defaults to now.
        """
        self.id = message_id or str(uuid.uuid4())
        self.chat_id = chat_id
        self.role = role
        self.content = content
        if isinstance(created_at, str):
            self.created_at = datetime.fromisoformat(created_at)
        else:
            self.created_at = created_at or utcnow()

    def __str__(self) -> str:
        return (
            f"Chat: id:{self.chat_id}, "
            f"role: {self.role}, "
            f"message: {self.content}, "
            f"time_created: {self.created_at}"
        )
