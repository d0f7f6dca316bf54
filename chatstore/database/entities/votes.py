"""
Vote ORM Model
==============

A ``Vote`` records a thumbs up / thumbs down on one message of a chat. The
pair (``chat_id``, ``message_id``) is the primary key, so re-voting updates
the existing row instead of adding another. The message foreign key is
composite (``message_id``, ``chat_id``), so a vote can only reference a
message of its own chat.
"""

from sqlalchemy import TEXT, Boolean, ForeignKey, ForeignKeyConstraint
from sqlalchemy.orm import Mapped, mapped_column

from chatstore.database.config.connection_engine import declarativeBase


class Vote(declarativeBase):
    """
    ORM model for the `vote` table.

    Attributes
    ----------
    chat_id : str
        Foreign key to `chat.id`; first half of the composite key.
    message_id : str
        Together with `chat_id`, foreign key to (`message.id`, `message.chat_id`);
        second half of the composite key.
    is_upvoted : bool
        True for an up vote, False for a down vote.
    """

    __tablename__ = "vote"
    __table_args__ = (
        ForeignKeyConstraint(
            ["message_id", "chat_id"],
            ["message.id", "message.chat_id"],
            name="fk_vote_message_in_chat",
        ),
    )

    chat_id: Mapped[str] = mapped_column(TEXT, ForeignKey("chat.id"), primary_key=True)
    message_id: Mapped[str] = mapped_column(TEXT, primary_key=True)
    is_upvoted: Mapped[bool] = mapped_column(Boolean, nullable=False)

    def __init__(self, chat_id: str, message_id: str, is_upvoted: bool):
        self.chat_id = chat_id
        self.message_id = message_id
        self.is_upvoted = is_upvoted

    def __str__(self) -> str:
        return f"Vote: chat:{self.chat_id}, message: {self.message_id}, up: {self.is_upvoted}"
