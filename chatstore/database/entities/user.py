"""
User ORM Model
==============

The ``User`` ORM model represents a registered user in the system. It maps to the
``app_user`` table and stores the login email and the bcrypt password hash.

Key features
~~~~~~~~~~~~
- String primary key (``id``), UUID4 generated when not supplied
- Unique email address
- Password stored only as a one-way hash

"""

import uuid

from sqlalchemy import TEXT, VARCHAR
from sqlalchemy.orm import Mapped, mapped_column

from chatstore.database.config.connection_engine import declarativeBase


class User(declarativeBase):
    """
    ORM model for the `app_user` table.
    Represents a registered user who owns chats, documents and suggestions.

    Attributes
    ----------
    id : str
        Primary key. Unique identifier for the user.
    email : str
        Email address of the user (unique).
    password : str
        bcrypt hash of the user's password. Never the plaintext.
    """

    __tablename__ = "app_user"

    id: Mapped[str] = mapped_column(TEXT, primary_key=True)
    """Primary key of the user."""

    email: Mapped[str] = mapped_column(VARCHAR(255), nullable=False, unique=True)
    """Email address of the user (max length 255, unique)."""

    password: Mapped[str] = mapped_column(TEXT, nullable=False)
    """Hashed password of the user."""

    def __init__(self, email: str, password: str, user_id: str | None = None):
        """
        Initialize a new User object.

        Parameters
        ----------
        email : str
            Email address of the user.
        password : str
            Already hashed password.
        user_id : str | None
            Identifier to use; a UUID4 string is generated when omitted.
        """
        self.id = user_id or str(uuid.uuid4())
        self.email = email
        self.password = password

    def __str__(self) -> str:
        return f"User: id:{self.id}, email: {self.email}"
