"""
Password Hashing (bcrypt over SHA-256)
======================================

Purpose
-------
One-way, salted, adaptive hashing of user passwords before they are stored.

Scheme
------
bcrypt only reads the first 72 bytes of its input and current releases reject
longer inputs outright. Passwords are therefore first digested with SHA-256
and base64-encoded (44 ASCII bytes), and that digest is what bcrypt hashes.
Any password length and any encoding of multibyte text is accepted, and every
byte of the password contributes to the hash.

- `hash_password` and `check_passwords` apply the same pre-hash.
- The cost factor comes from `settings.BCRYPT_ROUNDS` unless given explicitly.

Usage
-----
.. code-block:: python

    enc = EncryptionDec()
    stored = enc.hash_password("Spear#123")
    enc.check_passwords("Spear#123", stored)   # True
"""

import base64
import hashlib

import bcrypt

from chatstore.database.config.config import settings


def _prehash(text: str) -> bytes:
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return base64.b64encode(digest)


class EncryptionDec:
    """
    Password hasher used by the user store.

    Methods
    -------
    hash_password(text: str) -> str
        SHA-256 pre-hash, then bcrypt with a freshly generated salt.
    check_passwords(plain_text: str, passwd: str) -> bool
        Verifies a plaintext password against a stored hash.
    """

    def __init__(self, rounds: int | None = None):
        """
        Parameters
        ----------
        rounds : int | None
            bcrypt cost factor. Defaults to `settings.BCRYPT_ROUNDS`.
        """
        self.rounds = rounds or settings.BCRYPT_ROUNDS

    def hash_password(self, text: str) -> str:
        """
        Hash a plaintext password of any length.

        Returns
        -------
        str
            The bcrypt hash (``$2b$...``), UTF-8 decoded.
        """
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_prehash(text), salt).decode("utf-8")

    def check_passwords(self, plain_text: str, passwd: str) -> bool:
        """
        Verify a plaintext password against a hash made by `hash_password`.

        Returns
        -------
        bool
            True if the password matches. False on mismatch or when `passwd`
            is not a bcrypt hash at all.
        """
        try:
            return bcrypt.checkpw(_prehash(plain_text), passwd.encode("utf-8"))
        except ValueError:
            # malformed stored hash (invalid salt)
            return False
