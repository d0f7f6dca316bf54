import pytest

from chatstore.crypt.encrypt_decrypt import EncryptionDec
from chatstore.database.core import create_user, get_user, get_user_by_email, verify_user_password
from chatstore.database.exceptions import ConflictError


async def test_create_user_stores_hash_not_plaintext(db):
    created = await create_user(email="ada@example.com", password="Spear#123")
    fetched = await get_user(email="ada@example.com")

    assert fetched is not None
    assert fetched.id == created.id
    assert fetched.password != "Spear#123"
    assert fetched.password.startswith("$2")
    assert EncryptionDec().check_passwords("Spear#123", fetched.password)


async def test_same_password_hashes_differently(db):
    first = await create_user(email="a@example.com", password="same-password")
    second = await create_user(email="b@example.com", password="same-password")

    assert first.password != second.password


async def test_duplicate_email_raises_conflict(db):
    await create_user(email="ada@example.com", password="one")

    with pytest.raises(ConflictError):
        await create_user(email="ada@example.com", password="two")


async def test_get_user_missing_returns_none(db):
    assert await get_user_by_email(email="nobody@example.com") is None


async def test_verify_user_password(db):
    await create_user(email="ada@example.com", password="Spear#123")

    assert (await verify_user_password(email="ada@example.com", password="Spear#123")).email == "ada@example.com"
    assert await verify_user_password(email="ada@example.com", password="wrong") is None
    assert await verify_user_password(email="nobody@example.com", password="Spear#123") is None


async def test_custom_hasher_is_used(db):
    class ReversingHasher:
        def hash_password(self, text):
            return text[::-1]

        def check_passwords(self, plain_text, passwd):
            return plain_text[::-1] == passwd

    user = await create_user(email="ada@example.com", password="abc", hasher=ReversingHasher())

    assert user.password == "cba"
    assert await verify_user_password(email="ada@example.com", password="abc", hasher=ReversingHasher())


def test_check_passwords_rejects_non_bcrypt_value():
    assert EncryptionDec(rounds=4).check_passwords("secret", "not-a-hash") is False


async def test_password_longer_than_bcrypt_limit(db):
    password = "x" * 99 + "!"

    user = await create_user(email="long@example.com", password=password)

    assert user.password.startswith("$2")
    assert await verify_user_password(email="long@example.com", password=password) is not None
    # differs only past byte 72
    assert await verify_user_password(email="long@example.com", password="x" * 99 + "?") is None


async def test_multibyte_password(db):
    password = "pässwörd-密码-🔐" * 5

    user = await create_user(email="intl@example.com", password=password)

    assert user.password != password
    assert await verify_user_password(email="intl@example.com", password=password) is not None
    assert await verify_user_password(email="intl@example.com", password="pässwörd-密码-🔐") is None


def test_encryption_dec_round_trip_long_input():
    hasher = EncryptionDec(rounds=4)
    hashed = hasher.hash_password("é" * 100)

    assert hasher.check_passwords("é" * 100, hashed)
    assert not hasher.check_passwords("é" * 99, hashed)
