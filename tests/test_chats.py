import pytest

from chatstore.database.core import (
    delete_chat_by_id,
    get_chat_by_id,
    get_chats_by_user_id,
    get_messages_by_chat_id,
    get_votes_by_chat_id,
    save_chat,
    save_messages,
    update_chat_visibility_by_id,
    vote_message,
)
from chatstore.database.exceptions import NotFoundError


async def test_save_chat_with_explicit_id_is_private(chat):
    fetched = await get_chat_by_id(id="c1")

    assert fetched.id == "c1"
    assert fetched.visibility == "private"
    assert fetched.title == "First chat"


async def test_save_chat_generates_id(user):
    chat = await save_chat(user_id=user.id, title="Untitled")

    assert chat.id
    assert (await get_chat_by_id(id=chat.id)).user_id == user.id


async def test_get_chat_missing_returns_none(db):
    assert await get_chat_by_id(id="missing") is None


async def test_chats_by_user_newest_first(user, at):
    await save_chat(user_id=user.id, title="old", id="old", created_at=at(0))
    await save_chat(user_id=user.id, title="new", id="new", created_at=at(60))
    await save_chat(user_id=user.id, title="mid", id="mid", created_at=at(30))

    chats = await get_chats_by_user_id(id=user.id)

    assert [c.id for c in chats] == ["new", "mid", "old"]


async def test_get_chat_with_messages(chat):
    await save_messages(
        chat_id="c1",
        messages=[{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}],
    )

    fetched = await get_chat_by_id(id="c1", with_messages=True)

    assert [m.content for m in fetched.messages] == ["hi", "hello"]


async def test_update_visibility(chat):
    updated = await update_chat_visibility_by_id(chat_id="c1", visibility="public")

    assert updated.visibility == "public"
    assert (await get_chat_by_id(id="c1")).visibility == "public"


async def test_update_visibility_rejects_unknown_value(chat):
    with pytest.raises(ValueError):
        await update_chat_visibility_by_id(chat_id="c1", visibility="friends")


async def test_update_visibility_missing_chat(db):
    with pytest.raises(NotFoundError):
        await update_chat_visibility_by_id(chat_id="missing", visibility="public")


async def test_delete_chat_removes_votes_and_messages(chat):
    messages = await save_messages(
        chat_id="c1",
        messages=[{"role": "user", "content": "hi"}, {"role": "assistant", "content": "hello"}],
    )
    await vote_message(chat_id="c1", message_id=messages[1].id, type="up")

    deleted = await delete_chat_by_id(id="c1")

    assert deleted.id == "c1"
    assert deleted.title == "First chat"
    assert await get_chat_by_id(id="c1") is None
    assert await get_messages_by_chat_id(id="c1") == []
    assert await get_votes_by_chat_id(id="c1") == []


async def test_delete_missing_chat_raises(db):
    with pytest.raises(NotFoundError):
        await delete_chat_by_id(id="missing")


async def test_delete_chat_keeps_other_chats(user, chat):
    other = await save_chat(user_id=user.id, title="Other", id="c2")
    await save_messages(chat_id="c2", messages=[{"role": "user", "content": "stay"}])

    await delete_chat_by_id(id="c1")

    assert (await get_chat_by_id(id=other.id)).title == "Other"
    assert [m.content for m in await get_messages_by_chat_id(id="c2")] == ["stay"]
