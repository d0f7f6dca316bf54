import asyncio

import pytest
from sqlalchemy.exc import IntegrityError

from chatstore.database.config.connection_engine import Database
from chatstore.database.core import (
    create_user,
    delete_chat_by_id,
    get_messages_by_chat_id,
    get_votes_by_chat_id,
    save_chat,
    save_messages,
    vote_message,
)
from chatstore.database.daos.vote_dao import VoteDao
from chatstore.database.exceptions import NotFoundError


@pytest.fixture()
async def message(chat):
    [saved] = await save_messages(chat_id="c1", messages=[{"id": "m1", "role": "assistant", "content": "hello"}])
    return saved


async def test_vote_up(message):
    vote = await vote_message(chat_id="c1", message_id="m1", type="up")

    assert (vote.chat_id, vote.message_id, vote.is_upvoted) == ("c1", "m1", True)


async def test_revote_updates_single_row(message):
    await vote_message(chat_id="c1", message_id="m1", type="up")
    vote = await vote_message(chat_id="c1", message_id="m1", type="down")

    votes = await get_votes_by_chat_id(id="c1")

    assert vote.is_upvoted is False
    assert len(votes) == 1
    assert votes[0].is_upvoted is False


async def test_same_direction_twice_is_idempotent(message):
    await vote_message(chat_id="c1", message_id="m1", type="down")
    await vote_message(chat_id="c1", message_id="m1", type="down")

    votes = await get_votes_by_chat_id(id="c1")

    assert [(v.message_id, v.is_upvoted) for v in votes] == [("m1", False)]


async def test_invalid_vote_type(message):
    with pytest.raises(ValueError):
        await vote_message(chat_id="c1", message_id="m1", type="sideways")


async def test_vote_on_missing_message(chat):
    with pytest.raises(NotFoundError):
        await vote_message(chat_id="c1", message_id="missing", type="up")

    assert await get_votes_by_chat_id(id="c1") == []


async def test_vote_on_message_of_another_chat(user, message):
    await save_chat(user_id=user.id, title="Second chat", id="c2")

    with pytest.raises(NotFoundError):
        await vote_message(chat_id="c2", message_id="m1", type="up")

    assert await get_votes_by_chat_id(id="c2") == []
    await delete_chat_by_id(id="c1")
    assert await get_messages_by_chat_id(id="c1") == []


async def test_cross_chat_vote_rejected_by_schema(db, user, message):
    await save_chat(user_id=user.id, title="Second chat", id="c2")

    with pytest.raises(IntegrityError):
        async with db.session_factory() as session:
            async with session.begin():
                await VoteDao().upsertVote(session, chat_id="c2", message_id="m1", is_upvoted=True)


async def test_concurrent_votes_leave_one_row(tmp_path):
    file_db = Database(f"sqlite+aiosqlite:///{tmp_path / 'votes.db'}")
    await file_db.create_all()
    try:
        owner = await create_user(email="voter@example.com", password="pw", db=file_db)
        await save_chat(user_id=owner.id, title="Busy chat", id="c1", db=file_db)
        await save_messages(chat_id="c1", messages=[{"id": "m1", "role": "assistant", "content": "hi"}], db=file_db)

        directions = ["up", "down"] * 4
        await asyncio.gather(
            *(vote_message(chat_id="c1", message_id="m1", type=d, db=file_db) for d in directions)
        )

        votes = await get_votes_by_chat_id(id="c1", db=file_db)
        assert len(votes) == 1
        assert votes[0].is_upvoted in (True, False)
    finally:
        await file_db.dispose()
