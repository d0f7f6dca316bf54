import pytest

from chatstore.database.core import (
    get_suggestions_by_document_id,
    resolve_suggestion,
    save_document,
    save_suggestions,
)
from chatstore.database.exceptions import NotFoundError


@pytest.fixture()
async def document(user, at):
    await save_document(user_id=user.id, title="v1", content="teh cat", id="d1", created_at=at(0))
    return await save_document(user_id=user.id, title="v2", content="teh dog", id="d1", created_at=at(10))


async def test_suggestions_are_pinned_to_latest_version(user, document, at):
    saved = await save_suggestions(
        document_id="d1",
        user_id=user.id,
        suggestions=[
            {"original_text": "teh", "suggested_text": "the", "description": "typo"},
            {"original_text": "dog", "suggested_text": "hound"},
        ],
    )

    assert [s.document_created_at for s in saved] == [at(10), at(10)]
    assert all(s.is_resolved is False for s in saved)
    assert saved[1].description is None


async def test_save_suggestions_missing_document_writes_nothing(user):
    with pytest.raises(NotFoundError):
        await save_suggestions(
            document_id="missing",
            user_id=user.id,
            suggestions=[{"original_text": "a", "suggested_text": "b"}],
        )

    assert await get_suggestions_by_document_id(document_id="missing") == []


async def test_filter_suggestions_by_version(user, at):
    await save_document(user_id=user.id, title="v1", id="d1", created_at=at(0))
    await save_suggestions(document_id="d1", user_id=user.id, suggestions=[{"original_text": "a", "suggested_text": "b"}])
    await save_document(user_id=user.id, title="v2", id="d1", created_at=at(10))
    await save_suggestions(document_id="d1", user_id=user.id, suggestions=[{"original_text": "c", "suggested_text": "d"}])

    everything = await get_suggestions_by_document_id(document_id="d1")
    first_version = await get_suggestions_by_document_id(document_id="d1", document_created_at=at(0))

    assert sorted(s.original_text for s in everything) == ["a", "c"]
    assert [s.original_text for s in first_version] == ["a"]


async def test_resolve_suggestion(user, document):
    [suggestion] = await save_suggestions(
        document_id="d1",
        user_id=user.id,
        suggestions=[{"original_text": "teh", "suggested_text": "the"}],
    )

    resolved = await resolve_suggestion(id=suggestion.id)

    assert resolved.is_resolved is True
    [stored] = await get_suggestions_by_document_id(document_id="d1")
    assert stored.is_resolved is True


async def test_resolve_missing_suggestion(db):
    with pytest.raises(NotFoundError):
        await resolve_suggestion(id="missing")
