"""Unit tests for UserRepository."""

import pytest
from sqlalchemy.exc import IntegrityError

from blogverse.infrastructure.persistence.repositories import UserRepository


@pytest.fixture
def repo(db_session) -> UserRepository:
    return UserRepository(db_session)


@pytest.mark.asyncio
async def test_create_and_get(repo, db_session, make_user):
    user = await repo.create(make_user())
    await db_session.commit()

    by_id = await repo.get_by_id(user.id)
    by_email = await repo.get_by_email("a@x.com")

    assert by_id is not None and by_id.username == "alice"
    assert by_email is not None and by_email.id == user.id
    assert by_id.email_verified is False
    assert by_id.created_at is not None


@pytest.mark.asyncio
async def test_get_missing(repo):
    assert await repo.get_by_id("missing") is None
    assert await repo.get_by_email("nobody@x.com") is None


@pytest.mark.asyncio
async def test_duplicate_email_raises_integrity_error(repo, db_session, make_user):
    await repo.create(make_user())
    await db_session.commit()

    with pytest.raises(IntegrityError):
        await repo.create(make_user(username="alice2"))


@pytest.mark.asyncio
async def test_username_or_email_exists(repo, db_session, make_user):
    await repo.create(make_user())
    await db_session.commit()

    assert await repo.username_or_email_exists("alice", "other@x.com") is True
    assert await repo.username_or_email_exists("other", "a@x.com") is True
    assert await repo.username_or_email_exists("other", "other@x.com") is False


@pytest.mark.asyncio
async def test_mark_email_verified(repo, db_session, make_user):
    user = await repo.create(make_user())
    await db_session.commit()

    updated = await repo.mark_email_verified(user.id)
    await db_session.commit()

    assert updated is not None
    assert updated.email_verified is True
    assert await repo.mark_email_verified("missing") is None


@pytest.mark.asyncio
async def test_update_password_hash(repo, db_session, make_user):
    user = await repo.create(make_user())
    await db_session.commit()

    assert await repo.update_password_hash(user.id, "new-digest") is True
    await db_session.commit()

    reloaded = await repo.get_by_id(user.id)
    assert reloaded.password_hash == "new-digest"
    assert await repo.update_password_hash("missing", "x") is False
