"""Unit tests for CredentialTokenRepository."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy import select

from blogverse.domain.entities.credential_token import CredentialTokenType
from blogverse.infrastructure.persistence.models import CredentialTokenModel
from blogverse.infrastructure.persistence.repositories import CredentialTokenRepository

VERIFY = CredentialTokenType.EMAIL_VERIFICATION
RESET = CredentialTokenType.PASSWORD_RESET


class FakeClock:
    """Settable clock."""

    def __init__(self) -> None:
        self.now = datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def user(db_session, make_user):
    user = make_user()
    db_session.add(user)
    await db_session.commit()
    return user


@pytest.fixture
def repo(db_session, clock) -> CredentialTokenRepository:
    return CredentialTokenRepository(db_session, clock=clock)


@pytest.mark.asyncio
async def test_issue_stores_live_token(repo, user, db_session, clock):
    token = await repo.issue(user.id, VERIFY)
    await db_session.commit()

    assert len(token.token) == 48
    assert token.expires_at == clock.now + timedelta(hours=24)
    stored = await repo.find_live(token.token, VERIFY)
    assert stored is not None
    assert stored.id == token.id
    assert stored.user_id == user.id


@pytest.mark.asyncio
async def test_issue_password_reset_has_one_hour_ttl(repo, user, clock):
    token = await repo.issue(user.id, RESET)

    assert token.expires_at - clock.now == timedelta(hours=1)


@pytest.mark.asyncio
async def test_issue_custom_ttl(repo, user, clock):
    token = await repo.issue(user.id, RESET, ttl=timedelta(minutes=5))

    assert token.expires_at == clock.now + timedelta(minutes=5)


@pytest.mark.asyncio
async def test_issue_invalidates_previous_tokens_of_same_type(repo, user, db_session):
    first = await repo.issue(user.id, VERIFY)
    second = await repo.issue(user.id, VERIFY)
    await db_session.commit()

    assert await repo.find_live(first.token, VERIFY) is None
    assert await repo.find_live(second.token, VERIFY) is not None

    old = await repo.get_by_token(first.token)
    assert old is not None
    assert old.used_at is not None


@pytest.mark.asyncio
async def test_issue_leaves_other_types_alone(repo, user, db_session):
    verify = await repo.issue(user.id, VERIFY)
    await repo.issue(user.id, RESET)
    await db_session.commit()

    assert await repo.find_live(verify.token, VERIFY) is not None


@pytest.mark.asyncio
async def test_issue_leaves_other_users_alone(repo, user, db_session, make_user):
    other = make_user(username="bob", email="b@x.com")
    db_session.add(other)
    await db_session.commit()

    mine = await repo.issue(user.id, VERIFY)
    await repo.issue(other.id, VERIFY)
    await db_session.commit()

    assert await repo.find_live(mine.token, VERIFY) is not None


@pytest.mark.asyncio
async def test_find_live_unknown_token(repo):
    assert await repo.find_live("does-not-exist", VERIFY) is None


@pytest.mark.asyncio
async def test_find_live_wrong_type(repo, user, db_session):
    token = await repo.issue(user.id, VERIFY)
    await db_session.commit()

    assert await repo.find_live(token.token, RESET) is None


@pytest.mark.asyncio
async def test_find_live_expired_token(repo, user, db_session, clock):
    token = await repo.issue(user.id, RESET)
    await db_session.commit()

    clock.advance(timedelta(hours=1, seconds=1))

    assert await repo.find_live(token.token, RESET) is None


@pytest.mark.asyncio
async def test_consume_is_single_use(repo, user, db_session):
    token = await repo.issue(user.id, VERIFY)
    await db_session.commit()

    assert await repo.consume(token.id) is True
    await db_session.commit()

    assert await repo.consume(token.id) is False
    assert await repo.find_live(token.token, VERIFY) is None


@pytest.mark.asyncio
async def test_consume_unknown_id(repo):
    assert await repo.consume("missing") is False


@pytest.mark.asyncio
async def test_stored_datetimes_are_timezone_aware(repo, user, db_session):
    token = await repo.issue(user.id, VERIFY)
    await db_session.commit()

    stored = await repo.get_by_token(token.token)

    assert stored.expires_at.tzinfo is not None
    assert stored.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_delete_expired(repo, user, db_session, clock):
    reset = await repo.issue(user.id, RESET)
    verify = await repo.issue(user.id, VERIFY)
    await db_session.commit()

    clock.advance(timedelta(hours=2))
    deleted = await repo.delete_expired()
    await db_session.commit()

    assert deleted == 1
    remaining = (await db_session.execute(select(CredentialTokenModel.id))).scalars().all()
    assert remaining == [verify.id]
    assert await repo.get_by_token(reset.token) is None
