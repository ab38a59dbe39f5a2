"""Unit tests for the credential token entity and liveness predicate."""

from datetime import datetime, timedelta, timezone

from blogverse.domain.entities.credential_token import (
    CredentialToken,
    CredentialTokenType,
    is_live,
)

NOW = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)


def _token(**overrides) -> CredentialToken:
    values = {
        "user_id": "user-123",
        "token": "abc",
        "token_type": CredentialTokenType.EMAIL_VERIFICATION,
        "expires_at": NOW + timedelta(hours=1),
    }
    values.update(overrides)
    return CredentialToken(**values)


class TestIsLive:
    """Tests for the is_live predicate."""

    def test_unused_and_unexpired_is_live(self):
        assert is_live(_token(), NOW) is True

    def test_used_token_is_not_live(self):
        assert is_live(_token(used_at=NOW - timedelta(minutes=1)), NOW) is False

    def test_expired_token_is_not_live(self):
        assert is_live(_token(expires_at=NOW - timedelta(seconds=1)), NOW) is False

    def test_expiry_boundary_is_not_live(self):
        assert is_live(_token(expires_at=NOW), NOW) is False

    def test_method_delegates_to_predicate(self):
        token = _token()

        assert token.is_live(NOW) is True
        assert token.is_live(NOW + timedelta(hours=2)) is False


class TestCredentialTokenType:
    """Tests for token type defaults."""

    def test_default_ttls(self):
        assert CredentialTokenType.EMAIL_VERIFICATION.default_ttl == timedelta(hours=24)
        assert CredentialTokenType.PASSWORD_RESET.default_ttl == timedelta(hours=1)

    def test_values(self):
        assert CredentialTokenType("email_verification") is CredentialTokenType.EMAIL_VERIFICATION
        assert CredentialTokenType("password_reset") is CredentialTokenType.PASSWORD_RESET


def test_new_token_defaults():
    token = _token()

    assert token.used_at is None
    assert len(token.id) == 36
    assert token.created_at.tzinfo is not None
