"""Unit tests for the bearer token issuer."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from blogverse.domain.entities.session_claims import SESSION_LIFETIME
from blogverse.infrastructure.auth.jwt_service import BearerTokenIssuer

SECRET = "unit-test-secret-key-with-enough-length"


@pytest.fixture
def issuer() -> BearerTokenIssuer:
    return BearerTokenIssuer(secret_key=SECRET)


class TestIssue:
    """Tests for BearerTokenIssuer.issue."""

    def test_payload_claims(self, issuer):
        token = issuer.issue("user-123")
        payload = jwt.decode(token, SECRET, algorithms=["HS256"], issuer="blogverse")

        assert payload["sub"] == "user-123"
        assert payload["iss"] == "blogverse"
        assert payload["exp"] - payload["iat"] == int(SESSION_LIFETIME.total_seconds())

    def test_uses_clock(self):
        fixed = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
        issuer = BearerTokenIssuer(secret_key=SECRET, clock=lambda: fixed)

        payload = jwt.decode(
            issuer.issue("user-123"),
            SECRET,
            algorithms=["HS256"],
            options={"verify_exp": False, "verify_iat": False},
            issuer="blogverse",
        )
        assert payload["iat"] == int(fixed.timestamp())


class TestValidate:
    """Tests for BearerTokenIssuer.validate."""

    def test_valid_token_round_trips_subject(self, issuer):
        claims = issuer.validate(issuer.issue("user-123"))

        assert claims is not None
        assert claims.subject == "user-123"
        assert claims.expires_at - claims.issued_at == SESSION_LIFETIME

    def test_expired_token(self):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        stale = BearerTokenIssuer(secret_key=SECRET, clock=lambda: past)

        assert stale.validate(stale.issue("user-123")) is None

    def test_wrong_secret(self, issuer):
        other = BearerTokenIssuer(secret_key="a-completely-different-secret-key")

        assert issuer.validate(other.issue("user-123")) is None

    def test_tampered_token(self, issuer):
        header, payload, signature = issuer.issue("user-123").split(".")
        tampered = f"{header}.{payload}.{signature[:-2]}xx"

        assert issuer.validate(tampered) is None

    def test_malformed_token(self, issuer):
        assert issuer.validate("not.a.jwt") is None
        assert issuer.validate("") is None

    def test_wrong_issuer(self, issuer):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"iss": "someone-else", "sub": "user-123", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )

        assert issuer.validate(token) is None

    def test_missing_subject(self, issuer):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"iss": "blogverse", "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )

        assert issuer.validate(token) is None

    def test_none_algorithm_rejected(self, issuer):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"iss": "blogverse", "sub": "user-123", "iat": now, "exp": now + timedelta(hours=1)},
            None,
            algorithm="none",
        )

        assert issuer.validate(token) is None
