"""Credential token entity.

Single-use, typed, time-bounded secrets sent to users out of band to prove
ownership of an email address or to authorise a password reset.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
import uuid


class CredentialTokenType(str, Enum):
    """What a credential token authorises."""

    EMAIL_VERIFICATION = "email_verification"
    PASSWORD_RESET = "password_reset"

    @property
    def default_ttl(self) -> timedelta:
        """Lifetime of a freshly issued token of this type."""
        if self is CredentialTokenType.EMAIL_VERIFICATION:
            return timedelta(hours=24)
        return timedelta(hours=1)


@dataclass
class CredentialToken:
    """Credential token entity.

    Attributes:
        id: Unique identifier (UUID string).
        user_id: ID of the user this token belongs to.
        token: The opaque token string (unique).
        token_type: What the token authorises.
        expires_at: When the token expires.
        created_at: When the token was created.
        used_at: When the token was consumed or invalidated (None while unused).
    """

    user_id: str
    token: str
    token_type: CredentialTokenType
    expires_at: datetime
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    used_at: datetime | None = None

    def is_live(self, now: datetime | None = None) -> bool:
        """Check if the token is neither used nor expired."""
        return is_live(self, now or datetime.now(timezone.utc))


def is_live(token: CredentialToken, now: datetime) -> bool:
    """A token is live iff it has not been used and ``now`` is before its expiry."""
    return token.used_at is None and now < token.expires_at
