"""Session claims carried by a bearer token.

Claims are never persisted. A validly signed, unexpired set of claims is the
only proof of identity for identity-bound operations.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta

SESSION_LIFETIME = timedelta(hours=1)


@dataclass(frozen=True)
class SessionClaims:
    """Identity asserted by a bearer token.

    Attributes:
        subject: ID of the user the token was issued to.
        issued_at: When the token was minted.
        expires_at: When the token stops being accepted.
    """

    subject: str
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def for_user(cls, user_id: str, now: datetime) -> "SessionClaims":
        """Build claims for a token issued at ``now`` with the fixed lifetime."""
        return cls(subject=user_id, issued_at=now, expires_at=now + SESSION_LIFETIME)
