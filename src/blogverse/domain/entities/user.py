"""User projections.

The users table is owned by the persistence layer. The domain only ever
hands out ``PublicUser``, which has no password hash field to leak.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from blogverse.core.clock import as_utc


@dataclass(frozen=True)
class PublicUser:
    """Subset of a user record that is safe to return to clients.

    Attributes:
        id: Unique identifier (UUID string).
        username: Unique display handle.
        email: Unique email address.
        bio: Optional profile text.
        image: Optional avatar URL.
        email_verified: Whether the user has proven ownership of the email.
        created_at: When the account was created.
    """

    id: str
    username: str
    email: str
    bio: str | None
    image: str | None
    email_verified: bool
    created_at: datetime

    @classmethod
    def from_record(cls, record: Any) -> "PublicUser":
        """Project a stored user record, dropping the credential columns.

        Naive timestamps from the store are read as UTC.
        """
        return cls(
            id=record.id,
            username=record.username,
            email=record.email,
            bio=record.bio,
            image=record.image,
            email_verified=record.email_verified,
            created_at=as_utc(record.created_at),
        )
