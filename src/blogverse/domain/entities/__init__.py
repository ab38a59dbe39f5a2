"""Domain entities."""

from blogverse.domain.entities.credential_token import (
    CredentialToken,
    CredentialTokenType,
    is_live,
)
from blogverse.domain.entities.session_claims import SESSION_LIFETIME, SessionClaims
from blogverse.domain.entities.user import PublicUser

__all__ = [
    "SESSION_LIFETIME",
    "CredentialToken",
    "CredentialTokenType",
    "PublicUser",
    "SessionClaims",
    "is_live",
]
