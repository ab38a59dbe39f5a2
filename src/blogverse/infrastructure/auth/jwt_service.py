"""Bearer token service.

Mints and validates short-lived HS256 JWTs that carry a user identifier.
Tokens have a fixed one-hour lifetime and there is no refresh mechanism.
"""

from collections.abc import Callable
from datetime import datetime, timezone

import jwt

from blogverse.core.config import get_settings
from blogverse.core.logging import get_logger
from blogverse.domain.entities.session_claims import SessionClaims

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BearerTokenIssuer:
    """Service for creating and validating signed session tokens."""

    ALGORITHM = "HS256"
    ISSUER = "blogverse"

    def __init__(
        self,
        secret_key: str | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the issuer.

        Args:
            secret_key: Secret key for signing tokens. If not provided,
                        uses the configured secret key from settings.
            clock: Source of the current time, overridable in tests.
        """
        self._secret_key = secret_key
        self._clock = clock

    @property
    def secret_key(self) -> str:
        """Get the secret key for signing tokens."""
        if self._secret_key:
            return self._secret_key
        return get_settings().secret_key

    def issue(self, user_id: str) -> str:
        """Create a signed token for a user.

        Args:
            user_id: The user's unique identifier.

        Returns:
            Encoded JWT.
        """
        claims = SessionClaims.for_user(user_id, self._clock())
        payload = {
            "iss": self.ISSUER,
            "sub": claims.subject,
            "iat": claims.issued_at,
            "exp": claims.expires_at,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.ALGORITHM)

    def validate(self, token: str) -> SessionClaims | None:
        """Verify a token's signature and expiry.

        Every failure (bad signature, malformed structure, wrong issuer,
        missing claim, expired) returns None.

        Args:
            token: The encoded JWT.

        Returns:
            The token's claims, or None if it must not be trusted.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self.ISSUER,
                options={"require": ["sub", "iat", "exp", "iss"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Bearer token rejected: expired")
            return None
        except jwt.InvalidTokenError as e:
            logger.info("Bearer token rejected: invalid", error=str(e))
            return None

        subject = payload["sub"]
        if not isinstance(subject, str) or not subject:
            logger.info("Bearer token rejected: malformed subject")
            return None

        return SessionClaims(
            subject=subject,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )


# Default issuer instance
bearer_token_issuer = BearerTokenIssuer()
