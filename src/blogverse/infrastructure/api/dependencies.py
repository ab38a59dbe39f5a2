"""FastAPI dependencies for services and authentication.

Builds the per-request ``AuthService`` from its collaborators and extracts
validated session claims from the Authorization header.
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from blogverse.core.logging import get_logger
from blogverse.domain.entities.session_claims import SessionClaims
from blogverse.domain.services.auth_service import AuthService
from blogverse.infrastructure.auth import bearer_token_issuer, password_hasher
from blogverse.infrastructure.auth.jwt_service import BearerTokenIssuer
from blogverse.infrastructure.persistence.database import get_db_session
from blogverse.infrastructure.persistence.repositories import (
    CredentialTokenRepository,
    UserRepository,
)
from blogverse.infrastructure.services.email_service import EmailService, build_email_service

logger = get_logger(__name__)

_email_service: EmailService | None = None


def get_email_service() -> EmailService:
    """Get the application email service, built from settings on first use."""
    global _email_service
    if _email_service is None:
        _email_service = build_email_service()
    return _email_service


def get_bearer_issuer() -> BearerTokenIssuer:
    """Get the bearer token issuer."""
    return bearer_token_issuer


def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
    email_service: Annotated[EmailService, Depends(get_email_service)],
    bearer_issuer: Annotated[BearerTokenIssuer, Depends(get_bearer_issuer)],
) -> AuthService:
    """Build an auth service bound to the request's database session."""
    return AuthService(
        session=session,
        user_repo=UserRepository(session),
        token_store=CredentialTokenRepository(session),
        password_hasher=password_hasher,
        bearer_issuer=bearer_issuer,
        notifier=email_service,
    )


async def get_current_claims(
    bearer_issuer: Annotated[BearerTokenIssuer, Depends(get_bearer_issuer)],
    authorization: Annotated[str | None, Header()] = None,
) -> SessionClaims:
    """Extract and validate session claims from the Authorization header.

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
            or expired.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if authorization is None:
        logger.info("Authentication failed: missing Authorization header")
        raise credentials_exception

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        logger.info("Authentication failed: invalid Authorization header format")
        raise credentials_exception

    claims = bearer_issuer.validate(parts[1])
    if claims is None:
        raise credentials_exception
    return claims


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CurrentClaims = Annotated[SessionClaims, Depends(get_current_claims)]
