"""Authentication service.

Orchestrates signup, email verification, sign-in and password recovery over
the user repository, the credential token store, the password hasher, the
bearer token issuer and the email notifier. All collaborators are passed in
at construction.

Operations return ``Ok`` or ``Err`` values; storage and hashing failures are
rolled back, logged and reported as ``ErrorKind.INTERNAL``.
"""

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, TypeVar
import uuid

from argon2.exceptions import HashingError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from blogverse.core.logging import get_logger
from blogverse.domain.entities.credential_token import CredentialTokenType
from blogverse.domain.entities.session_claims import SessionClaims
from blogverse.domain.entities.user import PublicUser
from blogverse.domain.services.auth_result import (
    DUPLICATE_USER,
    EMAIL_NOT_VERIFIED,
    EMAIL_VERIFIED,
    INTERNAL_ERROR,
    INVALID_CREDENTIALS,
    INVALID_OR_EXPIRED_TOKEN,
    PASSWORD_RESET,
    RESET_SENT,
    USER_NOT_FOUND,
    VERIFICATION_SENT,
    Err,
    ErrorKind,
    Ok,
    Result,
    SignInResult,
)
from blogverse.infrastructure.auth.jwt_service import BearerTokenIssuer
from blogverse.infrastructure.auth.password_hasher import DUMMY_PASSWORD_HASH, PasswordHasher
from blogverse.infrastructure.persistence.models import UserModel
from blogverse.infrastructure.persistence.repositories.credential_token_repository import (
    CredentialTokenRepository,
)
from blogverse.infrastructure.persistence.repositories.user_repository import UserRepository
from blogverse.infrastructure.services.email_service import EmailService

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _internal_errors_as_result(func: F) -> F:
    """Turn storage and hashing failures into ``Err(INTERNAL)``."""

    @wraps(func)
    async def wrapper(self: "AuthService", *args: Any, **kwargs: Any) -> Any:
        try:
            return await func(self, *args, **kwargs)
        except (SQLAlchemyError, HashingError):
            await self.session.rollback()
            logger.error("Auth operation failed", operation=func.__name__, exc_info=True)
            return Err(ErrorKind.INTERNAL, INTERNAL_ERROR)

    return wrapper  # type: ignore[return-value]


class AuthService:
    """Service for credential lifecycle business logic."""

    def __init__(
        self,
        session: AsyncSession,
        user_repo: UserRepository,
        token_store: CredentialTokenRepository,
        password_hasher: PasswordHasher,
        bearer_issuer: BearerTokenIssuer,
        notifier: EmailService,
    ) -> None:
        """Initialize the auth service.

        Args:
            session: SQLAlchemy async session; the service owns its commits.
            user_repo: Repository for user operations.
            token_store: Repository for credential token operations.
            password_hasher: Hashes and verifies passwords.
            bearer_issuer: Mints session tokens on sign-in.
            notifier: Sends account emails. Failures never fail an operation.
        """
        self.session = session
        self.user_repo = user_repo
        self.token_store = token_store
        self.password_hasher = password_hasher
        self.bearer_issuer = bearer_issuer
        self.notifier = notifier

    async def _notify(
        self,
        kind: str,
        user_id: str,
        send: Callable[..., Awaitable[None]],
        *args: str,
    ) -> None:
        """Deliver an email, logging and discarding any failure."""
        try:
            await send(*args)
        except Exception:
            logger.error("Failed to send email", kind=kind, user_id=user_id, exc_info=True)

    @_internal_errors_as_result
    async def sign_up(self, username: str, email: str, password: str) -> Result[PublicUser]:
        """Register a new, unverified user and email them a verification link.

        Returns:
            Ok with the created user, or Err(CONFLICT) if the username or
            email is already registered.
        """
        if await self.user_repo.username_or_email_exists(username, email):
            logger.info("Sign-up rejected: duplicate username or email", username=username)
            return Err(ErrorKind.CONFLICT, DUPLICATE_USER)

        user = UserModel(
            id=str(uuid.uuid4()),
            username=username,
            email=email,
            password_hash=self.password_hasher.hash(password),
            email_verified=False,
        )
        try:
            await self.user_repo.create(user)
        except IntegrityError:
            # Lost a race with a concurrent sign-up
            await self.session.rollback()
            logger.info("Sign-up rejected: unique constraint", username=username)
            return Err(ErrorKind.CONFLICT, DUPLICATE_USER)

        token = await self.token_store.issue(user.id, CredentialTokenType.EMAIL_VERIFICATION)
        await self.session.commit()

        logger.info("User signed up", user_id=user.id, username=username)
        await self._notify(
            "verification",
            user.id,
            self.notifier.send_verification_email,
            user.email,
            token.token,
        )
        return Ok(PublicUser.from_record(user))

    @_internal_errors_as_result
    async def verify_email(self, token: str) -> Result[str]:
        """Consume a verification token and mark its owner's email verified."""
        record = await self.token_store.find_live(token, CredentialTokenType.EMAIL_VERIFICATION)
        if record is None:
            logger.info("Email verification failed: token invalid or expired")
            return Err(ErrorKind.INVALID_TOKEN, INVALID_OR_EXPIRED_TOKEN)

        if not await self.token_store.consume(record.id):
            await self.session.rollback()
            logger.info("Email verification failed: token already used", token_id=record.id)
            return Err(ErrorKind.INVALID_TOKEN, INVALID_OR_EXPIRED_TOKEN)

        user = await self.user_repo.mark_email_verified(record.user_id)
        if user is None:
            await self.session.rollback()
            logger.error("Email verification failed: user not found", user_id=record.user_id)
            return Err(ErrorKind.INVALID_TOKEN, INVALID_OR_EXPIRED_TOKEN)

        await self.session.commit()

        logger.info("Email verified", user_id=user.id)
        await self._notify(
            "welcome",
            user.id,
            self.notifier.send_welcome_email,
            user.email,
            user.username,
        )
        return Ok(EMAIL_VERIFIED)

    @_internal_errors_as_result
    async def resend_verification(self, email: str) -> Result[str]:
        """Reissue a verification token if the account exists and is unverified.

        The returned message is the same whatever the state of the account.
        """
        user = await self.user_repo.get_by_email(email)
        if user is None or user.email_verified:
            return Ok(VERIFICATION_SENT)

        token = await self.token_store.issue(user.id, CredentialTokenType.EMAIL_VERIFICATION)
        await self.session.commit()

        await self._notify(
            "verification",
            user.id,
            self.notifier.send_verification_email,
            user.email,
            token.token,
        )
        return Ok(VERIFICATION_SENT)

    @_internal_errors_as_result
    async def sign_in(self, email: str, password: str) -> Result[SignInResult]:
        """Check credentials and issue a bearer token.

        Unknown email and wrong password give the same error. A correct
        password on an unverified account gives EMAIL_NOT_VERIFIED.
        """
        user = await self.user_repo.get_by_email(email)
        if user is None:
            # Same work as a real check
            self.password_hasher.verify(DUMMY_PASSWORD_HASH, password)
            logger.info("Sign-in failed: unknown email")
            return Err(ErrorKind.UNAUTHORIZED, INVALID_CREDENTIALS)

        if not self.password_hasher.verify(user.password_hash, password):
            logger.info("Sign-in failed: wrong password", user_id=user.id)
            return Err(ErrorKind.UNAUTHORIZED, INVALID_CREDENTIALS)

        if not user.email_verified:
            logger.info("Sign-in failed: email not verified", user_id=user.id)
            return Err(ErrorKind.EMAIL_NOT_VERIFIED, EMAIL_NOT_VERIFIED)

        if self.password_hasher.needs_rehash(user.password_hash):
            await self.user_repo.update_password_hash(user.id, self.password_hasher.hash(password))
            await self.session.commit()
            logger.info("Password hash upgraded", user_id=user.id)

        token = self.bearer_issuer.issue(user.id)
        logger.info("User signed in", user_id=user.id)
        return Ok(SignInResult(token=token, user=PublicUser.from_record(user)))

    @_internal_errors_as_result
    async def forgot_password(self, email: str) -> Result[str]:
        """Issue a password reset token if the account exists.

        The returned message is the same whether or not it does.
        """
        user = await self.user_repo.get_by_email(email)
        if user is None:
            return Ok(RESET_SENT)

        token = await self.token_store.issue(user.id, CredentialTokenType.PASSWORD_RESET)
        await self.session.commit()

        await self._notify(
            "password_reset",
            user.id,
            self.notifier.send_password_reset_email,
            user.email,
            token.token,
        )
        return Ok(RESET_SENT)

    @_internal_errors_as_result
    async def reset_password(self, token: str, new_password: str) -> Result[str]:
        """Consume a reset token and overwrite its owner's password.

        No session is issued; the user signs in again with the new password.
        """
        record = await self.token_store.find_live(token, CredentialTokenType.PASSWORD_RESET)
        if record is None:
            logger.info("Password reset failed: token invalid or expired")
            return Err(ErrorKind.INVALID_TOKEN, INVALID_OR_EXPIRED_TOKEN)

        password_hash = self.password_hasher.hash(new_password)

        if not await self.token_store.consume(record.id):
            await self.session.rollback()
            logger.info("Password reset failed: token already used", token_id=record.id)
            return Err(ErrorKind.INVALID_TOKEN, INVALID_OR_EXPIRED_TOKEN)

        if not await self.user_repo.update_password_hash(record.user_id, password_hash):
            await self.session.rollback()
            logger.error("Password reset failed: user not found", user_id=record.user_id)
            return Err(ErrorKind.INVALID_TOKEN, INVALID_OR_EXPIRED_TOKEN)

        await self.session.commit()
        logger.info("Password reset successfully", user_id=record.user_id)
        return Ok(PASSWORD_RESET)

    async def get_current_user(self, claims: SessionClaims) -> Result[PublicUser]:
        """Load the user a validated bearer token refers to."""
        return await self.get_user(claims.subject)

    @_internal_errors_as_result
    async def get_user(self, user_id: str) -> Result[PublicUser]:
        """Load a user's public projection by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            return Err(ErrorKind.NOT_FOUND, USER_NOT_FOUND)
        return Ok(PublicUser.from_record(user))
