"""Outcome types returned by the authentication service.

Every fallible operation returns either ``Ok`` wrapping its value or ``Err``
naming one of the error kinds below. The HTTP layer maps kinds to status
codes; nothing inside the service raises for a domain condition.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from blogverse.domain.entities.user import PublicUser

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Categories of authentication failure."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    INVALID_TOKEN = "invalid_token"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed outcome.

    Attributes:
        kind: Error category.
        message: Client-safe description. Never contains internals.
    """

    kind: ErrorKind
    message: str


Result = Ok[T] | Err


@dataclass(frozen=True)
class SignInResult:
    """Value returned by a successful sign-in."""

    token: str
    user: PublicUser


# Client-facing messages. The enumeration-sensitive ones must be identical
# whatever the state of the targeted account.
INVALID_CREDENTIALS = "Invalid credentials"
EMAIL_NOT_VERIFIED = "Please verify your email before logging in"
INVALID_OR_EXPIRED_TOKEN = "Invalid or expired token"
USER_NOT_FOUND = "User not found"
DUPLICATE_USER = "Username or Email already exists"
INTERNAL_ERROR = "Internal server error"

SIGNUP_CREATED = "Account created. Please check your email to verify your account."
EMAIL_VERIFIED = "Email verified successfully"
VERIFICATION_SENT = "If an account exists, a verification email has been sent."
RESET_SENT = "If an account exists, a password reset email has been sent."
PASSWORD_RESET = "Password reset successfully"
