"""Domain services."""

from blogverse.domain.services.auth_result import Err, ErrorKind, Ok, Result, SignInResult
from blogverse.domain.services.auth_service import AuthService

__all__ = ["AuthService", "Err", "ErrorKind", "Ok", "Result", "SignInResult"]
