"""Authentication infrastructure components.

This module provides password hashing and bearer token services.
"""

from blogverse.infrastructure.auth.jwt_service import (
    BearerTokenIssuer,
    bearer_token_issuer,
)
from blogverse.infrastructure.auth.password_hasher import (
    DUMMY_PASSWORD_HASH,
    PasswordHasher,
    hash_password,
    needs_rehash,
    password_hasher,
    verify_password,
)

__all__ = [
    "BearerTokenIssuer",
    "DUMMY_PASSWORD_HASH",
    "PasswordHasher",
    "bearer_token_issuer",
    "hash_password",
    "needs_rehash",
    "password_hasher",
    "verify_password",
]
