"""Repositories for data access."""

from blogverse.infrastructure.persistence.repositories.credential_token_repository import (
    CredentialTokenRepository,
)
from blogverse.infrastructure.persistence.repositories.user_repository import UserRepository

__all__ = ["CredentialTokenRepository", "UserRepository"]
