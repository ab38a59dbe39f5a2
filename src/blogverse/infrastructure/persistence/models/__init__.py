"""SQLAlchemy models for the BlogVerse auth tables.

All models inherit from the Base class defined in database.py and are
created on application startup in development mode.
"""

from blogverse.infrastructure.persistence.models.credential_token import CredentialTokenModel
from blogverse.infrastructure.persistence.models.user import UserModel

__all__ = [
    "CredentialTokenModel",
    "UserModel",
]
