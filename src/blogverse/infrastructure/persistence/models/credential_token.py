"""SQLAlchemy model for credential tokens.

Stores the single-use tokens sent to users for email verification and
password reset.
"""

from datetime import datetime
import uuid

from sqlalchemy import DateTime, ForeignKey, Index, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogverse.infrastructure.persistence.database import Base


class CredentialTokenModel(Base):
    """SQLAlchemy model for the auth_tokens table.

    Attributes:
        id: Primary key (UUID string).
        user_id: Foreign key to users table.
        token: Opaque token string (unique).
        token_type: 'email_verification' or 'password_reset'.
        expires_at: Timestamp when the token expires.
        used_at: Timestamp when the token was used (nullable).
        created_at: Timestamp when the token was created.
    """

    __tablename__ = "auth_tokens"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        comment="Token ID (UUID)",
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Foreign key to users table",
    )
    token: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True,
        comment="Opaque token string",
    )
    token_type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="email_verification or password_reset",
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        comment="Timestamp when the token expires",
    )
    used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Timestamp when the token was used",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Timestamp when the token was created",
    )

    # Relationships
    user: Mapped["UserModel"] = relationship(  # noqa: F821
        "UserModel",
        back_populates="credential_tokens",
    )

    __table_args__ = (
        Index("ix_auth_tokens_user_type", "user_id", "token_type"),
    )

    def __repr__(self) -> str:
        return f"<CredentialToken(id={self.id}, user_id={self.user_id}, type={self.token_type})>"
