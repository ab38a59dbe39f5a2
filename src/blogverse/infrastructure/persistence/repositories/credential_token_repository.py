"""Repository for credential token operations.

Implements the token state machine: issue (invalidating earlier live tokens
of the same kind), look up live tokens, and consume them.
"""

from collections.abc import Callable
from datetime import datetime, timedelta

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogverse.core.clock import as_utc, utcnow
from blogverse.domain.entities.credential_token import (
    CredentialToken,
    CredentialTokenType,
    is_live,
)
from blogverse.infrastructure.persistence.models import CredentialTokenModel
from blogverse.infrastructure.services.token_service import (
    SecureTokenGenerator,
    token_generator,
)


class CredentialTokenRepository:
    """Repository for credential token database operations."""

    def __init__(
        self,
        session: AsyncSession,
        generator: SecureTokenGenerator = token_generator,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
            generator: Source of token strings.
            clock: Source of the current time, overridable in tests.
        """
        self._session = session
        self._generator = generator
        self._clock = clock

    def _to_model(self, entity: CredentialToken) -> CredentialTokenModel:
        """Convert domain entity to infrastructure model."""
        return CredentialTokenModel(
            id=entity.id,
            user_id=entity.user_id,
            token=entity.token,
            token_type=entity.token_type.value,
            expires_at=entity.expires_at,
            used_at=entity.used_at,
            created_at=entity.created_at,
        )

    def _to_entity(self, model: CredentialTokenModel) -> CredentialToken:
        """Convert infrastructure model to domain entity."""
        return CredentialToken(
            id=model.id,
            user_id=model.user_id,
            token=model.token,
            token_type=CredentialTokenType(model.token_type),
            expires_at=as_utc(model.expires_at),
            created_at=as_utc(model.created_at),
            used_at=as_utc(model.used_at),
        )

    async def issue(
        self,
        user_id: str,
        token_type: CredentialTokenType,
        ttl: timedelta | None = None,
    ) -> CredentialToken:
        """Invalidate the user's live tokens of this type and store a new one.

        Invalidation and insertion are separate statements; two concurrent
        calls may briefly leave two live tokens.

        Args:
            user_id: Owner of the token.
            token_type: What the token authorises.
            ttl: Lifetime. Defaults to the type's standard lifetime.

        Returns:
            The stored token.
        """
        await self.invalidate_live(user_id, token_type)

        now = self._clock()
        entity = CredentialToken(
            user_id=user_id,
            token=self._generator.generate(),
            token_type=token_type,
            expires_at=now + (ttl if ttl is not None else token_type.default_ttl),
            created_at=now,
        )
        model = self._to_model(entity)
        self._session.add(model)
        await self._session.flush()
        return entity

    async def invalidate_live(self, user_id: str, token_type: CredentialTokenType) -> int:
        """Mark every unused token of this type for the user as used.

        Returns:
            Number of tokens invalidated.
        """
        stmt = (
            update(CredentialTokenModel)
            .where(
                CredentialTokenModel.user_id == user_id,
                CredentialTokenModel.token_type == token_type.value,
                CredentialTokenModel.used_at.is_(None),
            )
            .values(used_at=self._clock())
        )
        result = await self._session.execute(stmt)
        return result.rowcount

    async def get_by_token(self, token: str) -> CredentialToken | None:
        """Look up a token by its exact string, regardless of state."""
        stmt = select(CredentialTokenModel).where(CredentialTokenModel.token == token)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_live(
        self, token: str, token_type: CredentialTokenType
    ) -> CredentialToken | None:
        """Look up a live token of the given type.

        Absent, used, expired and wrong-type tokens all return None.
        """
        entity = await self.get_by_token(token)
        if entity is None or entity.token_type is not token_type:
            return None
        if not is_live(entity, self._clock()):
            return None
        return entity

    async def consume(self, token_id: str) -> bool:
        """Mark a token as used, if nobody else has.

        Must run in the same transaction as the effect the token authorises.

        Returns:
            True if this call consumed the token, False if it was already used.
        """
        stmt = (
            update(CredentialTokenModel)
            .where(
                CredentialTokenModel.id == token_id,
                CredentialTokenModel.used_at.is_(None),
            )
            .values(used_at=self._clock())
        )
        result = await self._session.execute(stmt)
        return result.rowcount == 1

    async def delete_expired(self) -> int:
        """Delete all expired tokens.

        Returns:
            Number of tokens deleted.
        """
        stmt = delete(CredentialTokenModel).where(
            CredentialTokenModel.expires_at < self._clock()
        )
        result = await self._session.execute(stmt)
        return result.rowcount
