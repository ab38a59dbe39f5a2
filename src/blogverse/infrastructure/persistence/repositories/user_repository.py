"""User repository for database operations."""

from datetime import datetime, timezone

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogverse.infrastructure.persistence.models import UserModel


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, user: UserModel) -> UserModel:
        """Create a new user.

        Raises:
            sqlalchemy.exc.IntegrityError: If the username or email is taken.
        """
        self.session.add(user)
        await self.session.flush()
        return user

    async def get_by_id(self, user_id: str) -> UserModel | None:
        """Get a user by ID."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> UserModel | None:
        """Get a user by email address."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        return result.scalar_one_or_none()

    async def username_or_email_exists(self, username: str, email: str) -> bool:
        """Check if either the username or the email is already registered."""
        result = await self.session.execute(
            select(UserModel.id)
            .where(or_(UserModel.username == username, UserModel.email == email))
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def mark_email_verified(self, user_id: str) -> UserModel | None:
        """Set the email-verified flag on a user.

        Returns:
            The updated user, or None if no such user exists.
        """
        result = await self.session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(email_verified=True, updated_at=datetime.now(timezone.utc))
        )
        if result.rowcount == 0:
            return None
        return await self.get_by_id(user_id)

    async def update_password_hash(self, user_id: str, password_hash: str) -> bool:
        """Overwrite a user's password hash.

        Returns:
            True if the user was updated, False if not found.
        """
        result = await self.session.execute(
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(password_hash=password_hash, updated_at=datetime.now(timezone.utc))
        )
        return result.rowcount > 0
