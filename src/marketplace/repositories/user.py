"""Repository for User entity."""

from sqlmodel import select

from src.marketplace.models import User
from src.marketplace.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email address."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with the given email exists."""
        user = await self.get_by_email(email)
        return user is not None

    async def get_first(self) -> User | None:
        """Get the oldest user, or None when the table is empty."""
        result = await self.session.execute(
            select(User).order_by(User.created_at, User.id).limit(1)
        )
        return result.scalar_one_or_none()
