"""Repository for Company entity."""

from sqlmodel import select

from src.marketplace.models import Company
from src.marketplace.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    """Repository for Company entity."""

    model = Company

    async def get_by_email(self, email: str) -> Company | None:
        """Get company by email address."""
        result = await self.session.execute(select(Company).where(Company.email == email))
        return result.scalar_one_or_none()
