"""Company registration service."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.logging import get_logger
from src.marketplace.core.validators import company_id_from_name
from src.marketplace.models import Company
from src.marketplace.repositories import CompanyRepository

logger = get_logger(__name__)


class CompanyConflictError(ValueError):
    """Company email or derived id is already taken."""


class CompanyService:
    """Service for registering companies."""

    def __init__(self, company_repo: CompanyRepository, session: AsyncSession):
        self.company_repo = company_repo
        self.session = session

    async def create(self, name: str, email: str, image: str = "") -> Company:
        """Register a company keyed by the slug of its name.

        Raises:
            CompanyConflictError: If the email is taken, or another company
                already owns the derived id (e.g. "Acme Corp" vs "acmecorp").
            ValueError: If the name yields an empty id.
        """
        if await self.company_repo.get_by_email(email) is not None:
            raise CompanyConflictError("Company email already exists")

        company_id = company_id_from_name(name)
        if await self.company_repo.get_by_id(company_id) is not None:
            raise CompanyConflictError("Company name already taken")

        company = Company(id=company_id, name=name, email=email, image=image)
        self.company_repo.add(company)

        try:
            await self.session.commit()
        except IntegrityError as e:
            # Lost a race on one of the unique keys; report whichever is now taken
            await self.session.rollback()
            if await self.company_repo.get_by_email(email) is not None:
                raise CompanyConflictError("Company email already exists") from e
            raise CompanyConflictError("Company name already taken") from e

        await self.session.refresh(company)
        logger.info("Company registered", company_id=company.id)
        return company
