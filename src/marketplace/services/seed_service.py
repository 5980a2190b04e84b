"""Database seeding from the bundled dataset.

The whole seed runs in one transaction: either every table is replaced
with the bundled data or, on any failure, nothing changes.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.logging import get_logger
from src.marketplace.data import seed_data
from src.marketplace.models import (
    Company,
    ManageProject,
    Project,
    ProjectJoined,
    ViewApplication,
)
from src.marketplace.repositories import (
    CompanyRepository,
    ManageProjectRepository,
    ProjectJoinedRepository,
    ProjectRepository,
    UserRepository,
    ViewApplicationRepository,
)

logger = get_logger(__name__)


class SeedError(RuntimeError):
    """Seeding could not complete; the transaction was rolled back."""


class SeedService:
    """Replace the marketplace tables with the bundled dataset."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.users = UserRepository(session)
        self.companies = CompanyRepository(session)
        self.projects = ProjectRepository(session)
        self.manage_projects = ManageProjectRepository(session)
        self.projects_joined = ProjectJoinedRepository(session)
        self.view_applications = ViewApplicationRepository(session)

    async def seed(self) -> dict[str, int]:
        """Clear and repopulate the seeded tables.

        Returns:
            Number of rows inserted per table.

        Raises:
            SeedError: If no user exists to own the joined projects. All
                deletions and insertions of this call are rolled back.
        """
        try:
            counts = await self._replace_all()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            logger.warning("Seeding failed, transaction rolled back")
            raise

        logger.info("Database seeded", **counts)
        return counts

    async def _replace_all(self) -> dict[str, int]:
        # Children before parents so foreign keys hold at every step
        await self.projects_joined.delete_all()
        await self.view_applications.delete_all()
        await self.manage_projects.delete_all()
        await self.projects.delete_all()
        await self.companies.delete_all()

        self.companies.add_all([Company(**c) for c in seed_data.COMPANIES])
        await self.session.flush()
        self.projects.add_all([Project(**p) for p in seed_data.PROJECTS])
        self.manage_projects.add_all([ManageProject(**m) for m in seed_data.MANAGE_PROJECTS])
        await self.session.flush()

        user = await self.users.get_first()
        if user is None:
            raise SeedError("No user found to associate with projects joined")

        self.projects_joined.add_all(
            [ProjectJoined(**pj, user_id=user.id) for pj in seed_data.PROJECTS_JOINED]
        )
        self.view_applications.add_all(
            [ViewApplication(**va) for va in seed_data.VIEW_APPLICATIONS]
        )
        await self.session.flush()

        return {
            "companies": len(seed_data.COMPANIES),
            "projects": len(seed_data.PROJECTS),
            "manage_projects": len(seed_data.MANAGE_PROJECTS),
            "projects_joined": len(seed_data.PROJECTS_JOINED),
            "view_applications": len(seed_data.VIEW_APPLICATIONS),
        }
