"""Project listing and administration."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.logging import get_logger
from src.marketplace.core.reporting import report_exception
from src.marketplace.data.seed_data import COMPANIES, PROJECTS
from src.marketplace.models import Company, Project
from src.marketplace.repositories import ProjectRepository
from src.marketplace.schemas.project import ProjectRead

logger = get_logger(__name__)


def fallback_projects() -> list[ProjectRead]:
    """Build the bundled project dataset in the same shape as a live listing."""
    companies = {c["id"]: Company(**c) for c in COMPANIES}
    rows = [(Project(**p), companies.get(p["company_id"])) for p in PROJECTS]
    rows.sort(key=lambda row: (row[0].title, row[0].id))
    return [ProjectRead.from_row(project, company) for project, company in rows]


class ProjectService:
    """Service for listing and deleting projects."""

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def list_projects(self) -> list[ProjectRead]:
        """List projects with their company expanded."""
        rows = await self.project_repo.list_with_company()
        return [ProjectRead.from_row(project, company) for project, company in rows]

    async def list_projects_or_fallback(self) -> list[ProjectRead]:
        """List projects, serving the bundled dataset when the table is empty or the query fails.

        Callers cannot tell "no data yet" from "store down"; failures are
        still reported to the error sink.
        """
        try:
            projects = await self.list_projects()
        except Exception as e:
            report_exception(e, operation="list_projects")
            await self.session.rollback()
            logger.warning("Project query failed, returning fallback projects")
            return fallback_projects()

        if not projects:
            logger.info("No projects in database, returning fallback projects")
            return fallback_projects()
        return projects

    async def delete(self, project_id: str) -> bool:
        """Delete a project. Returns False if it does not exist."""
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return False

        await self.session.delete(project)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project deleted", project_id=project_id)
        return True
