"""Repositories for Project and the satellite project tables."""

from sqlmodel import select

from src.marketplace.models import (
    Company,
    ManageProject,
    Project,
    ProjectJoined,
    ViewApplication,
)
from src.marketplace.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_with_company(self) -> list[tuple[Project, Company | None]]:
        """List all projects joined with their owning company.

        Company is None when the referenced row is missing.
        """
        query = (
            select(Project, Company)
            .outerjoin(Company, Company.id == Project.company_id)
            .order_by(Project.title, Project.id)
        )
        result = await self.session.execute(query)
        return [(project, company) for project, company in result.all()]


class ManageProjectRepository(BaseRepository[ManageProject]):
    """Repository for ManageProject entity."""

    model = ManageProject


class ProjectJoinedRepository(BaseRepository[ProjectJoined]):
    """Repository for ProjectJoined entity."""

    model = ProjectJoined

    async def list_for_user(self, user_id: str) -> list[ProjectJoined]:
        result = await self.session.execute(
            select(ProjectJoined).where(ProjectJoined.user_id == user_id)
        )
        return list(result.scalars().all())


class ViewApplicationRepository(BaseRepository[ViewApplication]):
    """Repository for ViewApplication entity."""

    model = ViewApplication
