"""Public project endpoints."""

from fastapi import APIRouter

from src.marketplace.api.dependencies import ApplicationServiceDep, ProjectServiceDep
from src.marketplace.schemas.application import ApplicationWithUser
from src.marketplace.schemas.project import ProjectRead

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description=(
        "List all projects with their company. Serves the bundled dataset "
        "when there are no projects or the database cannot be queried."
    ),
)
async def list_projects(service: ProjectServiceDep) -> list[ProjectRead]:
    """List projects, falling back to the bundled dataset."""
    return await service.list_projects_or_fallback()


@router.get(
    "/{project_id}/applications",
    response_model=list[ApplicationWithUser],
    summary="List project applications",
    description="List applications submitted for a project, with the submitting user.",
)
async def list_project_applications(
    project_id: str,
    service: ApplicationServiceDep,
) -> list[ApplicationWithUser]:
    """List applications for a project (for company/admin review)."""
    return await service.list_for_project(project_id)
