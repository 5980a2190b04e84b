"""Admin project endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.marketplace.api.dependencies import ProjectServiceDep
from src.marketplace.schemas.base import MessageResponse
from src.marketplace.schemas.project import ProjectRead

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get(
    "/projects",
    response_model=list[ProjectRead],
    summary="List all projects",
    description="List all projects with their company. No fallback data; failures return 500.",
)
async def list_all_projects(service: ProjectServiceDep) -> list[ProjectRead]:
    return await service.list_projects()


@router.delete(
    "/projects/{project_id}",
    response_model=MessageResponse,
    summary="Delete project",
    responses={
        200: {"description": "Project deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(project_id: str, service: ProjectServiceDep) -> MessageResponse:
    """Delete a project by id."""
    if not await service.delete(project_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return MessageResponse(message="Project deleted successfully")
