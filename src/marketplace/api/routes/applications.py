"""Application submission endpoints."""

from fastapi import APIRouter, status

from src.marketplace.api.dependencies import ApplicationServiceDep
from src.marketplace.schemas.application import ApplicationCreate, ApplicationRead

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post(
    "",
    response_model=ApplicationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Submit application",
    responses={201: {"description": "Application stored"}},
)
async def submit_application(
    request: ApplicationCreate,
    service: ApplicationServiceDep,
) -> ApplicationRead:
    """Submit a solution link for a project.

    The user and project ids are stored as given; they are not checked.
    """
    application = await service.submit(
        user_id=request.user_id,
        project_id=request.project_id,
        solution_link=request.solution_link,
    )
    return ApplicationRead.model_validate(application)
