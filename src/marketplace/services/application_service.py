"""Application submission service."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.logging import get_logger
from src.marketplace.models import Application
from src.marketplace.repositories import ApplicationRepository
from src.marketplace.schemas.application import ApplicationWithUser

logger = get_logger(__name__)


class ApplicationService:
    """Service for submitting and listing applications.

    No duplicate-submission check and no validation that the user or
    project exist.
    """

    def __init__(self, application_repo: ApplicationRepository, session: AsyncSession):
        self.application_repo = application_repo
        self.session = session

    async def submit(self, user_id: str, project_id: str, solution_link: str) -> Application:
        application = Application(
            user_id=user_id,
            project_id=project_id,
            solution_link=solution_link,
        )
        self.application_repo.add(application)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        await self.session.refresh(application)
        logger.info(
            "Application submitted",
            application_id=application.id,
            project_id=project_id,
        )
        return application

    async def list_for_project(self, project_id: str) -> list[ApplicationWithUser]:
        rows = await self.application_repo.list_for_project_with_user(project_id)
        return [ApplicationWithUser.from_row(application, user) for application, user in rows]
