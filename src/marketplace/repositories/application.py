"""Repository for Application entity."""

from sqlmodel import select

from src.marketplace.models import Application, User
from src.marketplace.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository[Application]):
    """Repository for Application entity."""

    model = Application

    async def list_for_project_with_user(
        self, project_id: str
    ) -> list[tuple[Application, User | None]]:
        """List a project's applications joined with the submitting user.

        User is None when the referenced row is missing.
        """
        query = (
            select(Application, User)
            .outerjoin(User, User.id == Application.user_id)
            .where(Application.project_id == project_id)
            .order_by(Application.created_at, Application.id)
        )
        result = await self.session.execute(query)
        return [(application, user) for application, user in result.all()]
