"""Identity-provider webhook handling (Clerk user events)."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.logging import get_logger
from src.marketplace.models import User
from src.marketplace.models.base import utc_now
from src.marketplace.repositories import ProjectJoinedRepository, UserRepository
from src.marketplace.schemas.webhook import WebhookEvent, WebhookUserData

logger = get_logger(__name__)


class WebhookService:
    """Mirror identity-provider user lifecycle events into the users table."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def handle(self, event: WebhookEvent) -> None:
        """Apply a webhook event. Unknown event types are ignored."""
        match event.type:
            case "user.created":
                await self._user_created(WebhookUserData.model_validate(event.data))
            case "user.updated":
                await self._user_updated(WebhookUserData.model_validate(event.data))
            case "user.deleted":
                await self._user_deleted(str(event.data.get("id", "")))
            case _:
                logger.info("Ignoring webhook event", event_type=event.type)

    async def _user_created(self, data: WebhookUserData) -> None:
        if await self.user_repo.get_by_id(data.id) is not None:
            logger.info("Webhook user already exists", user_id=data.id)
            return
        if not data.primary_email:
            logger.warning("Webhook user has no email address, skipping", user_id=data.id)
            return
        if await self._email_taken(data.primary_email, data.id):
            return

        user = User(
            id=data.id,
            email=data.primary_email,
            name=data.full_name,
            image=data.image_url or "",
        )
        self.user_repo.add(user)
        await self._commit()
        logger.info("Webhook user created", user_id=data.id)

    async def _user_updated(self, data: WebhookUserData) -> None:
        user = await self.user_repo.get_by_id(data.id)
        if user is None:
            logger.info("Webhook update for unknown user", user_id=data.id)
            return

        if data.primary_email and not await self._email_taken(data.primary_email, data.id):
            user.email = data.primary_email
        user.name = data.full_name
        user.image = data.image_url or ""
        user.updated_at = utc_now()
        await self._commit()
        logger.info("Webhook user updated", user_id=data.id)

    async def _user_deleted(self, user_id: str) -> None:
        user = await self.user_repo.get_by_id(user_id) if user_id else None
        if user is None:
            logger.info("Webhook delete for unknown user", user_id=user_id)
            return

        # Joined projects reference the user by foreign key
        for joined in await ProjectJoinedRepository(self.session).list_for_user(user_id):
            await self.session.delete(joined)
        await self.session.flush()
        await self.session.delete(user)
        await self._commit()
        logger.info("Webhook user deleted", user_id=user_id)

    async def _email_taken(self, email: str, user_id: str) -> bool:
        """True if another user already owns the email (emails are unique)."""
        owner = await self.user_repo.get_by_email(email)
        if owner is None or owner.id == user_id:
            return False
        logger.warning("Webhook email belongs to another user, skipping", user_id=user_id)
        return True

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
