"""Identity-provider webhook receiver."""

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import ValidationError

from src.marketplace.api.dependencies import WebhookServiceDep
from src.marketplace.core.config import Settings
from src.marketplace.core.logging import get_logger
from src.marketplace.core.security import WebhookVerificationError, verify_webhook_signature
from src.marketplace.schemas.webhook import WebhookEvent

logger = get_logger(__name__)

router = APIRouter(tags=["webhooks"])


@router.post(
    "/webhooks",
    summary="Identity provider webhook",
    responses={
        200: {"description": "Event processed (or ignored)"},
        400: {"description": "Invalid signature or payload"},
    },
)
async def receive_webhook(request: Request, service: WebhookServiceDep) -> dict:
    """Apply identity-provider user events (Svix-signed).

    The signature is checked only when WEBHOOK_SECRET is configured.
    """
    body = await request.body()

    settings: Settings = request.app.state.settings
    if settings.webhook_secret:
        try:
            verify_webhook_signature(
                settings.webhook_secret,
                request.headers.get("svix-id"),
                request.headers.get("svix-timestamp"),
                request.headers.get("svix-signature"),
                body,
            )
        except WebhookVerificationError as e:
            logger.warning("Rejected webhook", reason=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid webhook signature",
            ) from e

    try:
        event = WebhookEvent.model_validate_json(body)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid webhook payload",
        ) from e

    try:
        await service.handle(event)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid webhook payload",
        ) from e

    return {}
