"""Database seeding endpoint."""

from asgi_correlation_id import correlation_id
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.marketplace.api.dependencies import SeedServiceDep
from src.marketplace.core.exceptions import server_error_response
from src.marketplace.core.reporting import report_exception
from src.marketplace.schemas.base import MessageResponse

router = APIRouter(tags=["seed"])


@router.post(
    "/seed",
    response_model=MessageResponse,
    summary="Seed database",
    description=(
        "Replace companies, projects and their satellite tables with the bundled "
        "dataset. Requires at least one user. Runs in a single transaction."
    ),
    responses={
        200: {"description": "Database seeded"},
        500: {"description": "Seeding failed; no changes were kept"},
    },
)
async def seed_database(
    request: Request, service: SeedServiceDep
) -> MessageResponse | JSONResponse:
    try:
        await service.seed()
    except Exception as e:
        report_exception(e, request_id=correlation_id.get(), operation="seed")
        return server_error_response(request, "Failed to seed database", e)

    return MessageResponse(message="Database seeded successfully")
