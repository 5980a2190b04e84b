from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.middleware.base import RequestResponseEndpoint

from src.marketplace.api.dependencies import DatabaseDep
from src.marketplace.api.routes import webhooks
from src.marketplace.api.routes.router import api_router
from src.marketplace.core.config import Settings, get_settings
from src.marketplace.core.db import Database
from src.marketplace.core.exceptions import setup_exception_handlers
from src.marketplace.core.logging import (
    bind_request_context,
    clear_request_context,
    get_logger,
    setup_logging,
)
from src.marketplace.core.migrations import run_migrations_sync
from src.marketplace.core.reporting import init_error_reporting

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - open the database before serving, close it on shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings.debug)
    init_error_reporting(settings)
    logger.info(f"Starting {settings.app_name}")

    database: Database = app.state.db
    try:
        await database.connect(create_tables=settings.database_create_tables)
    except Exception as e:
        # Startup aborts; the server never starts accepting requests
        logger.critical("Failed to connect to database", error=str(e))
        raise

    yield

    logger.info("Closing connections...")
    await database.dispose()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "auth", "description": "User login and registration"},
    {"name": "companies", "description": "Company registration"},
    {"name": "projects", "description": "Project listing"},
    {"name": "applications", "description": "Application submission"},
    {"name": "admin", "description": "Project administration"},
    {"name": "seed", "description": "Bundled dataset loading"},
    {"name": "webhooks", "description": "Identity provider callbacks"},
]


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Project marketplace API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = database or Database.from_settings(settings)

    setup_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def logging_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Bind request_id to log context for all requests."""
        clear_request_context()
        bind_request_context(correlation_id.get(), request.url.path)
        try:
            return await call_next(request)
        finally:
            clear_request_context()

    # Outermost, so the request id is set before the logging middleware reads it
    app.add_middleware(CorrelationIdMiddleware)

    app.include_router(api_router)
    app.include_router(webhooks.router)

    Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        """Liveness check."""
        return "API working"

    @app.get("/health")
    async def health(database: DatabaseDep) -> JSONResponse:
        """Health check including database connectivity."""
        try:
            await database.ping()
        except Exception as e:
            return JSONResponse(
                content={"status": "unhealthy", "database": f"unhealthy: {e}"},
                status_code=503,
            )
        return JSONResponse(content={"status": "healthy", "database": "healthy"})

    if settings.debug:

        @app.get("/debug-error", include_in_schema=False)
        async def debug_error() -> None:
            """Raise deliberately to exercise the error handler and reporting sink."""
            raise RuntimeError("Debug error triggered")

    return app


def run() -> None:
    """Run the API server with uvicorn."""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


def migrate() -> None:
    """Apply database migrations."""
    setup_logging(get_settings().debug)
    run_migrations_sync()
    logger.info("Migrations applied")


if __name__ == "__main__":
    run()
