"""Exception handlers producing the JSON error envelope."""

from asgi_correlation_id import CorrelationIdMiddleware, correlation_id
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.marketplace.core.config import Settings
from src.marketplace.core.reporting import report_exception


def error_detail(exc: BaseException, settings: Settings) -> str:
    """Text placed in the ``error`` field of a 500 envelope."""
    if settings.show_error_details:
        return str(exc) or type(exc).__name__
    return type(exc).__name__


def server_error_response(request: Request, message: str, exc: BaseException) -> JSONResponse:
    """Build a 500 ``{message, error, request_id}`` envelope."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "message": message,
            "error": error_detail(exc, request.app.state.settings),
            "request_id": correlation_id.get(),
        },
    )


def cors_headers(request: Request) -> dict[str, str]:
    """CORS headers for responses built outside CORSMiddleware.

    Mirrors CORSMiddleware without credentials: `*` when every origin is
    allowed, otherwise the request origin if it is listed.
    """
    origin = request.headers.get("origin")
    if not origin:
        return {}
    allowed = request.app.state.settings.cors_origins
    if "*" in allowed:
        return {"Access-Control-Allow-Origin": "*"}
    if origin in allowed:
        return {"Access-Control-Allow-Origin": origin, "Vary": "Origin"}
    return {}


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers for business-rule and unexpected failures."""

    # fastapi.HTTPException subclasses Starlette's, so this covers both
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Invalid request body",
                "errors": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        report_exception(
            exc,
            request_id=correlation_id.get(),
            method=request.method,
            path=request.url.path,
        )
        response = server_error_response(request, "Server error", exc)
        # Answered outside CORS and correlation id middlewares, which would otherwise set these
        response.headers.update(cors_headers(request))
        if request_id := correlation_id.get():
            response.headers[CorrelationIdMiddleware.header_name] = request_id
        return response
