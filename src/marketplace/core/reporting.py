"""Error reporting sink - structured logs plus Sentry."""

from typing import Any

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from src.marketplace.core.config import Settings
from src.marketplace.core.logging import get_logger

logger = get_logger(__name__)


def init_error_reporting(settings: Settings) -> bool:
    """Initialise Sentry if a DSN is configured.

    Returns:
        True if Sentry was initialised, False if errors will only be logged.
    """
    if not settings.sentry_dsn:
        logger.info("Sentry DSN not configured, errors will only be logged")
        return False

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.app_env,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        integrations=[
            StarletteIntegration(),
            FastApiIntegration(),
            SqlalchemyIntegration(),
        ],
        send_default_pii=False,
    )
    logger.info("Sentry error reporting enabled", environment=settings.app_env)
    return True


def report_exception(exc: BaseException, **context: Any) -> None:
    """Forward a caught exception to the reporting sink.

    Context keyword arguments are logged alongside the exception and attached
    to the Sentry event as tags. Reporting failures are logged and swallowed
    so the caller's error handling is never disturbed.
    """
    logger.error(
        "Exception reported",
        error=str(exc),
        error_type=type(exc).__name__,
        exc_info=exc,
        **context,
    )
    try:
        with sentry_sdk.new_scope() as scope:
            for key, value in context.items():
                scope.set_tag(key, str(value))
            sentry_sdk.capture_exception(exc)
    except Exception as e:
        logger.warning("Failed to forward exception to Sentry", error=str(e))
