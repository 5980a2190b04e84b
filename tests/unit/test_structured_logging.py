"""Tests for structured logging context."""

import pytest
import structlog
from structlog.testing import CapturingLogger

from src.marketplace.core.logging import bind_request_context, clear_request_context

pytestmark = pytest.mark.unit


@pytest.fixture
def capturing_logger():
    """Create a capturing logger for tests."""
    cap_logger = CapturingLogger()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.reset_defaults()


def test_bind_request_context(capturing_logger):
    """Test binding request_id to log context."""
    bind_request_context("test-request-123")
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert entries[0].kwargs["request_id"] == "test-request-123"
    assert "path" not in entries[0].kwargs


def test_bind_request_context_with_path(capturing_logger):
    bind_request_context("req-1", "/api/projects")
    structlog.get_logger().info("test message")

    assert capturing_logger.calls[0].kwargs["path"] == "/api/projects"


def test_bind_request_context_with_none(capturing_logger):
    """Test that None request_id is not bound."""
    bind_request_context(None)
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert len(entries) == 1
    assert "request_id" not in entries[0].kwargs


def test_clear_request_context(capturing_logger):
    """Test clearing context removes all bound values."""
    bind_request_context("req-1", "/api/seed")
    clear_request_context()
    structlog.get_logger().info("test message")

    entries = capturing_logger.calls
    assert "request_id" not in entries[0].kwargs
    assert "path" not in entries[0].kwargs
