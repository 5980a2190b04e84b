import secrets
from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as naive datetime (for TIMESTAMP columns).

    Timestamp fields pin `sa_type=DateTime()` (TIMESTAMP WITHOUT TIME ZONE),
    so we strip tzinfo.
    All times are stored in UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)


def new_object_id() -> str:
    """Generate a 24-character hex identifier."""
    return secrets.token_hex(12)
