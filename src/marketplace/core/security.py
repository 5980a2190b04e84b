"""Password hashing and webhook signature verification."""

import base64
import hashlib
import hmac
import time

import argon2

from src.marketplace.core.config import get_settings

# Tolerated clock skew for webhook timestamps (seconds)
WEBHOOK_TOLERANCE_SECONDS = 5 * 60


def _create_password_hasher() -> argon2.PasswordHasher:
    """Create password hasher with settings from config."""
    settings = get_settings()
    return argon2.PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


_password_hasher = _create_password_hasher()

# Verified against when the email is unknown so both failure paths cost the same
DUMMY_PASSWORD_HASH = _password_hasher.hash("dummy-password-for-timing")


def hash_password(password: str) -> str:
    """Hash password using Argon2id (salted, one-way)."""
    return _password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash. Returns False on any error."""
    try:
        _password_hasher.verify(hashed, password)
        return True
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


class WebhookVerificationError(ValueError):
    """Webhook payload failed signature or timestamp checks."""


def _decode_webhook_secret(secret: str) -> bytes:
    if secret.startswith("whsec_"):
        secret = secret[len("whsec_") :]
    return base64.b64decode(secret)


def sign_webhook(secret: str, msg_id: str, timestamp: str, body: bytes) -> str:
    """Compute the ``v1,<base64>`` signature for a webhook payload."""
    signed_content = f"{msg_id}.{timestamp}.".encode() + body
    digest = hmac.new(_decode_webhook_secret(secret), signed_content, hashlib.sha256).digest()
    return f"v1,{base64.b64encode(digest).decode()}"


def verify_webhook_signature(
    secret: str,
    msg_id: str | None,
    timestamp: str | None,
    signature_header: str | None,
    body: bytes,
    now: float | None = None,
) -> None:
    """Verify a Svix-style webhook signature.

    The signature header holds space-separated ``v1,<sig>`` entries; any one
    matching is enough.

    Raises:
        WebhookVerificationError: If headers are missing, the timestamp is
            outside the tolerance window, or no signature matches.
    """
    if not msg_id or not timestamp or not signature_header:
        raise WebhookVerificationError("Missing webhook signature headers")

    try:
        sent_at = int(timestamp)
    except ValueError as e:
        raise WebhookVerificationError("Invalid webhook timestamp") from e

    current = time.time() if now is None else now
    if abs(current - sent_at) > WEBHOOK_TOLERANCE_SECONDS:
        raise WebhookVerificationError("Webhook timestamp outside tolerance")

    expected = sign_webhook(secret, msg_id, timestamp, body).split(",", 1)[1]
    for candidate in signature_header.split():
        version, _, value = candidate.partition(",")
        if version == "v1" and hmac.compare_digest(value, expected):
            return

    raise WebhookVerificationError("No matching webhook signature")
