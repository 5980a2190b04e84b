"""User factory for test data generation."""

from polyfactory import Use

from src.marketplace.core.security import hash_password
from src.marketplace.models import User
from tests.factories.base import BaseFactory, new_object_id, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "testpassword123"


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = Use(new_object_id)
    email = Use(lambda: f"user_{new_object_id()[-8:]}@example.com")
    hashed_password = Use(lambda: hash_password(DEFAULT_TEST_PASSWORD))
    name = "Test User"
    image = ""
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def from_identity_provider(cls, **kwargs):
        """Create a user without a password, as the webhook does."""
        return cls.build(hashed_password="", **kwargs)
