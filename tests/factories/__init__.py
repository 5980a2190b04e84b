"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserFactory, CompanyFactory, ...
"""

from tests.factories.base import BaseFactory, new_object_id, utc_now
from tests.factories.company import CompanyFactory, ProjectFactory
from tests.factories.user import DEFAULT_TEST_PASSWORD, UserFactory

__all__ = [
    # Base
    "BaseFactory",
    "new_object_id",
    "utc_now",
    # Company
    "CompanyFactory",
    "ProjectFactory",
    # User
    "UserFactory",
    "DEFAULT_TEST_PASSWORD",
]
