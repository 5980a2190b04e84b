"""Model exports.

Import from here: `from src.marketplace.models import User, Company`
"""

from src.marketplace.models.application import Application
from src.marketplace.models.company import Company
from src.marketplace.models.enums import JoinStatus
from src.marketplace.models.project import (
    ManageProject,
    Project,
    ProjectJoined,
    ViewApplication,
)
from src.marketplace.models.user import User

__all__ = [
    # Enums
    "JoinStatus",
    # Models
    "Application",
    "Company",
    "ManageProject",
    "Project",
    "ProjectJoined",
    "User",
    "ViewApplication",
]
