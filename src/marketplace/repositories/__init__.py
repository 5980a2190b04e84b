"""Repository layer - data access abstraction."""

from src.marketplace.repositories.application import ApplicationRepository
from src.marketplace.repositories.base import BaseRepository
from src.marketplace.repositories.company import CompanyRepository
from src.marketplace.repositories.project import (
    ManageProjectRepository,
    ProjectJoinedRepository,
    ProjectRepository,
    ViewApplicationRepository,
)
from src.marketplace.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    # Entities
    "ApplicationRepository",
    "CompanyRepository",
    "ManageProjectRepository",
    "ProjectJoinedRepository",
    "ProjectRepository",
    "UserRepository",
    "ViewApplicationRepository",
]
