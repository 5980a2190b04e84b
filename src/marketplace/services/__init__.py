"""Service layer - business rules over repositories."""

from src.marketplace.services.application_service import ApplicationService
from src.marketplace.services.auth_service import AuthService, EmailAlreadyExistsError
from src.marketplace.services.company_service import CompanyConflictError, CompanyService
from src.marketplace.services.project_service import ProjectService, fallback_projects
from src.marketplace.services.seed_service import SeedError, SeedService
from src.marketplace.services.webhook_service import WebhookService

__all__ = [
    "ApplicationService",
    "AuthService",
    "CompanyConflictError",
    "CompanyService",
    "EmailAlreadyExistsError",
    "ProjectService",
    "SeedError",
    "SeedService",
    "WebhookService",
    "fallback_projects",
]
