"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Database
from src.marketplace.api.dependencies.db import (
    DatabaseDep,
    DBSession,
    get_database,
    get_db_session,
)

# Repositories
from src.marketplace.api.dependencies.repositories import (
    ApplicationRepo,
    CompanyRepo,
    ProjectRepo,
    UserRepo,
    get_application_repository,
    get_company_repository,
    get_project_repository,
    get_user_repository,
)

# Services
from src.marketplace.api.dependencies.services import (
    ApplicationServiceDep,
    AuthServiceDep,
    CompanyServiceDep,
    ProjectServiceDep,
    SeedServiceDep,
    WebhookServiceDep,
    get_application_service,
    get_auth_service,
    get_company_service,
    get_project_service,
    get_seed_service,
    get_webhook_service,
)

__all__ = [
    # Database
    "DBSession",
    "DatabaseDep",
    "get_database",
    "get_db_session",
    # Repositories
    "ApplicationRepo",
    "CompanyRepo",
    "ProjectRepo",
    "UserRepo",
    "get_application_repository",
    "get_company_repository",
    "get_project_repository",
    "get_user_repository",
    # Services
    "ApplicationServiceDep",
    "AuthServiceDep",
    "CompanyServiceDep",
    "ProjectServiceDep",
    "SeedServiceDep",
    "WebhookServiceDep",
    "get_application_service",
    "get_auth_service",
    "get_company_service",
    "get_project_service",
    "get_seed_service",
    "get_webhook_service",
]
