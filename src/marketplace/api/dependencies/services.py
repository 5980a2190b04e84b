"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.marketplace.api.dependencies.db import DBSession
from src.marketplace.api.dependencies.repositories import (
    ApplicationRepo,
    CompanyRepo,
    ProjectRepo,
    UserRepo,
)
from src.marketplace.services import (
    ApplicationService,
    AuthService,
    CompanyService,
    ProjectService,
    SeedService,
    WebhookService,
)


def get_auth_service(user_repo: UserRepo, session: DBSession) -> AuthService:
    """Get auth service."""
    return AuthService(user_repo, session)


def get_company_service(company_repo: CompanyRepo, session: DBSession) -> CompanyService:
    """Get company service."""
    return CompanyService(company_repo, session)


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, session)


def get_application_service(
    application_repo: ApplicationRepo, session: DBSession
) -> ApplicationService:
    """Get application service."""
    return ApplicationService(application_repo, session)


def get_seed_service(session: DBSession) -> SeedService:
    """Get seed service (builds its own repositories on the shared session)."""
    return SeedService(session)


def get_webhook_service(user_repo: UserRepo, session: DBSession) -> WebhookService:
    """Get identity-provider webhook service."""
    return WebhookService(user_repo, session)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
CompanyServiceDep = Annotated[CompanyService, Depends(get_company_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
ApplicationServiceDep = Annotated[ApplicationService, Depends(get_application_service)]
SeedServiceDep = Annotated[SeedService, Depends(get_seed_service)]
WebhookServiceDep = Annotated[WebhookService, Depends(get_webhook_service)]
