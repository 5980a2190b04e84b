"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.marketplace.api.dependencies.db import DBSession
from src.marketplace.repositories import (
    ApplicationRepository,
    CompanyRepository,
    ProjectRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_company_repository(session: DBSession) -> CompanyRepository:
    return CompanyRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_application_repository(session: DBSession) -> ApplicationRepository:
    return ApplicationRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
CompanyRepo = Annotated[CompanyRepository, Depends(get_company_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
ApplicationRepo = Annotated[ApplicationRepository, Depends(get_application_repository)]
