"""Application schemas for API request/response."""

from datetime import datetime

from pydantic import Field

from src.marketplace.models import Application, User
from src.marketplace.schemas.base import RequestModel, ResponseModel
from src.marketplace.schemas.user import UserPublic


class ApplicationCreate(RequestModel):
    """Schema for submitting an application (camelCase on the wire)."""

    user_id: str = Field(min_length=1, max_length=64)
    project_id: str = Field(min_length=1, max_length=64)
    solution_link: str = Field(min_length=1, max_length=2000)


class ApplicationRead(ResponseModel):
    id: str = Field(serialization_alias="_id")
    user_id: str
    project_id: str
    solution_link: str
    created_at: datetime
    updated_at: datetime


class ApplicationWithUser(ResponseModel):
    """Application with the submitting user expanded under ``userId``."""

    id: str = Field(serialization_alias="_id")
    user_id: UserPublic | None
    project_id: str
    solution_link: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, application: Application, user: User | None) -> "ApplicationWithUser":
        return cls(
            id=application.id,
            user_id=UserPublic.model_validate(user) if user else None,
            project_id=application.project_id,
            solution_link=application.solution_link,
            created_at=application.created_at,
            updated_at=application.updated_at,
        )
