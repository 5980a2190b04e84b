"""Project schemas for API responses."""

from pydantic import Field

from src.marketplace.models import Company, Project
from src.marketplace.schemas.base import ResponseModel
from src.marketplace.schemas.company import CompanySummary


class ProjectRead(ResponseModel):
    """Project with the owning company expanded under ``companyId``."""

    id: str = Field(serialization_alias="_id")
    title: str
    description: str
    location: str
    category: str
    level: str
    date: str
    company_id: CompanySummary | None

    @classmethod
    def from_row(cls, project: Project, company: Company | None) -> "ProjectRead":
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            location=project.location,
            category=project.category,
            level=project.level,
            date=project.date,
            company_id=CompanySummary.model_validate(company) if company else None,
        )
