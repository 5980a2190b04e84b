"""Project-related models: listings and the company/user views of them."""

from sqlalchemy import CheckConstraint
from sqlmodel import Field, SQLModel

from src.marketplace.models.base import new_object_id
from src.marketplace.models.enums import JoinStatus


class Project(SQLModel, table=True):
    """Project listing owned by a company."""

    __tablename__ = "projects"

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=64)
    title: str = Field(max_length=200)
    description: str = Field(default="")
    location: str = Field(default="", max_length=200)
    category: str = Field(default="", max_length=100)
    level: str = Field(default="", max_length=100)
    date: str = Field(default="", max_length=50)
    company_id: str = Field(foreign_key="companies.id", index=True, max_length=100)


class ManageProject(SQLModel, table=True):
    """Company dashboard row for a posted project."""

    __tablename__ = "manage_projects"

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=64)
    title: str = Field(max_length=200)
    date: str = Field(max_length=50)
    location: str = Field(max_length=200)
    applicants: int = Field(default=0)
    visible: bool = Field(default=True)
    company_id: str = Field(foreign_key="companies.id", index=True, max_length=100)


class ProjectJoined(SQLModel, table=True):
    """Project a user has joined, with its review status."""

    __tablename__ = "projects_joined"
    __table_args__ = (
        CheckConstraint(
            "status IN ('Pending', 'Accepted', 'Rejected')",
            name="ck_projects_joined_status",
        ),
    )

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=64)
    company_id: str = Field(foreign_key="companies.id", index=True, max_length=100)
    title: str = Field(max_length=200)
    location: str = Field(max_length=200)
    date: str = Field(max_length=50)
    status: str = Field(default=JoinStatus.PENDING.value, max_length=20)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=64)


class ViewApplication(SQLModel, table=True):
    """Applicant row shown to a company."""

    __tablename__ = "view_applications"

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=64)
    name: str = Field(max_length=100)
    project_title: str = Field(max_length=200)
    location: str = Field(max_length=200)
    image: str = Field(default="", max_length=1000)
    company_id: str = Field(foreign_key="companies.id", index=True, max_length=100)
