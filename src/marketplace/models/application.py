"""Application model - a user's solution submitted against a project."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from src.marketplace.models.base import new_object_id, utc_now


class Application(SQLModel, table=True):
    """Submitted solution.

    Note: user_id and project_id carry no foreign keys - submissions are
    accepted without checking the referenced rows exist.
    """

    __tablename__ = "applications"

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=64)
    user_id: str = Field(index=True, max_length=64)
    project_id: str = Field(index=True, max_length=64)
    solution_link: str = Field(max_length=2000)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
