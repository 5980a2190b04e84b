"""User model."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from src.marketplace.models.base import new_object_id, utc_now


class User(SQLModel, table=True):
    """Marketplace user. Email is the login key."""

    __tablename__ = "users"

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=64)
    email: str = Field(max_length=255, unique=True, index=True)
    # Empty for users created by the identity provider; such users cannot log in with a password
    hashed_password: str = Field(default="", max_length=255)
    name: str = Field(max_length=100)
    image: str = Field(default="", max_length=1000)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime())
