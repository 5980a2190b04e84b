from pydantic import Field

from src.marketplace.schemas.base import ResponseModel


class UserPublic(ResponseModel):
    """Public user fields - never includes the password hash."""

    id: str = Field(serialization_alias="_id")
    name: str
    email: str
    image: str
