"""Company schemas for API request/response."""

from pydantic import EmailStr, Field, field_validator

from src.marketplace.schemas.base import RequestModel, ResponseModel


class CompanyCreate(RequestModel):
    """Schema for registering a company."""

    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    image: str | None = Field(default="", max_length=1000)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Company name cannot be empty or whitespace only")
        return v

    @field_validator("image")
    @classmethod
    def default_image(cls, v: str | None) -> str:
        return v or ""


class CompanyRead(ResponseModel):
    id: str = Field(serialization_alias="_id")
    name: str
    email: str
    image: str


class CompanySummary(ResponseModel):
    """Company fields embedded in a project listing."""

    id: str = Field(serialization_alias="_id")
    name: str
    email: str
