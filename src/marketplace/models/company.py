"""Company model - primary key derived from the company name."""

from sqlmodel import Field, SQLModel

from src.marketplace.core.validators import MAX_COMPANY_ID_LENGTH


class Company(SQLModel, table=True):
    """Company keyed by the slug of its name (see company_id_from_name)."""

    __tablename__ = "companies"

    id: str = Field(primary_key=True, max_length=MAX_COMPANY_ID_LENGTH)
    name: str = Field(max_length=200)
    email: str = Field(max_length=255, unique=True, index=True)
    image: str = Field(default="", max_length=1000)
