"""Identity-provider webhook payloads (Clerk/Svix format)."""

from typing import Any

from pydantic import BaseModel, Field


class EmailAddress(BaseModel):
    email_address: str


class WebhookUserData(BaseModel):
    """The ``data`` object of a user.* event. Unknown keys are ignored."""

    id: str
    email_addresses: list[EmailAddress] = Field(default_factory=list)
    first_name: str | None = None
    last_name: str | None = None
    image_url: str | None = None

    @property
    def primary_email(self) -> str | None:
        return self.email_addresses[0].email_address if self.email_addresses else None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


class WebhookEvent(BaseModel):
    type: str
    data: dict[str, Any] = Field(default_factory=dict)
