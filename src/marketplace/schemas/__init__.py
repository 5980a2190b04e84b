from src.marketplace.schemas.application import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationWithUser,
)
from src.marketplace.schemas.auth import LoginRequest, RegisterRequest
from src.marketplace.schemas.base import MessageResponse, RequestModel, ResponseModel
from src.marketplace.schemas.company import CompanyCreate, CompanyRead, CompanySummary
from src.marketplace.schemas.project import ProjectRead
from src.marketplace.schemas.user import UserPublic
from src.marketplace.schemas.webhook import WebhookEvent, WebhookUserData

__all__ = [
    # Base
    "MessageResponse",
    "RequestModel",
    "ResponseModel",
    # Application
    "ApplicationCreate",
    "ApplicationRead",
    "ApplicationWithUser",
    # Auth
    "LoginRequest",
    "RegisterRequest",
    # Company
    "CompanyCreate",
    "CompanyRead",
    "CompanySummary",
    # Project
    "ProjectRead",
    # User
    "UserPublic",
    # Webhook
    "WebhookEvent",
    "WebhookUserData",
]
