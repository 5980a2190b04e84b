from pydantic import EmailStr, Field

from src.marketplace.schemas.base import RequestModel


class LoginRequest(RequestModel):
    # Plain str: a malformed email is just another failed login
    email: str
    password: str = Field(min_length=1)


class RegisterRequest(RequestModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=100)
    image: str = Field(default="", max_length=1000)
