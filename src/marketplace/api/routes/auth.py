"""Authentication endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.marketplace.api.dependencies import AuthServiceDep
from src.marketplace.schemas.auth import LoginRequest, RegisterRequest
from src.marketplace.schemas.user import UserPublic
from src.marketplace.services.auth_service import EmailAlreadyExistsError

router = APIRouter(tags=["auth"])

INVALID_CREDENTIALS = "Invalid email or password"


@router.post(
    "/login",
    response_model=UserPublic,
    responses={
        200: {
            "description": "Credentials accepted",
            "content": {
                "application/json": {
                    "example": {
                        "_id": "65f1e0000000000000000001",
                        "name": "Jane Doe",
                        "email": "jane@example.com",
                        "image": "",
                    }
                }
            },
        },
        400: {"description": "Invalid email or password"},
    },
)
async def login(login_data: LoginRequest, service: AuthServiceDep) -> UserPublic:
    """Check credentials and return the user's public fields.

    No token or session is issued. Unknown email and wrong password give the
    same response.
    """
    user = await service.authenticate(login_data.email, login_data.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_CREDENTIALS)
    return UserPublic.model_validate(user)


@router.post(
    "/register",
    response_model=UserPublic,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "User registered"},
        400: {"description": "Email already exists"},
    },
)
async def register(register_data: RegisterRequest, service: AuthServiceDep) -> UserPublic:
    """Register a user. The password is stored as an Argon2id hash."""
    try:
        user = await service.register(
            email=register_data.email,
            password=register_data.password,
            name=register_data.name,
            image=register_data.image,
        )
    except EmailAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    return UserPublic.model_validate(user)
