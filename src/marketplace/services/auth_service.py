"""Authentication service - login and registration."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.marketplace.core.logging import get_logger
from src.marketplace.core.security import DUMMY_PASSWORD_HASH, hash_password, verify_password
from src.marketplace.models import User
from src.marketplace.repositories import UserRepository

logger = get_logger(__name__)


class EmailAlreadyExistsError(ValueError):
    """Registration attempted with an email that is already taken."""


class AuthService:
    """Authentication service.

    Login only checks credentials and returns the user; no session or token
    is issued.
    """

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def authenticate(self, email: str, password: str) -> User | None:
        """Return the user for valid credentials, None otherwise.

        Unknown email and wrong password are indistinguishable to the caller.
        """
        user = await self.user_repo.get_by_email(email)

        # Always verify a hash so a missing user costs the same time as a bad password
        password_hash = DUMMY_PASSWORD_HASH
        if user is not None and user.hashed_password:
            password_hash = user.hashed_password
        password_valid = verify_password(password, password_hash)

        if user is None or not user.hashed_password or not password_valid:
            return None

        logger.info("User logged in", user_id=user.id)
        return user

    async def register(self, email: str, password: str, name: str, image: str) -> User:
        """Create a user with a hashed password.

        Raises:
            EmailAlreadyExistsError: If the email is already registered.
        """
        if await self.user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError("Email already exists")

        user = User(
            email=email,
            hashed_password=hash_password(password),
            name=name,
            image=image,
        )
        self.user_repo.add(user)

        try:
            await self.session.commit()
        except IntegrityError as e:
            # Fallback in case of race condition on the unique email
            await self.session.rollback()
            raise EmailAlreadyExistsError("Email already exists") from e

        await self.session.refresh(user)
        logger.info("User registered", user_id=user.id)
        return user
