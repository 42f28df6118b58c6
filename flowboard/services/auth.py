"""Registration, login and profile lookup."""

import logging

from sqlalchemy.orm import Session

from flowboard.errors import InvalidCredentials, NotFound, UserExists, ValidationError
from flowboard.models.user import User
from flowboard.repositories.users import UserRepository
from flowboard.schemas.auth import UserResponse
from flowboard.services.security import PasswordHasher

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Emails are stored and compared lower-cased."""
    return email.strip().lower()


class AuthService:
    """Service for user authentication.

    Every method returns a ``UserResponse``, which has no password field.
    """

    def __init__(self, db: Session, hasher: PasswordHasher):
        self.users = UserRepository(db)
        self.hasher = hasher

    def register(self, name: str, email: str, password: str) -> UserResponse:
        """Create a new user. Raises ``UserExists`` if the email is taken."""
        email = normalize_email(email)
        if not name.strip() or not email or not password:
            raise ValidationError("Name, email and password are required")

        if self.users.get_by_email(email) is not None:
            logger.info("Registration rejected: email already registered")
            raise UserExists()

        user = User(name=name.strip(), email=email, password_hash=self.hasher.hash(password))
        user = self.users.create(user)
        logger.info(f"Registered user {user.id}")
        return UserResponse.model_validate(user)

    def authenticate(self, email: str, password: str) -> UserResponse:
        """Check credentials.

        An unknown email and a wrong password both raise the same
        ``InvalidCredentials``.
        """
        user = self.users.get_by_email(normalize_email(email))
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.info("Login failed")
            raise InvalidCredentials()

        logger.info(f"User {user.id} logged in")
        return UserResponse.model_validate(user)

    def get_profile(self, user_id: int) -> UserResponse:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return UserResponse.model_validate(user)
