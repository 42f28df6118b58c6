"""Store boundary: SQLAlchemy-backed repositories."""

from flowboard.repositories.pages import PageRepository
from flowboard.repositories.users import UserRepository

__all__ = ["PageRepository", "UserRepository"]
