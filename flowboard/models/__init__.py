"""SQLAlchemy models."""

from flowboard.models.page import Page
from flowboard.models.user import User

__all__ = [
    "User",
    "Page",
]
