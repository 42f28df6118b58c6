"""User model."""

from sqlalchemy import Column, Integer, String

from flowboard.database import Base
from flowboard.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and page ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
