"""Page model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from flowboard.database import Base
from flowboard.models.mixins import TimestampMixin


class Page(Base, TimestampMixin):
    """A text document owned by exactly one user.

    ``owner_id`` is set once at creation. Ownership is checked by
    ``PageService``; there is no cascade from users.
    """

    __tablename__ = "pages"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
