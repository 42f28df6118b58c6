"""Base repository."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flowboard.errors import StoreFailure

logger = logging.getLogger(__name__)


class BaseRepository:
    """Base class for repositories.

    Lookups return ``None`` when a row is absent. Any SQLAlchemy error is
    rolled back, logged, and re-raised as ``StoreFailure``.
    """

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def store_errors(self, action: str) -> Iterator[None]:
        """Translate SQLAlchemy errors raised inside the block."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.exception(f"Store failure during {action}")
            self.db.rollback()
            raise StoreFailure() from e
