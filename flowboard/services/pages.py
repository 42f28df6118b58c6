"""Owner-scoped page operations."""

import logging

from sqlalchemy.orm import Session

from flowboard.errors import NotFound, Unauthenticated, ValidationError
from flowboard.models.page import Page
from flowboard.repositories.pages import PageRepository

logger = logging.getLogger(__name__)


class PageService:
    """Service for page CRUD scoped to the acting user.

    Every method takes the acting user's id explicitly. A page owned by
    someone else is reported exactly like a page that does not exist.
    """

    def __init__(self, db: Session):
        self.pages = PageRepository(db)

    @staticmethod
    def _require_actor(actor_id: int | None) -> int:
        if actor_id is None:
            raise Unauthenticated()
        return actor_id

    @staticmethod
    def _validate(title: str | None, content: str | None) -> None:
        if not title or not title.strip() or not content or not content.strip():
            raise ValidationError("Title and content are required")

    def resolve_owned(self, page_id: int, actor_id: int | None) -> Page:
        """Load a page the actor owns, or raise ``NotFound``."""
        actor_id = self._require_actor(actor_id)
        page = self.pages.get_by_id(page_id)
        if page is None or page.owner_id != actor_id:
            raise NotFound("Page not found")
        return page

    def create_page(self, actor_id: int | None, title: str, content: str) -> Page:
        actor_id = self._require_actor(actor_id)
        self._validate(title, content)

        page = self.pages.create(Page(title=title, content=content, owner_id=actor_id))
        logger.info(f"User {actor_id} created page {page.id}")
        return page

    def list_pages(self, actor_id: int | None) -> list[Page]:
        return self.pages.list_by_owner(self._require_actor(actor_id))

    def get_page(self, page_id: int, actor_id: int | None) -> Page:
        return self.resolve_owned(page_id, actor_id)

    def update_page(self, page_id: int, actor_id: int | None, title: str, content: str) -> Page:
        """Replace a page's title and content."""
        page = self.resolve_owned(page_id, actor_id)
        self._validate(title, content)

        page.title = title
        page.content = content
        page.touch()
        page = self.pages.save(page)
        logger.info(f"User {actor_id} updated page {page_id}")
        return page

    def delete_page(self, page_id: int, actor_id: int | None) -> None:
        page = self.resolve_owned(page_id, actor_id)
        self.pages.delete(page)
        logger.info(f"User {actor_id} deleted page {page_id}")
