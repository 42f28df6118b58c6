"""Page repository."""

from flowboard.models.page import Page
from flowboard.repositories.base import BaseRepository


class PageRepository(BaseRepository):
    """Persistence for pages. Performs no ownership checks."""

    def create(self, page: Page) -> Page:
        with self.store_errors("create page"):
            self.db.add(page)
            self.db.commit()
            self.db.refresh(page)
            return page

    def get_by_id(self, page_id: int) -> Page | None:
        with self.store_errors("find page by id"):
            return self.db.query(Page).filter(Page.id == page_id).first()

    def list_by_owner(self, owner_id: int) -> list[Page]:
        with self.store_errors("list pages"):
            return self.db.query(Page).filter(Page.owner_id == owner_id).order_by(Page.id).all()

    def save(self, page: Page) -> Page:
        with self.store_errors("save page"):
            self.db.add(page)
            self.db.commit()
            self.db.refresh(page)
            return page

    def delete(self, page: Page) -> None:
        with self.store_errors("delete page"):
            self.db.delete(page)
            self.db.commit()
