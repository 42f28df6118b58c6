"""Page API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from flowboard.api.dependencies import get_current_user_id, get_page_service
from flowboard.schemas.page import PageInput, PageResponse
from flowboard.services.pages import PageService

router = APIRouter(prefix="/api/pages", tags=["pages"])

CurrentUserId = Annotated[int, Depends(get_current_user_id)]
Pages = Annotated[PageService, Depends(get_page_service)]


@router.get("", response_model=list[PageResponse])
def get_pages(user_id: CurrentUserId, pages: Pages):
    """Get all pages owned by the current user."""
    return pages.list_pages(user_id)


@router.post("", response_model=PageResponse, status_code=status.HTTP_201_CREATED)
def create_page(page_data: PageInput, user_id: CurrentUserId, pages: Pages):
    """Create a new page."""
    return pages.create_page(user_id, page_data.title, page_data.content)


@router.get("/{page_id}", response_model=PageResponse)
def get_page(page_id: int, user_id: CurrentUserId, pages: Pages):
    """Get a specific page."""
    return pages.get_page(page_id, user_id)


@router.put("/{page_id}", response_model=PageResponse)
def update_page(page_id: int, page_data: PageInput, user_id: CurrentUserId, pages: Pages):
    """Replace a page's title and content."""
    return pages.update_page(page_id, user_id, page_data.title, page_data.content)


@router.delete("/{page_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_page(page_id: int, user_id: CurrentUserId, pages: Pages):
    """Delete a page."""
    pages.delete_page(page_id, user_id)
