"""Page schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PageInput(BaseModel):
    """Create or replace a page."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)


class PageResponse(BaseModel):
    """Page response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    owner_id: int
    created_at: datetime
    updated_at: datetime
