"""Article record persisted alongside its parsed document."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .nodes import Document


class Article(BaseModel):
    """Immutable representation of a stored blog article."""

    id: UUID
    slug: str = Field(min_length=1)
    title: str
    excerpt: str | None = None
    category: str | None = None
    reading_time: int = Field(default=1, ge=1)
    published: bool = False
    featured: bool = False
    published_at: datetime | None = None
    content: Document = Field(default_factory=Document)
    created_time: datetime
    last_edited_time: datetime

    model_config = ConfigDict(frozen=True)


__all__ = ["Article"]
