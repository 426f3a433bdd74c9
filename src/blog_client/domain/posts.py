"""Domain models for blog posts."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from blog_client.domain.media import Media

PostStatus = Literal["draft", "published"]


def _unique_tags(value: object) -> tuple[str, ...]:
    """Drop duplicate tags while keeping first-seen order."""
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    seen: dict[str, None] = {}
    for tag in value:  # type: ignore[attr-defined]
        cleaned = str(tag).strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return tuple(seen)


class Post(BaseModel):
    """Server representation of a blog post."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    title: str
    content: str = ""
    status: PostStatus = "draft"
    tags: tuple[str, ...] = ()
    featured_image: Media | None = None
    gallery: tuple[Media, ...] = ()
    author_id: str | None = None
    author: dict[str, object] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: object) -> tuple[str, ...]:
        return _unique_tags(value)

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value: object) -> object:
        return value or "draft"

    @field_validator("gallery", mode="before")
    @classmethod
    def null_gallery(cls, value: object) -> object:
        return () if value is None else value


class PostDraft(BaseModel):
    """Fields submitted when creating or updating a post."""

    title: str = Field(min_length=1)
    content: str = ""
    status: PostStatus = "draft"
    tags: tuple[str, ...] = ()
    featured_image: Media | None = None
    gallery: tuple[Media, ...] = ()

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, value: object) -> tuple[str, ...]:
        return _unique_tags(value)

    def to_payload(self) -> dict[str, object]:
        """Serialize the draft as a JSON request body."""
        return self.model_dump(mode="json", exclude_none=True)
