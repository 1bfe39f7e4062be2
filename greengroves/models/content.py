"""Editorial content: articles, videos, their tags and categories."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import AliasChoices, Field, field_validator

from greengroves.models.base import ApiModel, ContentStatus
from greengroves.models.files import FileUpload


class CategoryType(str, Enum):
    CONTENT = "content"
    PRODUCT = "product"


class Category(ApiModel):
    """A category node; ``parent_id`` makes categories a tree."""

    name: str
    slug: str | None = None
    type: CategoryType = CategoryType.CONTENT
    parent_id: int | None = None


class Tag(ApiModel):
    name: str
    slug: str | None = None


class Author(ApiModel):
    name: str | None = None
    email: str | None = None
    avatar: str | None = None


class ContentItem(ApiModel):
    """Fields shared by articles and videos."""

    read_only_fields: ClassVar[frozenset[str]] = ApiModel.read_only_fields | {
        "views",
        "likes",
        "rating",
        "author",
        "tags",
        "created_by",
        "updated_by",
    }
    payload_renames: ClassVar[dict[str, str]] = {"tag_ids": "tags"}

    title: str
    slug: str | None = None
    excerpt: str | None = None
    description: str | None = None
    content: str | None = None
    status: ContentStatus = ContentStatus.DRAFT
    category: str | None = None
    category_id: int | None = None
    featured_image: str | FileUpload | None = Field(
        default=None,
        validation_alias=AliasChoices("featured_image", "imageUrl", "image"),
    )
    cover: str | FileUpload | None = None
    is_featured: bool = False
    published_at: datetime | None = None

    author: Author | str | None = None
    tags: list[Tag] = Field(default_factory=list)
    # Write side: the backend syncs tags from a list of tag ids
    tag_ids: list[int] | None = None

    views: int = 0
    likes: int = 0
    rating: float = 0.0
    created_by: int | None = None
    updated_by: int | None = None

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tags(cls, v: Any) -> Any:
        """Tags arrive as TagResource objects, plain names, or null."""
        if v is None:
            return []
        if isinstance(v, list):
            return [{"name": item} if isinstance(item, str) else item for item in v]
        return v

    @property
    def is_public(self) -> bool:
        return self.status.is_public


class Article(ContentItem):
    body: str | None = None


class Video(ContentItem):
    video_url: str | None = None
    embed_url: str | None = None
    thumbnail: str | FileUpload | None = None
    instructor: str | None = None
    duration: str | None = None
