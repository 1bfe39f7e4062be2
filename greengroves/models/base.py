"""Shared model plumbing: the API base model, pagination and content status."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greengroves.models.files import FileUpload

T = TypeVar("T")


class ContentStatus(str, Enum):
    """Publication status of articles, videos and products.

    draft -> pending -> published -> archived. Nothing enforces the order:
    any status may be assigned over any other.
    """

    DRAFT = "draft"
    PENDING = "pending"
    PUBLISHED = "published"
    ARCHIVED = "archived"

    @property
    def is_public(self) -> bool:
        """Only published items show up in public listings."""
        return self is ContentStatus.PUBLISHED


class ApiModel(BaseModel):
    """Base for every resource DTO.

    ``from_api`` and ``to_payload`` are the one place where the wire shape
    (snake_case, plus the odd legacy camelCase key) meets the Python shape.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        arbitrary_types_allowed=True,
    )

    # Fields the backend owns; never sent back on create/update
    read_only_fields: ClassVar[frozenset[str]] = frozenset(
        {"id", "created_at", "updated_at", "deleted_at"}
    )
    # Python field name -> wire key, for writes that use a different key than reads
    payload_renames: ClassVar[dict[str, str]] = {}
    # Sent even when left at their default (union discriminators)
    always_sent: ClassVar[frozenset[str]] = frozenset()

    id: int | None = None
    created_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("created_at", "createdAt")
    )
    updated_at: datetime | None = Field(
        default=None, validation_alias=AliasChoices("updated_at", "updatedAt")
    )

    @classmethod
    def from_api(cls, raw: Any) -> Any:
        """Validate an unwrapped API payload into this model."""
        if isinstance(raw, cls):
            return raw
        return cls.model_validate(raw)

    def to_payload(self) -> dict[str, Any]:
        """Writable fields the caller actually set, as the backend expects them.

        Unset fields and None values are dropped, so a partial model only
        overwrites what it names. ``always_sent`` fields go out regardless.
        FileUpload values are kept as-is so the dispatcher can switch to
        multipart.
        """
        sent = self.model_fields_set | set(self.always_sent)
        files = {
            name: value
            for name in type(self).model_fields
            if name in sent and isinstance(value := getattr(self, name), FileUpload)
        }
        data = self.model_dump(
            mode="json",
            include=sent,
            exclude_none=True,
            exclude=set(self.read_only_fields) | set(files),
        )
        data.update(files)
        for field_name, wire_key in self.payload_renames.items():
            if field_name in data:
                data[wire_key] = data.pop(field_name)
        return data


class PaginationMeta(BaseModel):
    """Laravel paginator metadata."""

    model_config = ConfigDict(extra="ignore")

    current_page: int = 1
    last_page: int = 1
    per_page: int = 0
    total: int = 0

    @classmethod
    def single_page(cls, count: int) -> PaginationMeta:
        return cls(current_page=1, last_page=1, per_page=count, total=count)

    @property
    def has_more(self) -> bool:
        return self.current_page < self.last_page


class Page(BaseModel, Generic[T]):
    """One page of a collection endpoint."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[T] = Field(default_factory=list)
    meta: PaginationMeta = Field(default_factory=PaginationMeta)
