"""Products: one backend table, five kinds, modelled as a tagged union on ``category``.

Every kind shares ProductBase; the kind-specific columns only exist on the
matching variant, so a Book cannot carry ``drainage_holes``.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import AliasChoices, Field, TypeAdapter, field_validator

from greengroves.models.base import ApiModel, ContentStatus
from greengroves.models.files import FileUpload


class ProductCategory(str, Enum):
    TOOL = "tool"
    BOOK = "book"
    POT = "pot"
    ACCESSORY = "accessory"
    SUGGESTION = "suggestion"


class ProductBase(ApiModel):
    read_only_fields: ClassVar[frozenset[str]] = ApiModel.read_only_fields | {
        "views",
        "likes",
        "rating",
    }
    always_sent: ClassVar[frozenset[str]] = frozenset({"category"})

    # ProductResource sends the name twice, as "name" and "title"
    name: str = Field(validation_alias=AliasChoices("name", "title"))
    slug: str | None = None
    description: str | None = None
    subcategory: str | None = None
    price: float | None = None
    brand: str | None = None
    material: str | None = None
    size: str | None = None
    color: str | None = None
    image: str | FileUpload | None = Field(
        default=None, validation_alias=AliasChoices("image", "imageUrl")
    )
    link: str | None = None
    status: ContentStatus = ContentStatus.PENDING
    is_featured: bool = False
    views: int = 0
    likes: int = 0
    rating: float = 0.0

    @field_validator("price", "rating", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        return None if v == "" else v

    @property
    def is_public(self) -> bool:
        return self.status.is_public


class Tool(ProductBase):
    category: Literal["tool"] = "tool"


class Book(ProductBase):
    category: Literal["book"] = "book"
    author: str | None = None
    publisher: str | None = None
    isbn: str | None = None
    pages: int | None = None
    published_year: int | None = None


class Pot(ProductBase):
    category: Literal["pot"] = "pot"
    dimensions: str | None = None
    drainage_holes: bool | None = None


class Accessory(ProductBase):
    category: Literal["accessory"] = "accessory"
    usage: str | None = None
    is_waterproof: bool | None = None
    is_durable: bool | None = None


class Suggestion(ProductBase):
    category: Literal["suggestion"] = "suggestion"
    difficulty_level: str | None = None
    season: str | None = None
    plant_type: str | None = None
    estimated_time: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [tag.strip() for tag in v.split(",") if tag.strip()]
        return v


Product = Annotated[
    Union[Tool, Book, Pot, Accessory, Suggestion],
    Field(discriminator="category"),
]

PRODUCT_MODELS: dict[ProductCategory, type[ProductBase]] = {
    ProductCategory.TOOL: Tool,
    ProductCategory.BOOK: Book,
    ProductCategory.POT: Pot,
    ProductCategory.ACCESSORY: Accessory,
    ProductCategory.SUGGESTION: Suggestion,
}

_product_adapter: TypeAdapter[Any] = TypeAdapter(Product)


def parse_product(raw: Any, default_category: ProductCategory | str | None = None) -> ProductBase:
    """Pick the product variant from ``raw["category"]``.

    Legacy per-kind endpoints (``/tools``, ``/books``...) may omit the
    category; ``default_category`` fills it in.
    """
    if isinstance(raw, ProductBase):
        return raw
    if default_category is not None and isinstance(raw, dict) and not raw.get("category"):
        raw = {**raw, "category": ProductCategory(default_category).value}
    return _product_adapter.validate_python(raw)


class Essential(ApiModel):
    """Gardening essentials (soil, fertilizer...), kept in their own table."""

    read_only_fields: ClassVar[frozenset[str]] = ApiModel.read_only_fields | {
        "views",
        "likes",
        "rating",
    }

    name: str = Field(validation_alias=AliasChoices("name", "title"))
    slug: str | None = None
    description: str | None = None
    content: str | None = None
    category: str | None = None
    brand: str | None = None
    price: float | None = None
    weight: str | None = None
    usage: str | None = None
    in_stock: bool | None = None
    image: str | FileUpload | None = Field(
        default=None, validation_alias=AliasChoices("image", "imageUrl")
    )
    status: ContentStatus = ContentStatus.PUBLISHED
    views: int = 0
    likes: int = 0
    rating: float = 0.0
