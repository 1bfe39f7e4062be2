"""Products and the legacy per-kind aliases (tools, books, pots, ...).

All five kinds live in the single ``products`` table; the aliases are just
the product endpoints with a fixed ``category``.
"""

from __future__ import annotations

from functools import partial
from typing import Any

from greengroves.client.api_client import ApiClient
from greengroves.models.base import ContentStatus, Page
from greengroves.models.product import Essential, ProductBase, ProductCategory, parse_product
from greengroves.services.base import Payload, ResourceService, to_payload


class ProductService(ResourceService[ProductBase]):
    """``/products`` for reads, create and delete; updates go to ``/admin/products/{id}``."""

    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(api, "/products", parse_product, lenient_lists=lenient_lists)

    def update_path(self, item_id: int | str) -> str:
        return f"/admin/products/{item_id}"

    async def list_by_category(
        self, category: ProductCategory | str, **params: Any
    ) -> list[ProductBase]:
        category = ProductCategory(category)
        items = await self.fetch_list(self.path, {**params, "category": category.value})
        # The backend filter is trusted, but a stray row must not change type
        return [item for item in items if item.category == category.value]

    async def list_public(self, **params: Any) -> list[ProductBase]:
        items = await self.list(**params)
        return [item for item in items if item.status is not ContentStatus.ARCHIVED]


class ProductAliasService(ResourceService[ProductBase]):
    """One product kind exposed as its own resource.

    Reads filter by ``category``; writes force ``category`` into the payload.
    """

    def __init__(self, products: ProductService, category: ProductCategory | str) -> None:
        self.category = ProductCategory(category)
        super().__init__(
            products.api,
            products.path,
            partial(parse_product, default_category=self.category),
            lenient_lists=products.lenient_lists,
        )
        self.products = products

    def update_path(self, item_id: int | str) -> str:
        return self.products.update_path(item_id)

    def with_category(self, data: Payload) -> dict[str, Any]:
        return {**to_payload(data), "category": self.category.value}

    async def list(self, **params: Any) -> list[ProductBase]:
        return await self.products.list_by_category(self.category, **params)

    async def list_page(self, **params: Any) -> Page[ProductBase]:
        return await super().list_page(**{**params, "category": self.category.value})

    async def create(self, data: Payload) -> ProductBase:
        return await super().create(self.with_category(data))

    async def update(self, item_id: int | str, data: Payload) -> ProductBase:
        return await super().update(item_id, self.with_category(data))


class EssentialService(ResourceService[Essential]):
    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(api, "/essentials", Essential.from_api, lenient_lists=lenient_lists)
