"""Articles and videos."""

from __future__ import annotations

from typing import Any, TypeVar

from greengroves.client.api_client import ApiClient
from greengroves.models.base import ContentStatus
from greengroves.models.content import Article, ContentItem, Video
from greengroves.services.base import ResourceService

C = TypeVar("C", bound=ContentItem)


class ContentService(ResourceService[C]):
    """Admin CRUD under ``/admin/<name>`` plus the public listing at ``/<name>``."""

    def __init__(
        self,
        api: ApiClient,
        name: str,
        model: type[C],
        *,
        lenient_lists: bool = False,
    ) -> None:
        super().__init__(api, f"/admin/{name}", model.from_api, lenient_lists=lenient_lists)
        self.public_path = f"/{name}"

    async def list(
        self,
        *,
        search: str | None = None,
        status: ContentStatus | str | None = None,
        category: str | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
        page: int | None = None,
        per_page: int | None = None,
        **params: Any,
    ) -> list[C]:
        return await super().list(
            search=search,
            status=status,
            category=category,
            sortBy=sort_by,
            sortOrder=sort_order,
            page=page,
            per_page=per_page,
            **params,
        )

    async def list_public(self, **params: Any) -> list[C]:
        """Public listing; archived items are dropped even if the backend sends them."""
        items = await self.fetch_list(self.public_path, params)
        return [item for item in items if item.status is not ContentStatus.ARCHIVED]

    async def set_status(self, item_id: int | str, status: ContentStatus | str) -> C:
        """Assign a status directly; no transition rules are applied."""
        return await self.update(item_id, {"status": ContentStatus(status).value})


class ArticleService(ContentService[Article]):
    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(api, "articles", Article, lenient_lists=lenient_lists)


class VideoService(ContentService[Video]):
    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(api, "videos", Video, lenient_lists=lenient_lists)
