"""Type-keyed create/update/delete over the public content paths."""

from __future__ import annotations

from typing import Any

from greengroves.client.api_client import ApiClient
from greengroves.errors import UnknownResourceError
from greengroves.services.base import Payload, to_payload

ITEM_PATHS: dict[str, str] = {
    "articles": "/articles",
    "videos": "/videos",
    "books": "/books",
    "tools": "/tools",
    "essentials": "/essentials",
    "pots": "/pots",
    "accessories": "/accessories",
    "suggestions": "/suggestions",
    "about-us": "/about-us",
}


class ItemService:
    """For callers that only know the content type as a string."""

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    @staticmethod
    def path_for(resource_type: str) -> str:
        try:
            return ITEM_PATHS[resource_type]
        except KeyError:
            raise UnknownResourceError(resource_type) from None

    async def create_item(self, resource_type: str, data: Payload) -> Any:
        return await self.api.request(self.path_for(resource_type), "POST", body=to_payload(data))

    async def update_item(self, resource_type: str, item_id: int | str, data: Payload) -> Any:
        path = f"{self.path_for(resource_type)}/{item_id}"
        return await self.api.request(path, "PUT", body=to_payload(data))

    async def delete_item(self, resource_type: str, item_id: int | str) -> Any:
        return await self.api.request(f"{self.path_for(resource_type)}/{item_id}", "DELETE")
