"""Likes, ratings and view tracking."""

from __future__ import annotations

from typing import Any

from greengroves.client.api_client import ApiClient
from greengroves.models.stats import InteractionResult


class InteractionService:
    path = "/interactions"

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    @staticmethod
    def _result(body: Any) -> InteractionResult:
        if isinstance(body, dict):
            return InteractionResult.model_validate(body)
        return InteractionResult()

    async def _post(
        self, action: str, content_type: str, content_id: int, **extra: Any
    ) -> InteractionResult:
        body = {"content_type": content_type, "content_id": content_id, **extra}
        return self._result(await self.api.request(f"{self.path}/{action}", "POST", body=body))

    async def toggle_like(self, content_type: str, content_id: int) -> InteractionResult:
        return await self._post("like", content_type, content_id)

    async def rate(self, content_type: str, content_id: int, rating: int) -> InteractionResult:
        if not 1 <= rating <= 5:
            raise ValueError(f"rating must be between 1 and 5, got {rating}")
        return await self._post("rating", content_type, content_id, rating=rating)

    async def track_view(self, content_type: str, content_id: int) -> InteractionResult:
        return await self._post("view", content_type, content_id)

    async def user_state(self, content_type: str, content_id: int) -> InteractionResult:
        params = {"content_type": content_type, "content_id": content_id}
        return self._result(await self.api.request(f"{self.path}/user", params=params))

    async def stats(self, content_type: str, content_id: int) -> InteractionResult:
        params = {"content_type": content_type, "content_id": content_id}
        return self._result(await self.api.request(f"{self.path}/stats", params=params))
