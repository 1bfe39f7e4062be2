"""Admin dashboard numbers and page-view analytics."""

from __future__ import annotations

from typing import Any

from greengroves.client.api_client import ApiClient
from greengroves.models.stats import DashboardStats


class DashboardService:
    def __init__(self, api: ApiClient) -> None:
        self.api = api

    async def stats(self) -> DashboardStats:
        body = await self.api.request("/admin/dashboard/stats")
        return DashboardStats.model_validate(body or {})

    async def analytics(self, time_range: str = "30d") -> Any:
        return await self.api.request("/admin/analytics", params={"range": time_range})

    async def track_page_view(self, page: str) -> Any:
        return await self.api.request("/analytics/page-view", "POST", body={"page": page})
