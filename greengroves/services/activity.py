"""Audit log queries."""

from __future__ import annotations

from typing import Any

from greengroves.client.api_client import ApiClient
from greengroves.models.activity import ActivityLog, ActivityType
from greengroves.services.base import ResourceService


class ActivityLogService(ResourceService[ActivityLog]):
    """Read-only view of ``/admin/activity-logs``; the log is append-only server side."""

    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(api, "/admin/activity-logs", ActivityLog.from_api, lenient_lists=lenient_lists)

    async def list(
        self,
        *,
        activity_type: ActivityType | str | None = None,
        per_page: int | None = None,
        **params: Any,
    ) -> list[ActivityLog]:
        return await super().list(activity_type=activity_type, per_page=per_page, **params)

    async def public(self, limit: int | None = None) -> list[ActivityLog]:
        return await self.fetch_list(f"{self.path}/public", {"limit": limit})

    async def security(self, limit: int | None = None) -> list[ActivityLog]:
        return await self.fetch_list(f"{self.path}/security", {"limit": limit})

    async def recent(self, limit: int | None = None) -> list[ActivityLog]:
        return await self.fetch_list(f"{self.path}/recent", {"limit": limit})

    async def clear_old(self, days: int | None = None) -> Any:
        return await self.api.request(f"{self.path}/clear", "DELETE", params={"days": days})
