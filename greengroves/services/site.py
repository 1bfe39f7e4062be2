"""About-us, hero sections, staff members, map and site settings."""

from __future__ import annotations

from typing import Any

from greengroves.client.api_client import ApiClient
from greengroves.models.site import AboutUs, HeroSection, MapSetting, SiteSettings, StaffMember
from greengroves.services.base import ActiveResourceService, Payload, to_payload


class AboutUsService(ActiveResourceService[AboutUs]):
    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(
            api,
            "/about-us",
            AboutUs.from_api,
            active_path="/about-us/active",
            lenient_lists=lenient_lists,
        )


class HeroSectionService(ActiveResourceService[HeroSection]):
    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(
            api,
            "/admin/hero-sections",
            HeroSection.from_api,
            active_path="/hero-sections/active",
            lenient_lists=lenient_lists,
        )


class StaffMemberService(ActiveResourceService[StaffMember]):
    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(
            api,
            "/admin/staff-members",
            StaffMember.from_api,
            active_path="/staff-members/active",
            lenient_lists=lenient_lists,
        )

    async def reorder(self, orders: list[dict[str, Any]] | dict[int | str, int]) -> Any:
        """Set display order.

        Accepts ``[{"id": ..., "display_order": ...}]`` or ``{id: display_order}``.
        """
        if isinstance(orders, dict):
            orders = [{"id": item_id, "display_order": pos} for item_id, pos in orders.items()]
        return await self.api.request(f"{self.path}/reorder", "POST", body={"orders": orders})


class MapSettingService(ActiveResourceService[MapSetting]):
    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(
            api,
            "/admin/map-settings",
            MapSetting.from_api,
            active_path="/map-settings/active",
            lenient_lists=lenient_lists,
        )


class SiteSettingsService:
    """Singleton settings resource: no ids, no list."""

    admin_path = "/admin/settings"
    public_path = "/settings"

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    async def get(self) -> SiteSettings:
        return SiteSettings.from_api(await self.api.request(self.admin_path))

    async def get_public(self) -> SiteSettings:
        return SiteSettings.from_api(await self.api.request(self.public_path))

    async def update(self, data: Payload) -> SiteSettings:
        body = await self.api.request(self.admin_path, "PUT", body=to_payload(data))
        if isinstance(body, (dict, list)):
            return SiteSettings.from_api(body)
        return await self.get()
