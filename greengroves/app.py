"""GreenGroves: one object holding the dispatcher and every service facade.

Build it once at startup and hand it to whatever needs API access:

    async with GreenGroves.from_settings() as gg:
        await gg.auth.login("admin@example.com", "secret")
        tools = await gg.tools.list()
"""

from __future__ import annotations

import logging
from typing import Self

from greengroves.client.api_client import ApiClient, UnauthorizedHook
from greengroves.config.settings import Settings, get_settings
from greengroves.models.product import ProductCategory
from greengroves.services import (
    AboutUsService,
    ActivityLogService,
    ArticleService,
    AuthService,
    ContactService,
    DashboardService,
    EssentialService,
    HeroSectionService,
    InteractionService,
    ItemService,
    MapSettingService,
    ProductAliasService,
    ProductService,
    ResourceService,
    SiteSettingsService,
    StaffMemberService,
    UploadService,
    UserService,
    VideoService,
)
from greengroves.storage import TokenStore, build_storage

logger = logging.getLogger(__name__)

# CRUD facades reachable by name (CLI, generic tooling)
RESOURCES: tuple[str, ...] = (
    "articles",
    "videos",
    "products",
    "tools",
    "books",
    "pots",
    "accessories",
    "suggestions",
    "essentials",
    "about-us",
    "contact",
    "users",
    "activity-logs",
    "hero-sections",
    "staff-members",
    "map-settings",
)


class GreenGroves:
    """Client root: explicit replacement for a module-level API singleton."""

    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        self.api = api
        opts = {"lenient_lists": lenient_lists}

        self.auth = AuthService(api)
        self.articles = ArticleService(api, **opts)
        self.videos = VideoService(api, **opts)

        self.products = ProductService(api, **opts)
        self.tools = ProductAliasService(self.products, ProductCategory.TOOL)
        self.books = ProductAliasService(self.products, ProductCategory.BOOK)
        self.pots = ProductAliasService(self.products, ProductCategory.POT)
        self.accessories = ProductAliasService(self.products, ProductCategory.ACCESSORY)
        self.suggestions = ProductAliasService(self.products, ProductCategory.SUGGESTION)
        self.essentials = EssentialService(api, **opts)

        self.about_us = AboutUsService(api, **opts)
        self.contact = ContactService(api, **opts)
        self.settings = SiteSettingsService(api)
        self.users = UserService(api, **opts)
        self.activity_logs = ActivityLogService(api, **opts)
        self.hero_sections = HeroSectionService(api, **opts)
        self.staff_members = StaffMemberService(api, **opts)
        self.map_settings = MapSettingService(api, **opts)

        self.uploads = UploadService(api)
        self.interactions = InteractionService(api)
        self.dashboard = DashboardService(api)
        self.items = ItemService(api)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        on_unauthorized: UnauthorizedHook | None = None,
    ) -> GreenGroves:
        """Wire storage, token store and dispatcher from configuration."""
        settings = settings or get_settings()
        storage = build_storage(settings)
        api = ApiClient(
            settings.api_base_url,
            TokenStore(storage),
            login_route=settings.login_route,
            on_unauthorized=on_unauthorized,
        )
        logger.debug("Configured client for %s (storage=%r)", settings.api_base_url, storage)
        return cls(api, lenient_lists=settings.lenient_list_fetches)

    def resource(self, name: str) -> ResourceService:
        """Look up a CRUD facade by its CLI/resource name (``about-us`` -> about_us)."""
        if name not in RESOURCES:
            raise KeyError(name)
        return getattr(self, name.replace("-", "_"))

    async def __aenter__(self) -> Self:
        await self.api.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        await self.api.close()
        close_storage = getattr(self.api.tokens.storage, "close", None)
        if close_storage is not None:
            await close_storage()
