"""Per-resource service facades."""

from greengroves.services.activity import ActivityLogService
from greengroves.services.auth import AuthService
from greengroves.services.base import ActiveResourceService, ResourceService
from greengroves.services.contact import ContactService
from greengroves.services.content import ArticleService, ContentService, VideoService
from greengroves.services.dashboard import DashboardService
from greengroves.services.interactions import InteractionService
from greengroves.services.items import ITEM_PATHS, ItemService
from greengroves.services.products import EssentialService, ProductAliasService, ProductService
from greengroves.services.site import (
    AboutUsService,
    HeroSectionService,
    MapSettingService,
    SiteSettingsService,
    StaffMemberService,
)
from greengroves.services.uploads import UploadService
from greengroves.services.users import UserService

__all__ = [
    "ITEM_PATHS",
    "AboutUsService",
    "ActiveResourceService",
    "ActivityLogService",
    "ArticleService",
    "AuthService",
    "ContactService",
    "ContentService",
    "DashboardService",
    "EssentialService",
    "HeroSectionService",
    "InteractionService",
    "ItemService",
    "MapSettingService",
    "ProductAliasService",
    "ProductService",
    "ResourceService",
    "SiteSettingsService",
    "StaffMemberService",
    "UploadService",
    "UserService",
    "VideoService",
]
