"""Typed DTOs for the Green Groves API."""

from greengroves.models.activity import ActivityLog, ActivityType
from greengroves.models.base import ApiModel, ContentStatus, Page, PaginationMeta
from greengroves.models.contact import ContactMessage, ContactStatus
from greengroves.models.content import Article, Author, Category, CategoryType, ContentItem, Tag, Video
from greengroves.models.files import FileUpload
from greengroves.models.product import (
    PRODUCT_MODELS,
    Accessory,
    Book,
    Essential,
    Pot,
    Product,
    ProductBase,
    ProductCategory,
    Suggestion,
    Tool,
    parse_product,
)
from greengroves.models.site import AboutUs, HeroSection, MapSetting, SiteSettings, StaffMember
from greengroves.models.stats import DashboardStats, InteractionResult
from greengroves.models.upload import UploadedFile, UploadResult
from greengroves.models.user import AuthSession, User, UserRole, UserStatus

__all__ = [
    "PRODUCT_MODELS",
    "AboutUs",
    "Accessory",
    "ActivityLog",
    "ActivityType",
    "ApiModel",
    "Article",
    "AuthSession",
    "Author",
    "Book",
    "Category",
    "CategoryType",
    "ContactMessage",
    "ContactStatus",
    "ContentItem",
    "ContentStatus",
    "DashboardStats",
    "Essential",
    "FileUpload",
    "HeroSection",
    "InteractionResult",
    "MapSetting",
    "Page",
    "PaginationMeta",
    "Pot",
    "Product",
    "ProductBase",
    "ProductCategory",
    "SiteSettings",
    "StaffMember",
    "Suggestion",
    "Tag",
    "Tool",
    "UploadResult",
    "UploadedFile",
    "User",
    "UserRole",
    "UserStatus",
    "Video",
    "parse_product",
]
