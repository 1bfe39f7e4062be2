"""Site-wide content: about-us pages, hero banners, staff, map and settings."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from greengroves.models.base import ApiModel
from greengroves.models.files import FileUpload


class AboutUs(ApiModel):
    title: str
    subtitle: str | None = None
    description: str | None = None
    content: str | None = None
    image: str | FileUpload | None = None
    mission: str | None = None
    vision: str | None = None
    values: str | None = None
    team_members: list[dict[str, Any]] = Field(default_factory=list)
    achievements: list[Any] = Field(default_factory=list)
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    social_links: dict[str, Any] | list[Any] = Field(default_factory=dict)
    is_active: bool = False


class HeroSection(ApiModel):
    title: str
    subtitle: str | None = None
    description: str | None = None
    image: str | FileUpload | None = None
    button_text: str | None = None
    button_link: str | None = None
    is_active: bool = False


class StaffMember(ApiModel):
    name: str
    position: str | None = None
    bio: str | None = None
    avatar: str | FileUpload | None = None
    email: str | None = None
    phone: str | None = None
    display_order: int = 0
    is_active: bool = True


class MapSetting(ApiModel):
    location_name: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    zoom_level: int | None = None
    embed_url: str | None = None
    is_active: bool = False


class SiteSettings(ApiModel):
    """Key/value site configuration; unknown keys are kept in ``extra``."""

    site_name: str | None = None
    site_description: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    address: str | None = None
    social_links: dict[str, Any] = Field(default_factory=dict)
    extra: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_api(cls, raw: Any) -> SiteSettings:
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, list):
            # [{"key": ..., "value": ...}, ...] rows from the settings table
            raw = {row.get("key"): row.get("value") for row in raw if isinstance(row, dict)}
        raw = dict(raw or {})
        known = set(cls.model_fields) - {"extra"}
        extra = {k: v for k, v in raw.items() if k not in known}
        return cls.model_validate({**{k: v for k, v in raw.items() if k in known}, "extra": extra})

    def to_payload(self) -> dict[str, Any]:
        data = super().to_payload()
        extra = data.pop("extra", {})
        return {**extra, **data}
