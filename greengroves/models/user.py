"""Users and auth session payloads."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from greengroves.models.base import ApiModel
from greengroves.models.files import FileUpload


class UserRole(str, Enum):
    ADMIN = "admin"
    MODERATOR = "moderator"
    EDITOR = "editor"
    USER = "user"


class UserStatus(str, Enum):
    ACTIVE = "active"
    BANNED = "banned"


class User(ApiModel):
    read_only_fields: ClassVar[frozenset[str]] = ApiModel.read_only_fields | {
        "last_login_at",
        "email_verified_at",
    }

    name: str
    email: str
    # Write-only; the backend never returns it
    password: str | None = None
    role: str = UserRole.USER.value
    status: UserStatus = UserStatus.ACTIVE
    phone: str | None = None
    phone_country_code: str | None = None
    country: str | None = None
    city: str | None = None
    address: str | None = None
    zip_code: str | None = None
    bio: str | None = None
    avatar: str | FileUpload | None = Field(
        default=None, validation_alias=AliasChoices("avatar", "avatarUrl")
    )
    last_login_at: datetime | None = None
    email_verified_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


class AuthSession(BaseModel):
    """Unwrapped body of /auth/login and /auth/refresh."""

    model_config = ConfigDict(extra="ignore")

    token: str = Field(validation_alias=AliasChoices("token", "access_token"))
    user: dict[str, Any] | None = None
    token_type: str = "Bearer"

    @property
    def profile(self) -> User | None:
        return User.from_api(self.user) if self.user else None
