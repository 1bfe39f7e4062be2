"""Audit trail records."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from greengroves.models.base import ApiModel


class ActivityType(str, Enum):
    PUBLIC = "public"
    SECURITY = "security"


class ActivityLog(ApiModel):
    """Append-only record of an action.

    Actor name and IP are copied onto the row so the log still reads
    correctly after the user is deleted.
    """

    user_id: int | None = None
    user_name: str | None = None
    user_ip: str | None = None
    activity_type: ActivityType = ActivityType.PUBLIC
    action: str
    entity_type: str | None = None
    entity_id: int | None = None
    entity_name: str | None = None
    description: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
