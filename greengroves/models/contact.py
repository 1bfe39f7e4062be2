"""Inbound contact messages."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import ClassVar

from greengroves.models.base import ApiModel


class ContactStatus(str, Enum):
    """unread -> read -> replied."""

    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"


class ContactMessage(ApiModel):
    read_only_fields: ClassVar[frozenset[str]] = ApiModel.read_only_fields | {
        "ip_address",
        "user_agent",
        "user_id",
        "replied_at",
    }

    name: str
    email: str
    subject: str
    message: str
    phone: str | None = None
    status: ContactStatus = ContactStatus.UNREAD
    admin_reply: str | None = None
    replied_at: datetime | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    user_id: int | None = None
