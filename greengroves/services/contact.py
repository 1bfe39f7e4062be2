"""Contact form submissions and the admin inbox."""

from __future__ import annotations

from typing import Any

from greengroves.client.api_client import ApiClient
from greengroves.models.contact import ContactMessage, ContactStatus
from greengroves.services.base import Payload, ResourceService, to_payload


class ContactService(ResourceService[ContactMessage]):
    """Inbox at ``/contact-messages``; the public form posts to ``/contact``."""

    send_path = "/contact"

    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(api, "/contact-messages", ContactMessage.from_api, lenient_lists=lenient_lists)

    async def send(self, message: Payload) -> ContactMessage | Any:
        body = await self.api.request(self.send_path, "POST", body=to_payload(message))
        return self.parse_one(body)

    async def mark_read(self, message_id: int | str) -> ContactMessage:
        return await self.update(message_id, {"status": ContactStatus.READ.value})

    async def mark_replied(self, message_id: int | str, reply: str | None = None) -> ContactMessage:
        data: dict[str, Any] = {"status": ContactStatus.REPLIED.value}
        if reply is not None:
            data["admin_reply"] = reply
        return await self.update(message_id, data)
