"""User management and the current user's profile."""

from __future__ import annotations

from typing import Any

from greengroves.client.api_client import ApiClient
from greengroves.models.user import User, UserStatus
from greengroves.services.base import Payload, ResourceService


class UserService(ResourceService[User]):
    profile_path = "/user/profile"

    def __init__(self, api: ApiClient, *, lenient_lists: bool = False) -> None:
        super().__init__(api, "/users", User.from_api, lenient_lists=lenient_lists)

    async def get_profile(self) -> User:
        return self.parse_one(await self.api.request(self.profile_path))

    async def update_profile(self, data: Payload) -> User | Any:
        body = await self.send(self.profile_path, "PUT", data)
        return self.parse_one(body)

    async def ban(self, user_id: int | str) -> User:
        return await self.update(user_id, {"status": UserStatus.BANNED.value})

    async def activate(self, user_id: int | str) -> User:
        return await self.update(user_id, {"status": UserStatus.ACTIVE.value})
