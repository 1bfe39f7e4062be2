"""Token store: the auth token, the cached user profile and the logged-out flag."""

from __future__ import annotations

import json
import logging
from typing import Any

from greengroves.storage.base import KeyValueStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "auth_token"
USER_KEY = "greengroves_user"
LOGGED_OUT_KEY = "user_logged_out"


class TokenStore:
    """Persists the bearer token in a KeyValueStorage.

    Every read goes to the storage so changes made elsewhere (another
    process sharing the same file or Redis) are visible on the next request.
    No expiry tracking: an expired token is discovered through a 401.
    """

    def __init__(self, storage: KeyValueStorage) -> None:
        self.storage = storage

    async def get(self) -> str | None:
        token = await self.storage.get(TOKEN_KEY)
        return token or None

    async def set(self, token: str) -> None:
        """Persist a fresh token. A fresh token also ends any logged-out state."""
        await self.storage.set(TOKEN_KEY, token)
        await self.clear_logged_out()
        logger.debug("Stored auth token (%s...)", token[:8])

    async def clear(self) -> None:
        """Remove the token and the cached user profile."""
        await self.storage.delete(TOKEN_KEY)
        await self.storage.delete(USER_KEY)
        logger.debug("Cleared auth token and cached user")

    async def get_user(self) -> dict[str, Any] | None:
        raw = await self.storage.get(USER_KEY)
        if not raw:
            return None
        try:
            user = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Cached user profile is not valid JSON, ignoring it")
            return None
        return user if isinstance(user, dict) else None

    async def set_user(self, user: dict[str, Any]) -> None:
        await self.storage.set(USER_KEY, json.dumps(user, default=str))

    # Logged-out flag

    async def is_logged_out(self) -> bool:
        return await self.storage.get(LOGGED_OUT_KEY) == "true"

    async def mark_logged_out(self) -> None:
        await self.storage.set(LOGGED_OUT_KEY, "true")

    async def clear_logged_out(self) -> None:
        await self.storage.delete(LOGGED_OUT_KEY)
