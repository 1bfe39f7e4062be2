"""Login, logout and token refresh."""

from __future__ import annotations

import logging
from typing import Any

from greengroves.client.api_client import ApiClient
from greengroves.errors import GreenGrovesError
from greengroves.models.user import AuthSession, User

logger = logging.getLogger(__name__)


class AuthService:
    """Token lifecycle on top of the dispatcher's TokenStore.

    - login: store token + user, end any logged-out state
    - logout: best-effort server revoke, then always drop local state and
      block protected calls until the next login
    """

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    async def _store_session(self, body: Any) -> AuthSession:
        session = AuthSession.model_validate(body)
        await self.api.tokens.set(session.token)
        if session.user is not None:
            await self.api.tokens.set_user(session.user)
        return session

    async def login(self, email: str, password: str) -> AuthSession:
        body = await self.api.request(
            "/auth/login", "POST", body={"email": email, "password": password}
        )
        session = await self._store_session(body)
        logger.info("Logged in as %s", email)
        return session

    async def logout(self) -> None:
        try:
            if await self.api.tokens.get():
                await self.api.request("/auth/logout", "POST")
        except GreenGrovesError as e:
            logger.warning("Server-side logout failed, clearing local session anyway: %s", e)
        finally:
            await self.api.logout()
        logger.info("Logged out")

    async def me(self) -> User:
        body = await self.api.request("/auth/me")
        user = User.from_api(body.get("user", body) if isinstance(body, dict) else body)
        await self.api.tokens.set_user(user.model_dump(mode="json", exclude_none=True))
        return user

    async def refresh(self) -> AuthSession:
        return await self._store_session(await self.api.request("/auth/refresh", "POST"))

    async def current_user(self) -> User | None:
        """Cached profile from the last login/me call, no request made."""
        cached = await self.api.tokens.get_user()
        return User.from_api(cached) if cached else None

    async def is_authenticated(self) -> bool:
        return await self.api.tokens.get() is not None
