"""ApiClient: the single dispatcher every service facade goes through.

Responsibilities:
- build headers (JSON vs multipart, bearer token, XHR marker)
- refuse protected calls after an explicit logout
- turn non-2xx responses into typed errors, forcing a local logout on a
  401 from a protected path
- strip the Laravel ``data`` envelope from successful responses

No retries, no backoff, no request coalescing: each call is one HTTP request.
"""

from __future__ import annotations

import asyncio
import json
import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Mapping, Self
from urllib.parse import urlencode

import aiohttp

from greengroves.client.classifier import is_protected
from greengroves.client.envelope import unwrap
from greengroves.errors import (
    ApiError,
    AuthenticationError,
    LoggedOutError,
    NetworkError,
    NotFoundError,
    ValidationError,
)
from greengroves.storage.token_store import TokenStore

logger = logging.getLogger(__name__)

UnauthorizedHook = Callable[[str], Awaitable[None] | None]


def build_query(params: Mapping[str, Any] | None) -> str:
    """Encode query params, skipping None and empty strings."""
    if not params:
        return ""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, Enum):
            value = value.value
        pairs.append((key, str(value)))
    return urlencode(pairs)


def with_query(path: str, params: Mapping[str, Any] | None) -> str:
    query = build_query(params)
    if not query:
        return path
    separator = "&" if "?" in path else "?"
    return f"{path}{separator}{query}"


def _error_message(payload: Any, status: int) -> str:
    if isinstance(payload, dict):
        message = payload.get("message") or payload.get("error")
        if message:
            return str(message)
    return f"HTTP {status}"


class ApiClient:
    """Async HTTP client for the Green Groves Laravel API.

    Usage:
        async with ApiClient(base_url, TokenStore(MemoryStorage())) as api:
            articles = await api.request("/admin/articles")

    The client owns its aiohttp session unless one is passed in, in which
    case closing it is the caller's job.
    """

    DEFAULT_HEADERS = {
        "Accept": "application/json",
        "X-Requested-With": "XMLHttpRequest",
    }

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        *,
        session: aiohttp.ClientSession | None = None,
        login_route: str = "/login",
        on_unauthorized: UnauthorizedHook | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.tokens = token_store
        self.login_route = login_route
        self.on_unauthorized = on_unauthorized
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Self:
        self._get_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        if self._owns_session:
            self._session = None

    # Token helpers

    async def set_token(self, token: str) -> None:
        await self.tokens.set(token)

    async def logout(self) -> None:
        """Drop local credentials and block protected calls until the next login."""
        await self.tokens.clear()
        await self.tokens.mark_logged_out()

    # Dispatch

    async def _build_headers(
        self,
        body: Any,
        overrides: Mapping[str, str] | None,
    ) -> dict[str, str]:
        headers = dict(self.DEFAULT_HEADERS)
        if body is not None and not isinstance(body, aiohttp.FormData):
            headers["Content-Type"] = "application/json"
        token = await self.tokens.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if overrides:
            headers.update(overrides)
        return headers

    async def request(
        self,
        path: str,
        method: str = "GET",
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        raw: bool = False,
    ) -> Any:
        """Send one request and return the normalized JSON body.

        Args:
            path: Path relative to the base URL, may already carry a query string
            method: HTTP verb
            body: dict/list (sent as JSON), aiohttp.FormData (sent as multipart), or None
            params: Extra query params; None and "" values are dropped
            headers: Header overrides, applied last
            raw: Return the body without stripping the ``data`` envelope

        Returns:
            The unwrapped payload, the full body for upload endpoints, or None
            for an empty response.

        Raises:
            LoggedOutError: protected path after an explicit logout (no request sent)
            ValidationError / AuthenticationError / NotFoundError / ApiError: non-2xx
            NetworkError: no response at all
        """
        path = with_query(path, params)
        method = method.upper()
        protected = is_protected(path)

        if protected and await self.tokens.is_logged_out():
            logger.info("Blocked %s %s: user has logged out", method, path)
            raise LoggedOutError(path)

        request_headers = await self._build_headers(body, headers)
        if isinstance(body, aiohttp.FormData) or body is None:
            data = body
        else:
            data = json.dumps(body, default=str)

        url = f"{self.base_url}{path}"
        logger.debug("%s %s (protected=%s)", method, path, protected)
        session = self._get_session()
        try:
            async with session.request(method, url, data=data, headers=request_headers) as resp:
                status = resp.status
                text = await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error("%s %s failed without a response: %s", method, path, e)
            raise NetworkError(f"{method} {path} failed: {e}") from e

        payload = self._decode(text)

        if not 200 <= status < 300:
            await self._raise_for_status(method, path, status, payload, protected)

        if raw:
            return payload
        return unwrap(path, payload)

    @staticmethod
    def _decode(text: str) -> Any:
        if not text:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError:
            return text

    async def _raise_for_status(
        self,
        method: str,
        path: str,
        status: int,
        payload: Any,
        protected: bool,
    ) -> None:
        message = _error_message(payload, status)
        logger.warning("%s %s returned HTTP %d: %s", method, path, status, message)

        if status == 401:
            if protected:
                await self._force_logout()
            raise AuthenticationError(message, payload)
        if status == 422:
            errors = payload.get("errors") if isinstance(payload, dict) else None
            raise ValidationError(message, errors if isinstance(errors, dict) else None, payload)
        if status == 404:
            raise NotFoundError(message, payload)
        raise ApiError(status, message, payload)

    async def _force_logout(self) -> None:
        await self.logout()
        logger.warning("Session rejected by a protected endpoint, redirecting to %s", self.login_route)
        if self.on_unauthorized is None:
            return
        result = self.on_unauthorized(self.login_route)
        if hasattr(result, "__await__"):
            await result

    # Verb shortcuts

    async def get(self, path: str, **params: Any) -> Any:
        return await self.request(path, "GET", params=params)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request(path, "POST", body=body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request(path, "PUT", body=body)

    async def delete(self, path: str, **params: Any) -> Any:
        return await self.request(path, "DELETE", params=params)

    def __repr__(self) -> str:
        return f"ApiClient(base_url={self.base_url!r})"
