"""Generic CRUD facade over one backend resource."""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Mapping, TypeVar

from greengroves.client.api_client import ApiClient
from greengroves.client.envelope import parse_page
from greengroves.client.forms import build_form, has_files
from greengroves.errors import NetworkError, UnexpectedResponseError
from greengroves.models.base import ApiModel, Page

logger = logging.getLogger(__name__)

T = TypeVar("T")

Payload = ApiModel | Mapping[str, Any]


def to_payload(data: Payload) -> dict[str, Any]:
    """Model or mapping -> plain dict for the wire, None values dropped."""
    if isinstance(data, ApiModel):
        return data.to_payload()
    return {key: value for key, value in data.items() if value is not None}


class ResourceService(Generic[T]):
    """list/get/create/update/delete for one resource path.

    Create and update switch to multipart when the payload holds a
    FileUpload. Laravel only parses multipart bodies on POST, so a multipart
    update is sent as POST with ``_method=PUT``.
    """

    def __init__(
        self,
        api: ApiClient,
        path: str,
        parser: Callable[[Any], T],
        *,
        lenient_lists: bool = False,
    ) -> None:
        self.api = api
        self.path = path
        self.parser = parser
        self.lenient_lists = lenient_lists

    def item_path(self, item_id: int | str) -> str:
        return f"{self.path}/{item_id}"

    def update_path(self, item_id: int | str) -> str:
        return self.item_path(item_id)

    # Parsing

    def parse_one(self, body: Any) -> T | Any:
        if isinstance(body, dict):
            return self.parser(body)
        return body

    def parse_many(self, path: str, body: Any) -> list[T]:
        # Flat paginators survive one unwrap: {"data": [...], "current_page": ...}
        if isinstance(body, dict) and isinstance(body.get("data"), list):
            body = body["data"]
        if body is None:
            return []
        if not isinstance(body, list):
            raise UnexpectedResponseError(path, body)
        return [self.parser(item) for item in body]

    # Reads

    async def fetch_list(self, path: str, params: Mapping[str, Any] | None = None) -> list[T]:
        """GET a collection path and parse every item.

        With ``lenient_lists`` a network failure yields [] instead of raising.
        """
        try:
            body = await self.api.request(path, params=params)
        except NetworkError:
            if not self.lenient_lists:
                raise
            logger.warning("Network failure listing %s, returning an empty list", path)
            return []
        return self.parse_many(path, body)

    async def list(self, **params: Any) -> list[T]:
        return await self.fetch_list(self.path, params)

    async def list_page(self, **params: Any) -> Page[T]:
        """Like list() but keeps the paginator metadata."""
        body = await self.api.request(self.path, params=params, raw=True)
        return parse_page(body, self.parser)

    async def get(self, item_id: int | str) -> T:
        body = await self.api.request(self.item_path(item_id))
        return self.parse_one(body)

    # Writes

    async def send(self, path: str, method: str, data: Payload) -> Any:
        """Dispatch a write as JSON, or as multipart when it carries files."""
        payload = to_payload(data)
        if has_files(payload):
            override = None if method.upper() == "POST" else method
            form = build_form(payload, method_override=override)
            logger.debug("Sending %s %s as multipart (override=%s)", method, path, override)
            return await self.api.request(path, "POST", body=form)
        return await self.api.request(path, method, body=payload)

    async def create(self, data: Payload) -> T:
        body = await self.send(self.path, "POST", data)
        return self.parse_one(body)

    async def update(self, item_id: int | str, data: Payload) -> T:
        body = await self.send(self.update_path(item_id), "PUT", data)
        return self.parse_one(body)

    async def delete(self, item_id: int | str) -> Any:
        return await self.api.request(self.item_path(item_id), "DELETE")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r})"


class ActiveResourceService(ResourceService[T]):
    """Resource with a public ``/<name>/active`` endpoint next to its admin CRUD."""

    def __init__(
        self,
        api: ApiClient,
        path: str,
        parser: Callable[[Any], T],
        *,
        active_path: str,
        lenient_lists: bool = False,
    ) -> None:
        super().__init__(api, path, parser, lenient_lists=lenient_lists)
        self.active_path = active_path

    async def get_active(self) -> T | list[T] | None:
        body = await self.api.request(self.active_path)
        if isinstance(body, list):
            return [self.parser(item) for item in body]
        return self.parse_one(body)
