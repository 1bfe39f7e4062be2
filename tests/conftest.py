from dataclasses import dataclass, field
from typing import Any

import pytest
from aiohttp import web

from greengroves.app import GreenGroves
from greengroves.client.api_client import ApiClient
from greengroves.storage import MemoryStorage, TokenStore

API_PREFIX = "/api"


@dataclass
class RecordedRequest:
    method: str
    path: str
    headers: dict[str, str]
    content_type: str
    json: Any = None
    form: dict[str, Any] = field(default_factory=dict)


class FakeBackend:
    """Minimal stand-in for the Laravel API.

    Register canned responses with ``on()``; every request is recorded in
    ``requests`` with its API-relative path (query string included).
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[RecordedRequest] = []

    def on(self, method: str, path: str, json: Any = None, status: int = 200) -> None:
        self.routes[(method.upper(), path)] = (status, json)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    async def handle(self, request: web.Request) -> web.Response:
        path_qs = request.path_qs[len(API_PREFIX):]
        path = request.path[len(API_PREFIX):]
        recorded = RecordedRequest(
            method=request.method,
            path=path_qs,
            headers={key.lower(): value for key, value in request.headers.items()},
            content_type=request.content_type,
        )
        if request.content_type == "application/json":
            recorded.json = await request.json()
        elif request.content_type in ("multipart/form-data", "application/x-www-form-urlencoded"):
            post = await request.post()
            recorded.form = {
                key: (value.filename if isinstance(value, web.FileField) else value)
                for key, value in post.items()
            }
        self.requests.append(recorded)

        route = self.routes.get((request.method, path_qs)) or self.routes.get((request.method, path))
        if route is None:
            return web.json_response({"message": "Route not found"}, status=404)
        status, payload = route
        if payload is None:
            return web.Response(status=status)
        return web.json_response(payload, status=status)


@pytest.fixture
async def backend(aiohttp_server):
    fake = FakeBackend()
    app = web.Application()
    app.router.add_route("*", API_PREFIX + "/{tail:.*}", fake.handle)
    server = await aiohttp_server(app)
    fake.base_url = str(server.make_url(API_PREFIX))
    return fake


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def token_store(storage):
    return TokenStore(storage)


@pytest.fixture
def redirects():
    return []


@pytest.fixture
async def api(backend, token_store, redirects):
    client = ApiClient(
        backend.base_url,
        token_store,
        on_unauthorized=redirects.append,
    )
    async with client:
        yield client


@pytest.fixture
def gg(api):
    return GreenGroves(api)
