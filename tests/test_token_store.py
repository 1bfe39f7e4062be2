import json
from unittest.mock import AsyncMock

import pytest

from greengroves.config.settings import Settings
from greengroves.storage import JsonFileStorage, MemoryStorage, TokenStore, build_storage
from greengroves.storage.redis_storage import RedisStorage
from greengroves.storage.token_store import LOGGED_OUT_KEY, TOKEN_KEY, USER_KEY


async def test_set_and_get_token(token_store):
    assert await token_store.get() is None
    await token_store.set("abc123")
    assert await token_store.get() == "abc123"


async def test_clear_removes_token_and_user(token_store, storage):
    await token_store.set("abc123")
    await token_store.set_user({"id": 1, "name": "Ada"})

    await token_store.clear()

    assert await token_store.get() is None
    assert await token_store.get_user() is None
    assert await storage.get(USER_KEY) is None


async def test_setting_a_token_ends_logged_out_state(token_store):
    await token_store.mark_logged_out()
    assert await token_store.is_logged_out()

    await token_store.set("fresh")

    assert not await token_store.is_logged_out()


async def test_logged_out_flag_is_stored_as_string(token_store, storage):
    await token_store.mark_logged_out()
    assert await storage.get(LOGGED_OUT_KEY) == "true"


async def test_token_is_reread_from_storage(storage, token_store):
    # Another writer (another process, another tab) changes the token
    await storage.set(TOKEN_KEY, "from-elsewhere")
    assert await token_store.get() == "from-elsewhere"


async def test_corrupt_user_profile_is_ignored(storage, token_store):
    await storage.set(USER_KEY, "{not json")
    assert await token_store.get_user() is None


async def test_json_file_storage_roundtrip(tmp_path):
    path = tmp_path / "state" / "storage.json"
    store = TokenStore(JsonFileStorage(path))

    await store.set("tok")
    await store.set_user({"id": 3, "name": "Mai"})

    on_disk = json.loads(path.read_text())
    assert on_disk[TOKEN_KEY] == "tok"
    assert json.loads(on_disk[USER_KEY])["name"] == "Mai"

    # A second store over the same file sees the same state
    other = TokenStore(JsonFileStorage(path))
    assert await other.get() == "tok"

    await other.clear()
    assert await store.get() is None


async def test_json_file_storage_recovers_from_garbage(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[1, 2, 3]")
    storage = JsonFileStorage(path)

    assert await storage.get(TOKEN_KEY) is None
    await storage.set(TOKEN_KEY, "x")
    assert await storage.get(TOKEN_KEY) == "x"


async def test_redis_storage_namespaces_keys():
    client = AsyncMock()
    client.get.return_value = "tok"
    storage = RedisStorage(client, namespace="gg-test")

    assert await storage.get(TOKEN_KEY) == "tok"
    await storage.set(TOKEN_KEY, "tok2")
    await storage.delete(TOKEN_KEY)

    client.get.assert_awaited_once_with("gg-test:auth_token")
    client.set.assert_awaited_once_with("gg-test:auth_token", "tok2")
    client.delete.assert_awaited_once_with("gg-test:auth_token")


async def test_redis_storage_decodes_bytes():
    client = AsyncMock()
    client.get.return_value = b"tok"
    assert await RedisStorage(client).get(TOKEN_KEY) == "tok"


@pytest.mark.parametrize(
    ("backend", "expected"),
    [("memory", MemoryStorage), ("file", JsonFileStorage), ("redis", RedisStorage)],
)
def test_build_storage_selects_backend(tmp_path, backend, expected):
    settings = Settings(storage_backend=backend, storage_path=str(tmp_path / "s.json"))
    assert isinstance(build_storage(settings), expected)
