import pytest

from greengroves.app import GreenGroves
from greengroves.client.api_client import ApiClient
from greengroves.errors import LoggedOutError, NetworkError, UnknownResourceError, UploadError
from greengroves.models import Article, Book, ContentStatus, FileUpload, Tool, Video
from greengroves.services.base import ResourceService
from greengroves.storage import MemoryStorage, TokenStore


# Content


async def test_admin_article_list_returns_inner_items(gg, backend):
    backend.on(
        "GET",
        "/admin/articles?status=published",
        json={"data": [{"id": 1, "title": "Roses", "status": "published"}], "meta": {"total": 1}},
    )

    articles = await gg.articles.list(status=ContentStatus.PUBLISHED)

    assert [a.title for a in articles] == ["Roses"]
    assert isinstance(articles[0], Article)


async def test_content_list_maps_sort_params(gg, backend):
    backend.on("GET", "/admin/videos", json={"data": []})

    await gg.videos.list(search="soil", sort_by="created_at", sort_order="desc", per_page=5)

    assert backend.last.path == "/admin/videos?search=soil&sortBy=created_at&sortOrder=desc&per_page=5"


async def test_public_listing_drops_archived(gg, backend):
    backend.on(
        "GET",
        "/videos",
        json={
            "data": [
                {"id": 1, "title": "Live", "status": "published"},
                {"id": 2, "title": "Old", "status": "archived"},
            ]
        },
    )

    videos = await gg.videos.list_public()

    assert [v.id for v in videos] == [1]
    assert isinstance(videos[0], Video)


async def test_list_page_keeps_meta(gg, backend):
    backend.on(
        "GET",
        "/admin/articles?page=2",
        json={
            "data": [{"id": 11, "title": "Mulch"}],
            "meta": {"current_page": 2, "last_page": 3, "per_page": 10, "total": 21},
        },
    )

    page = await gg.articles.list_page(page=2)

    assert page.items[0].title == "Mulch"
    assert page.meta.total == 21
    assert page.meta.has_more


async def test_set_status_is_a_json_put(gg, backend):
    backend.on("PUT", "/admin/articles/4", json={"data": {"id": 4, "title": "x", "status": "archived"}})

    article = await gg.articles.set_status(4, "archived")

    assert backend.last.json == {"status": "archived"}
    assert article.status is ContentStatus.ARCHIVED


# Products


async def test_product_create_is_json_post(gg, backend):
    backend.on("POST", "/products", json={"data": {"id": 9, "name": "Trowel", "category": "tool"}})

    product = await gg.products.create({"name": "Trowel", "category": "tool"})

    assert isinstance(product, Tool)
    assert backend.last.method == "POST"
    assert backend.last.content_type == "application/json"
    assert backend.last.json == {"name": "Trowel", "category": "tool"}


async def test_product_update_with_file_uses_method_override(gg, backend):
    backend.on("POST", "/admin/products/7", json={"data": {"id": 7, "name": "Trowel", "category": "tool"}})
    image = FileUpload("trowel.jpg", b"jpeg-bytes", "image/jpeg")

    await gg.products.update(7, {"name": "Trowel", "image": image, "is_featured": True})

    request = backend.last
    assert request.method == "POST"
    assert request.path == "/admin/products/7"
    assert request.content_type == "multipart/form-data"
    assert request.form == {"_method": "PUT", "name": "Trowel", "image": "trowel.jpg", "is_featured": "1"}
    assert "application/json" not in request.headers.get("content-type", "")


async def test_product_update_without_file_is_put(gg, backend):
    backend.on("PUT", "/admin/products/7", json={"data": {"id": 7, "name": "Spade", "category": "tool"}})

    await gg.products.update(7, Tool(name="Spade"))

    assert backend.last.method == "PUT"
    assert backend.last.json == {"name": "Spade", "category": "tool"}


async def test_partial_article_update_keeps_status_and_featured_untouched(gg, backend):
    backend.on("PUT", "/admin/articles/4", json={"data": {"id": 4, "title": "New title", "status": "published"}})

    await gg.articles.update(4, Article(title="New title"))

    assert backend.last.json == {"title": "New title"}
    assert "status" not in backend.last.json
    assert "is_featured" not in backend.last.json


async def test_alias_forces_category_on_writes(gg, backend):
    backend.on("POST", "/products", json={"data": {"id": 1, "title": "Botany", "category": "book"}})

    book = await gg.books.create({"name": "Botany", "category": "tool"})

    assert backend.last.json["category"] == "book"
    assert isinstance(book, Book)


async def test_alias_list_filters_by_category(gg, backend):
    backend.on(
        "GET",
        "/products?category=pot",
        json={
            "data": [
                {"id": 1, "name": "Terracotta", "category": "pot"},
                {"id": 2, "name": "Stray", "category": "tool"},
            ]
        },
    )

    pots = await gg.pots.list()

    assert [p.name for p in pots] == ["Terracotta"]


async def test_alias_get_fills_missing_category(gg, backend):
    backend.on("GET", "/products/3", json={"data": {"id": 3, "name": "Pruner"}})

    tool = await gg.tools.get(3)

    assert isinstance(tool, Tool)


# Lenient lists


async def test_network_failure_raises_by_default():
    api = ApiClient("http://127.0.0.1:1/api", TokenStore(MemoryStorage()))
    async with GreenGroves(api) as gg:
        with pytest.raises(NetworkError):
            await gg.articles.list()


async def test_lenient_lists_return_empty_on_network_failure():
    api = ApiClient("http://127.0.0.1:1/api", TokenStore(MemoryStorage()))
    async with GreenGroves(api, lenient_lists=True) as gg:
        assert await gg.articles.list() == []
        assert await gg.tools.list() == []
        with pytest.raises(NetworkError):
            await gg.articles.get(1)


async def test_flat_paginator_list(gg, backend):
    backend.on(
        "GET",
        "/users",
        json={"data": {"data": [{"id": 1, "name": "Ada", "email": "a@x.io"}], "current_page": 1}},
    )

    users = await gg.users.list()

    assert users[0].email == "a@x.io"


# Auth


async def test_login_stores_token_and_user(gg, backend, token_store):
    await token_store.mark_logged_out()
    backend.on(
        "POST",
        "/auth/login",
        json={"data": {"token": "tok", "user": {"id": 1, "name": "Ada", "email": "ada@example.com"}}},
    )

    session = await gg.auth.login("ada@example.com", "secret")

    assert session.token == "tok"
    assert backend.last.json == {"email": "ada@example.com", "password": "secret"}
    assert await token_store.get() == "tok"
    assert not await token_store.is_logged_out()
    assert (await gg.auth.current_user()).name == "Ada"


async def test_logout_revokes_and_blocks_protected_calls(gg, backend, token_store):
    await token_store.set("tok")
    backend.on("POST", "/auth/logout", json={"message": "Logged out"})

    await gg.auth.logout()

    assert backend.last.path == "/auth/logout"
    assert backend.last.headers["authorization"] == "Bearer tok"
    assert await token_store.get() is None
    assert await token_store.is_logged_out()
    with pytest.raises(LoggedOutError):
        await gg.articles.list()
    assert len(backend.requests) == 1


async def test_logout_clears_local_state_when_server_fails(gg, backend, token_store):
    await token_store.set("tok")
    backend.on("POST", "/auth/logout", status=500, json={"message": "boom"})

    await gg.auth.logout()

    assert await token_store.get() is None
    assert await token_store.is_logged_out()


async def test_me_unwraps_user_key(gg, backend, token_store):
    await token_store.set("tok")
    backend.on("GET", "/auth/me", json={"user": {"id": 2, "name": "Mai", "email": "mai@example.com"}})

    user = await gg.auth.me()

    assert user.name == "Mai"
    assert (await token_store.get_user())["email"] == "mai@example.com"


# Contact, site, items


async def test_contact_send_and_mark_read(gg, backend):
    backend.on("POST", "/contact", json={"data": {"id": 5, "name": "Ada", "email": "a@x.io", "subject": "Hello", "message": "Hi"}})
    backend.on("PUT", "/contact-messages/5", json={"data": {"id": 5, "name": "Ada", "email": "a@x.io", "subject": "Hello", "message": "Hi", "status": "read"}})

    sent = await gg.contact.send({"name": "Ada", "email": "a@x.io", "message": "Hi", "subject": None})
    assert sent.id == 5
    assert backend.last.json == {"name": "Ada", "email": "a@x.io", "message": "Hi"}

    read = await gg.contact.mark_read(5)
    assert read.status.value == "read"
    assert backend.last.json == {"status": "read"}


async def test_staff_reorder_from_mapping(gg, backend):
    backend.on("POST", "/admin/staff-members/reorder", json={"message": "ok"})

    await gg.staff_members.reorder({3: 1, 8: 2})

    assert backend.last.json == {
        "orders": [{"id": 3, "display_order": 1}, {"id": 8, "display_order": 2}]
    }


async def test_hero_sections_active(gg, backend):
    backend.on("GET", "/hero-sections/active", json={"data": [{"id": 1, "title": "Spring", "is_active": True}]})

    active = await gg.hero_sections.get_active()

    assert [h.title for h in active] == ["Spring"]


async def test_items_reject_unknown_type(gg, backend):
    with pytest.raises(UnknownResourceError, match="Unknown content type: gnomes"):
        await gg.items.create_item("gnomes", {"name": "x"})
    assert backend.requests == []


async def test_items_update_by_type(gg, backend):
    backend.on("PUT", "/about-us/2", json={"data": {"id": 2}})

    assert await gg.items.update_item("about-us", 2, {"title": "Us"}) == {"id": 2}


def test_resource_lookup(gg):
    assert gg.resource("about-us") is gg.about_us
    assert isinstance(gg.resource("tools"), ResourceService)
    with pytest.raises(KeyError):
        gg.resource("auth")
    with pytest.raises(KeyError):
        gg.resource("api")
    with pytest.raises(KeyError):
        gg.resource("settings")


# Uploads and interactions


async def test_upload_image_keeps_envelope(gg, backend):
    backend.on(
        "POST",
        "/admin/upload/image",
        json={"success": True, "message": "Uploaded", "data": {"url": "https://img/p.png", "public_id": "p"}},
    )

    result = await gg.uploads.upload_image(FileUpload("p.png", b"png", "image/png"), folder="avatars")

    assert result.file.url == "https://img/p.png"
    assert backend.last.form == {"file": "p.png", "folder": "avatars", "model_type": "video"}


async def test_upload_failure_raises(gg, backend):
    backend.on("POST", "/admin/upload/image", json={"success": False, "message": "Too large"})

    with pytest.raises(UploadError, match="Too large"):
        await gg.uploads.upload_image(FileUpload("p.png", b"png", "image/png"))


async def test_rating_out_of_range_is_rejected(gg, backend):
    with pytest.raises(ValueError):
        await gg.interactions.rate("article", 1, 6)
    assert backend.requests == []


async def test_toggle_like(gg, backend):
    backend.on("POST", "/interactions/like", json={"success": True, "liked": True, "likes": 4})

    result = await gg.interactions.toggle_like("video", 3)

    assert result.liked is True
    assert result.likes == 4
    assert backend.last.json == {"content_type": "video", "content_id": 3}


async def test_dashboard_stats_camel_case(gg, backend):
    backend.on("GET", "/admin/dashboard/stats", json={"data": {"totalUsers": 12, "avgRating": 4.5}})

    stats = await gg.dashboard.stats()

    assert stats.total_users == 12
    assert stats.avg_rating == 4.5
