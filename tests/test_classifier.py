import pytest

from greengroves.client.classifier import is_protected


@pytest.mark.parametrize(
    "path",
    [
        "/users",
        "/users/4",
        "/users?page=2",
        "/admin/articles",
        "/admin/upload/image",
        "/auth/logout",
        "/auth/me",
        "/auth/refresh",
    ],
)
def test_protected_paths(path):
    assert is_protected(path)


@pytest.mark.parametrize(
    "path",
    [
        "/articles",
        "/products?category=tool",
        "/auth/login",
        "/contact",
        "/about-us/active",
        "/user/profile",
        "/admin",
    ],
)
def test_public_paths(path):
    assert not is_protected(path)
