"""Which backend paths need a valid session."""

PROTECTED_PATH_MARKERS: tuple[str, ...] = (
    "/users",
    "/admin/",
    "/auth/logout",
    "/auth/me",
    "/auth/refresh",
)


def is_protected(path: str) -> bool:
    """True if a request to ``path`` requires a valid bearer token.

    A 401 from a protected path forces a local logout; a 401 from any other
    path is just an error.
    """
    return any(marker in path for marker in PROTECTED_PATH_MARKERS)
