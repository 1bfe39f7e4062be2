"""Laravel response envelope handling.

Single resources come back as ``{"data": {...}}`` or as a bare object,
collections as ``{"data": [...], "meta": {...}}``. Upload endpoints answer
``{"success": ..., "message": ..., "data": {...}}`` and callers need the
whole thing.
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from greengroves.models.base import Page, PaginationMeta

T = TypeVar("T")

UPLOAD_PATH_MARKER = "/upload/"

_PAGINATION_KEYS = ("current_page", "last_page", "per_page", "total")


def unwrap(path: str, body: Any) -> Any:
    """Strip the ``data`` envelope unless ``path`` is an upload endpoint."""
    if UPLOAD_PATH_MARKER in path:
        return body
    if isinstance(body, dict) and "data" in body:
        return body["data"]
    return body


def parse_page(body: Any, item_parser: Callable[[Any], T]) -> Page[T]:
    """Build a Page from a raw (not unwrapped) collection response.

    Accepts:
    - resource collections: {"data": [...], "meta": {"current_page": ...}}
    - flat paginators:      {"data": [...], "current_page": ..., "total": ...}
    - bare lists, treated as a single complete page
    """
    if isinstance(body, list):
        items = body
        meta = PaginationMeta.single_page(len(items))
    elif isinstance(body, dict):
        data = body.get("data", [])
        # Some endpoints double-wrap: {"data": {"data": [...], "total": ...}}
        if isinstance(data, dict) and "data" in data:
            return parse_page(data, item_parser)
        items = data if isinstance(data, list) else [data]
        if isinstance(body.get("meta"), dict):
            meta = PaginationMeta.model_validate(body["meta"])
        elif any(key in body for key in _PAGINATION_KEYS):
            meta = PaginationMeta.model_validate(body)
        else:
            meta = PaginationMeta.single_page(len(items))
    else:
        items = []
        meta = PaginationMeta.single_page(0)

    return Page(items=[item_parser(item) for item in items], meta=meta)
