"""Multipart form building for create/update calls that carry files."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Mapping

import aiohttp

from greengroves.models.files import FileUpload

METHOD_OVERRIDE_FIELD = "_method"


def has_files(data: Mapping[str, Any] | None) -> bool:
    """True if any top-level value is a FileUpload."""
    if not data:
        return False
    return any(isinstance(value, FileUpload) for value in data.values())


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        # Laravel's boolean rule accepts 1/0, not true/false
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str)
    return str(value)


def build_form(data: Mapping[str, Any], method_override: str | None = None) -> aiohttp.FormData:
    """Encode ``data`` as multipart form data.

    None values are dropped. With ``method_override`` a ``_method`` field is
    added first so Laravel routes the POST as PUT/PATCH.
    """
    form = aiohttp.FormData()
    if method_override:
        form.add_field(METHOD_OVERRIDE_FIELD, method_override.upper())
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, FileUpload):
            form.add_field(
                key,
                value.content,
                filename=value.filename,
                content_type=value.content_type,
            )
        else:
            form.add_field(key, _form_value(value))
    return form
