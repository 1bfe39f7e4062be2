"""HTTP layer: dispatcher, envelope normalizer, path classifier, form encoding."""

from greengroves.client.api_client import ApiClient
from greengroves.client.classifier import is_protected
from greengroves.client.envelope import parse_page, unwrap
from greengroves.client.forms import FileUpload, build_form, has_files

__all__ = [
    "ApiClient",
    "FileUpload",
    "build_form",
    "has_files",
    "is_protected",
    "parse_page",
    "unwrap",
]
