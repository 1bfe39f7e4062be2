"""Async client for the Green Groves gardening site API."""

from greengroves.app import GreenGroves
from greengroves.client import ApiClient, FileUpload
from greengroves.config.settings import Settings, get_settings
from greengroves.errors import (
    ApiError,
    AuthenticationError,
    GreenGrovesError,
    LoggedOutError,
    NetworkError,
    NotFoundError,
    UnexpectedResponseError,
    UnknownResourceError,
    UploadError,
    ValidationError,
)
from greengroves.storage import JsonFileStorage, MemoryStorage, TokenStore

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiError",
    "AuthenticationError",
    "FileUpload",
    "GreenGroves",
    "GreenGrovesError",
    "JsonFileStorage",
    "LoggedOutError",
    "MemoryStorage",
    "NetworkError",
    "NotFoundError",
    "Settings",
    "TokenStore",
    "UnexpectedResponseError",
    "UnknownResourceError",
    "UploadError",
    "ValidationError",
    "get_settings",
]
