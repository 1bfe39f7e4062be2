"""Green Groves client error hierarchy."""

from typing import Any


class GreenGrovesError(Exception):
    """Base error for all client operations."""


class ApiError(GreenGrovesError):
    """The backend answered with a non-2xx status."""

    def __init__(self, status: int, message: str, payload: Any = None) -> None:
        self.status = status
        self.message = message
        self.payload = payload
        super().__init__(message)


class ValidationError(ApiError):
    """Backend rejected the input (422). ``errors`` maps field -> messages."""

    def __init__(
        self,
        message: str,
        errors: dict[str, list[str]] | None = None,
        payload: Any = None,
    ) -> None:
        self.errors = errors or {}
        super().__init__(422, message, payload)


class AuthenticationError(ApiError):
    """Bearer token missing, expired or revoked (401)."""

    def __init__(self, message: str = "Authentication failed", payload: Any = None) -> None:
        super().__init__(401, message, payload)


class NotFoundError(ApiError):
    """Requested resource does not exist (404)."""

    def __init__(self, message: str = "Not found", payload: Any = None) -> None:
        super().__init__(404, message, payload)


class LoggedOutError(GreenGrovesError):
    """Protected endpoint called after an explicit logout; no request was sent."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"User has logged out, refusing to call {path}")


class NetworkError(GreenGrovesError):
    """No response at all: DNS, connection refused, timeout..."""


class UnknownResourceError(GreenGrovesError):
    """A generic item helper was given a content type it does not know."""

    def __init__(self, resource_type: str) -> None:
        self.resource_type = resource_type
        super().__init__(f"Unknown content type: {resource_type}")


class UnexpectedResponseError(GreenGrovesError):
    """A 2xx response whose body does not have the expected shape."""

    def __init__(self, path: str, body: object) -> None:
        self.path = path
        self.body = body
        super().__init__(f"Unexpected response shape from {path}: {type(body).__name__}")


class UploadError(GreenGrovesError):
    """Upload endpoint answered 2xx but reported ``success: false``."""
