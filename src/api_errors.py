"""
YouTube API errors - One error type tagged by kind.

Every failure the client surfaces is a YouTubeAPIError carrying an ErrorKind,
an HTTP-like status, a stable code and a retryable flag.
"""

from enum import Enum
from typing import Any, Optional

import requests


DEFAULT_RETRY_AFTER = 60


class ErrorKind(Enum):
    """Failure modes of an upstream call."""

    AUTHENTICATION = "AUTHENTICATION_FAILED"
    FORBIDDEN = "FORBIDDEN"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMIT = "RATE_LIMIT_EXCEEDED"
    VALIDATION = "VALIDATION_ERROR"
    API = "YOUTUBE_ERROR"


# kind -> (display name, default status, retryable)
_KIND_INFO = {
    ErrorKind.AUTHENTICATION: ("AuthenticationError", 401, False),
    ErrorKind.FORBIDDEN: ("ForbiddenError", 403, False),
    ErrorKind.QUOTA_EXCEEDED: ("QuotaExceededError", 403, False),
    ErrorKind.NOT_FOUND: ("NotFoundError", 404, False),
    ErrorKind.RATE_LIMIT: ("RateLimitError", 429, True),
    ErrorKind.VALIDATION: ("ValidationError", 400, False),
    ErrorKind.API: ("YouTubeAPIError", None, False),
}


class YouTubeAPIError(Exception):
    """Error raised for any failed YouTube Data API interaction."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.API,
        status_code: Optional[int] = None,
        retry_after_seconds: Optional[int] = None,
        details: Optional[dict[str, list[str]]] = None,
    ):
        super().__init__(message)
        name, default_status, retryable = _KIND_INFO[kind]
        self.message = message
        self.kind = kind
        self.name = name
        self.code = kind.value
        self.status_code = status_code if status_code is not None else default_status
        self.retryable = retryable
        self.retry_after_seconds = retry_after_seconds
        self.details = details or {}

    def __repr__(self) -> str:
        return f"YouTubeAPIError({self.kind.name}, {self.status_code}, {self.message!r})"

    @classmethod
    def authentication(cls, message: str) -> "YouTubeAPIError":
        return cls(message, ErrorKind.AUTHENTICATION)

    @classmethod
    def forbidden(cls, message: str) -> "YouTubeAPIError":
        return cls(message, ErrorKind.FORBIDDEN)

    @classmethod
    def quota_exceeded(cls, message: str) -> "YouTubeAPIError":
        return cls(message, ErrorKind.QUOTA_EXCEEDED)

    @classmethod
    def not_found(cls, entity_type: str, entity_id: str) -> "YouTubeAPIError":
        return cls(f"{entity_type} with ID '{entity_id}' not found", ErrorKind.NOT_FOUND)

    @classmethod
    def rate_limit(
        cls,
        message: str,
        retry_after_seconds: int = DEFAULT_RETRY_AFTER,
    ) -> "YouTubeAPIError":
        return cls(message, ErrorKind.RATE_LIMIT, retry_after_seconds=retry_after_seconds)

    @classmethod
    def validation(
        cls,
        message: str,
        details: Optional[dict[str, list[str]]] = None,
    ) -> "YouTubeAPIError":
        return cls(message, ErrorKind.VALIDATION, details=details)


def parse_retry_after(value: Optional[str]) -> int:
    """Parse a Retry-After header given in seconds, defaulting to 60."""
    if not value:
        return DEFAULT_RETRY_AFTER
    try:
        return int(value.strip())
    except ValueError:
        return DEFAULT_RETRY_AFTER


def is_retryable(error: object) -> bool:
    """Whether the caller may reasonably retry the failed call."""
    if isinstance(error, YouTubeAPIError):
        return error.retryable
    if isinstance(error, (requests.Timeout, requests.ConnectionError)):
        return True
    return False


def error_details(error: object) -> dict[str, Any]:
    """
    Describe an error as a plain dict.

    YouTubeAPIError carries its kind-specific fields; other exceptions only
    their type name and message; anything else is stringified.
    """
    if isinstance(error, YouTubeAPIError):
        info: dict[str, Any] = {
            "name": error.name,
            "message": error.message,
            "code": error.code,
            "statusCode": error.status_code,
            "retryable": error.retryable,
        }
        if error.kind is ErrorKind.RATE_LIMIT:
            info["retryAfterSeconds"] = error.retry_after_seconds
        if error.kind is ErrorKind.VALIDATION:
            info["details"] = error.details
        return info

    if isinstance(error, BaseException):
        info = {
            "name": type(error).__name__,
            "message": str(error),
        }
        if is_retryable(error):
            info["retryable"] = True
        return info

    return {"error": str(error)}
