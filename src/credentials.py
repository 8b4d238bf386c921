"""
Tenant credentials - Resolve the access token or API key for a call.

Credentials come either from inbound request headers or from the
environment when the server runs over stdio.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from api_errors import YouTubeAPIError


ACCESS_TOKEN_HEADER = "X-YouTube-Access-Token"
API_KEY_HEADER = "X-YouTube-API-Key"

ACCESS_TOKEN_ENV = "YOUTUBE_ACCESS_TOKEN"
API_KEY_ENV = "YOUTUBE_API_KEY"


@dataclass(frozen=True)
class TenantCredentials:
    """Per-call authentication material."""

    access_token: Optional[str] = None
    api_key: Optional[str] = None

    @property
    def has_oauth(self) -> bool:
        return bool(self.access_token)

    def __repr__(self) -> str:
        # Never echo secrets into logs or tracebacks
        return (
            f"TenantCredentials(access_token={'***' if self.access_token else None}, "
            f"api_key={'***' if self.api_key else None})"
        )


def _lookup(headers: Mapping[str, str], name: str) -> Optional[str]:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted and value:
            return value.strip() or None
    return None


def parse_credentials(headers: Mapping[str, str]) -> TenantCredentials:
    """Parse credentials from request headers. Never fails."""
    return TenantCredentials(
        access_token=_lookup(headers, ACCESS_TOKEN_HEADER),
        api_key=_lookup(headers, API_KEY_HEADER),
    )


def credentials_from_env(environ: Optional[Mapping[str, str]] = None) -> TenantCredentials:
    """Read credentials from YOUTUBE_ACCESS_TOKEN / YOUTUBE_API_KEY."""
    environ = os.environ if environ is None else environ
    return TenantCredentials(
        access_token=environ.get(ACCESS_TOKEN_ENV) or None,
        api_key=environ.get(API_KEY_ENV) or None,
    )


def validate_credentials(credentials: TenantCredentials) -> None:
    """Reject credentials carrying neither an access token nor an API key."""
    if not credentials.access_token and not credentials.api_key:
        raise YouTubeAPIError.authentication(
            f"Missing credentials. Provide either {ACCESS_TOKEN_HEADER} or "
            f"{API_KEY_HEADER} header ({ACCESS_TOKEN_ENV} or {API_KEY_ENV} "
            "environment variable)."
        )
