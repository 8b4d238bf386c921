"""Tests for tenant credential resolution."""

import pytest

from api_errors import ErrorKind, YouTubeAPIError
from credentials import (
    TenantCredentials,
    credentials_from_env,
    parse_credentials,
    validate_credentials,
)


def test_parse_both_headers():
    creds = parse_credentials({
        "X-YouTube-Access-Token": "tok",
        "X-YouTube-API-Key": "key",
    })

    assert creds == TenantCredentials(access_token="tok", api_key="key")
    assert creds.has_oauth


def test_parse_headers_case_insensitive():
    creds = parse_credentials({"x-youtube-api-key": "key"})

    assert creds.api_key == "key"
    assert creds.access_token is None
    assert not creds.has_oauth


def test_parse_blank_headers_are_absent():
    creds = parse_credentials({"X-YouTube-Access-Token": "   ", "X-YouTube-API-Key": ""})

    assert creds == TenantCredentials()


def test_parse_no_headers():
    assert parse_credentials({}) == TenantCredentials()


def test_credentials_from_env():
    creds = credentials_from_env({"YOUTUBE_API_KEY": "key", "YOUTUBE_ACCESS_TOKEN": ""})

    assert creds.api_key == "key"
    assert creds.access_token is None


def test_validate_accepts_either():
    validate_credentials(TenantCredentials(api_key="key"))
    validate_credentials(TenantCredentials(access_token="tok"))


def test_validate_rejects_empty():
    with pytest.raises(YouTubeAPIError) as exc:
        validate_credentials(TenantCredentials())

    assert exc.value.kind is ErrorKind.AUTHENTICATION
    assert exc.value.status_code == 401
    assert "X-YouTube-Access-Token" in exc.value.message


def test_repr_masks_secrets():
    text = repr(TenantCredentials(access_token="secret-token", api_key="secret-key"))

    assert "secret" not in text
    assert "***" in text
