"""Shared fakes for the YouTube Data API client."""

import json
from typing import Any, Optional

import pytest

from credentials import TenantCredentials
from youtube_api import YouTubeAPI


class FakeResponse:
    """Just enough of requests.Response for the client."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        text: Optional[str] = None,
        headers: Optional[dict] = None,
    ):
        self.status_code = status_code
        self.headers = headers or {}
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text
        self.content = text.encode("utf-8")

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Records every request and replays queued responses in order."""

    def __init__(self, *responses: FakeResponse):
        self.responses = list(responses)
        self.calls: list[dict] = []

    def queue(self, *responses: FakeResponse) -> None:
        self.responses.extend(responses)

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            return FakeResponse(200, {"items": []})
        return self.responses.pop(0)

    @property
    def last(self) -> dict:
        return self.calls[-1]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def api(session):
    client = YouTubeAPI(TenantCredentials(api_key="test-key"))
    client._session = session
    return client


@pytest.fixture
def oauth_api(session):
    client = YouTubeAPI(TenantCredentials(access_token="test-token"))
    client._session = session
    return client
