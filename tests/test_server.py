"""Tests for MCP tool dispatch."""

import asyncio
import json
from types import SimpleNamespace

import pytest
from mcp.server import Server
from mcp.types import CallToolRequest, CallToolRequestParams, ListToolsRequest

from credentials import TenantCredentials
from server import YouTubeMCPServer, server_from_env
from tool_catalog import TOOLS

from conftest import FakeResponse


@pytest.fixture
def server(session):
    srv = YouTubeMCPServer(TenantCredentials(api_key="test-key"))
    srv.youtube_api._session = session
    return srv


def call(server, name, arguments=None):
    result = asyncio.run(server.handle_call(name, arguments or {}))
    return result, result.content[0].text


def test_every_tool_has_a_handler(server):
    assert {tool.name for tool in TOOLS} == set(server.handlers)


def test_get_video_json(server, session):
    session.queue(FakeResponse(200, {"items": [{"id": "v1", "snippet": {"title": "Hi"}}]}))

    result, text = call(server, "youtube_get_video", {"videoId": "v1"})

    assert not result.isError
    assert json.loads(text) == {"id": "v1", "snippet": {"title": "Hi"}}
    assert session.last["params"]["part"] == "snippet,contentDetails,statistics,status"


def test_search_markdown(server, session):
    session.queue(FakeResponse(200, {
        "items": [{"id": {"kind": "youtube#video", "videoId": "v1"}, "snippet": {"title": "T"}}],
        "pageInfo": {"totalResults": 1},
    }))

    result, text = call(server, "youtube_search", {"query": "cats", "format": "markdown"})

    assert not result.isError
    assert text.startswith("## SearchResults")
    assert "| video | v1 | T | - |" in text


def test_not_found_is_error_result(server, session):
    session.queue(FakeResponse(200, {"items": []}))

    result, text = call(server, "youtube_get_video", {"videoId": "abc"})

    assert result.isError
    payload = json.loads(text)
    assert payload["error"] == "Error: Video with ID 'abc' not found"
    assert payload["details"]["code"] == "NOT_FOUND"


def test_validation_error_skips_network(server, session):
    result, text = call(server, "youtube_get_video", {})

    assert result.isError
    payload = json.loads(text)
    assert payload["details"]["code"] == "VALIDATION_ERROR"
    assert payload["details"]["details"] == {"videoId": ["Required"]}
    assert session.calls == []


def test_unknown_tool(server):
    result, text = call(server, "youtube_nope")

    assert result.isError
    assert text == "Unknown tool: youtube_nope"


def test_missing_credentials(session):
    srv = YouTubeMCPServer(TenantCredentials())
    srv.youtube_api._session = session

    result, text = call(srv, "youtube_list_languages")

    assert result.isError
    assert json.loads(text)["details"]["code"] == "AUTHENTICATION_FAILED"
    assert session.calls == []


def test_unexpected_exception_is_error_result(server, session):
    def boom(*args, **kwargs):
        raise RuntimeError("kaboom")

    session.request = boom

    result, text = call(server, "youtube_list_languages")

    assert result.isError
    assert json.loads(text)["details"] == {"name": "RuntimeError", "message": "kaboom"}


def test_mutation_confirmation(server, session):
    session.queue(FakeResponse(204))

    result, text = call(server, "youtube_rate_video", {"videoId": "v1", "rating": "like"})

    assert not result.isError
    assert json.loads(text) == {"success": True, "message": "Video v1 rated: like"}
    assert session.last["params"]["rating"] == "like"


def test_create_playlist_confirmation(server, session):
    session.queue(FakeResponse(200, {"id": "PL1"}))

    _, text = call(server, "youtube_create_playlist", {"title": "Mix"})

    assert json.loads(text) == {
        "success": True,
        "message": "Playlist created",
        "playlist": {"id": "PL1"},
    }


def test_moderation_message_counts_comments(server, session):
    session.queue(FakeResponse(204))

    _, text = call(server, "youtube_set_comment_moderation_status", {
        "commentIds": ["c1", "c2"],
        "moderationStatus": "published",
    })

    assert json.loads(text)["message"] == "Moderation status set to published for 2 comment(s)"
    assert session.last["params"]["banAuthor"] == "false"


def test_download_caption_returns_raw_text(server, session):
    session.queue(FakeResponse(200, text="1\n00:00:00,000 --> 00:00:01,000\nHi\n"))

    result, text = call(server, "youtube_download_caption", {"captionId": "cap1", "format": "srt"})

    assert not result.isError
    assert text.startswith("1\n00:00:00,000")
    assert session.last["params"]["tfmt"] == "srt"


def test_response_capped_by_character_limit(session):
    srv = YouTubeMCPServer(TenantCredentials(api_key="k"), character_limit=100)
    srv.youtube_api._session = session
    session.queue(FakeResponse(200, {"items": [{"id": str(i)} for i in range(50)]}))

    _, text = call(srv, "youtube_list_languages")

    assert len(text.split("\n\n[Response truncated")[0]) == 100
    assert "[Response truncated:" in text


def test_server_from_env(monkeypatch):
    monkeypatch.setenv("YOUTUBE_API_KEY", "env-key")
    monkeypatch.setenv("YOUTUBE_MCP_CHARACTER_LIMIT", "not-a-number")
    monkeypatch.setenv("YOUTUBE_MCP_TIMEOUT", "12.5")
    monkeypatch.delenv("YOUTUBE_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("YOUTUBE_MCP_SSL_BYPASS", raising=False)

    srv = server_from_env()

    assert srv.credentials.api_key == "env-key"
    assert srv.character_limit == 50000
    assert srv.youtube_api.timeout == 12.5
    assert srv.youtube_api.ssl_bypass is False


def test_list_tools_handler_registered(server):
    # The low-level server keys request handlers by request type
    assert ListToolsRequest in server.server.request_handlers
    assert CallToolRequest in server.server.request_handlers


def dispatch(server, name, arguments):
    """Go through the MCP request handler, as a connected client would."""
    handler = server.server.request_handlers[CallToolRequest]
    request = CallToolRequest(
        method="tools/call",
        params=CallToolRequestParams(name=name, arguments=arguments),
    )
    result = asyncio.run(handler(request)).root
    return result, result.content[0].text


def test_protocol_validation_error_payload(server, session):
    result, text = dispatch(server, "youtube_search", {"query": "x", "maxResults": 500})

    assert result.isError
    payload = json.loads(text)
    assert payload["details"]["code"] == "VALIDATION_ERROR"
    assert payload["details"]["details"] == {"maxResults": ["Must be <= 50"]}
    assert session.calls == []


def test_protocol_call_success(server, session):
    session.queue(FakeResponse(200, {"items": [{"id": "en"}]}))

    result, text = dispatch(server, "youtube_list_languages", {})

    assert not result.isError
    assert json.loads(text)["count"] == 1


def test_call_with_tenant_credentials(server, session):
    result = asyncio.run(server.handle_call(
        "youtube_list_regions",
        {},
        TenantCredentials(access_token="tenant-token"),
    ))

    assert not result.isError
    assert session.last["headers"]["Authorization"] == "Bearer tenant-token"
    assert "key" not in session.last["params"]


def test_request_headers_override_configured_credentials(server, session, monkeypatch):
    request = SimpleNamespace(headers={"x-youtube-access-token": "header-token"})
    monkeypatch.setattr(
        Server, "request_context", property(lambda self: SimpleNamespace(request=request))
    )

    result, _ = dispatch(server, "youtube_list_regions", {})

    assert not result.isError
    assert session.last["headers"]["Authorization"] == "Bearer header-token"


def test_stdio_request_uses_configured_credentials(server, session, monkeypatch):
    monkeypatch.setattr(
        Server, "request_context", property(lambda self: SimpleNamespace(request=None))
    )

    dispatch(server, "youtube_list_regions", {})

    assert session.last["params"]["key"] == "test-key"


def test_search_passes_owner_flags(server, session):
    call(server, "youtube_search", {"query": "q", "type": "video", "forMine": True})

    assert session.last["params"]["forMine"] == "true"
