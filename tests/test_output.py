"""Tests for JSON/markdown rendering and error formatting."""

import json

import requests

from api_errors import YouTubeAPIError
from output import (
    TITLE_WIDTH,
    format_confirmation,
    format_error,
    format_key,
    format_response,
    limit_text,
    to_json,
    truncate,
)
from youtube_api import Page


def _video(video_id, title="Title"):
    return {
        "id": video_id,
        "snippet": {"title": title, "channelTitle": "Chan"},
        "statistics": {"viewCount": "100"},
        "contentDetails": {"duration": "PT1M"},
    }


def test_truncate():
    assert truncate("short", 10) == "short"
    cut = truncate("x" * 100, 40)
    assert len(cut) == 40
    assert cut.endswith("...")


def test_format_key():
    assert format_key("viewCount") == "View Count"
    assert format_key("id") == "Id"


def test_json_page_envelope():
    page = Page(items=[{"id": "a"}], total_results=1, next_page_token="N")

    data = json.loads(format_response(page, "json", "videos"))

    assert data == {
        "items": [{"id": "a"}],
        "count": 1,
        "totalResults": 1,
        "hasMore": True,
        "nextPageToken": "N",
    }


def test_markdown_empty_page():
    text = format_response(Page(), "markdown", "videos")

    assert text.startswith("## Videos")
    assert "**Showing:** 0" in text
    assert "_No items found._" in text
    assert "|" not in text


def test_markdown_videos_table():
    page = Page(items=[_video("v1"), _video("v2")], total_results=120, next_page_token="ABC")

    text = format_response(page, "markdown", "videos")

    assert "**Total:** 120 | **Showing:** 2" in text
    assert "nextPageToken: `ABC`" in text
    assert "| ID | Title | Channel | Views | Duration |" in text
    assert "| v1 | Title | Chan | 100 | PT1M |" in text


def test_markdown_title_truncated():
    page = Page(items=[_video("v1", "T" * 100)])

    text = format_response(page, "markdown", "videos")

    row = [line for line in text.splitlines() if line.startswith("| v1")][0]
    title_cell = row.split(" | ")[1]
    assert len(title_cell) == TITLE_WIDTH
    assert title_cell.endswith("...")


def test_markdown_missing_fields_render_dash():
    page = Page(items=[{"id": "v1"}])

    text = format_response(page, "markdown", "videos")

    assert "| v1 | - | - | - | - |" in text


def test_markdown_escapes_pipes_and_newlines():
    page = Page(items=[_video("v1", "a|b\nc")])

    text = format_response(page, "markdown", "videos")

    assert "a\\|b c" in text


def test_markdown_search_results():
    page = Page(items=[{
        "id": {"kind": "youtube#channel", "channelId": "UC1"},
        "snippet": {"title": "A channel", "channelTitle": "A channel"},
    }])

    text = format_response(page, "markdown", "searchResults")

    assert "| channel | UC1 | A channel | A channel |" in text


def test_markdown_generic_fallback():
    page = Page(items=[
        {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5, "f": 6},
        {"a": "x"},
    ])

    text = format_response(page, "markdown", "widgets")

    assert "## Widgets" in text
    assert "| a | b | c | d | e |" in text
    assert "f" not in text.split("\n")[4]
    assert "| x | - | - | - | - |" in text


def test_markdown_single_object():
    video = {"id": "v1", "kind": "youtube#video", "snippet": {"title": "Hi"}, "etag": None}

    text = format_response(video, "markdown", "video")

    assert text.startswith("## Video")
    assert "- **Id:** v1" in text
    assert "- **Kind:** youtube#video" in text
    assert "- **Snippet:**" in text
    assert "```json" in text
    assert "Etag" not in text


def test_markdown_object_strips_plural():
    text = format_response({"id": "x"}, "markdown", "channels")

    assert text.startswith("## Channel\n")


def test_format_confirmation():
    data = json.loads(format_confirmation("Playlist created", playlist={"id": "PL1"}))

    assert data == {"success": True, "message": "Playlist created", "playlist": {"id": "PL1"}}


def test_to_json_unwraps_page():
    assert json.loads(to_json(Page(items=[1, 2])))["count"] == 2


def test_format_error_not_found():
    payload = json.loads(format_error(YouTubeAPIError.not_found("Video", "abc")))

    assert payload["error"] == "Error: Video with ID 'abc' not found"
    assert payload["details"]["name"] == "NotFoundError"
    assert payload["details"]["code"] == "NOT_FOUND"
    assert payload["details"]["statusCode"] == 404
    assert payload["details"]["retryable"] is False


def test_format_error_rate_limit_is_retryable():
    payload = json.loads(format_error(YouTubeAPIError.rate_limit("Rate limit exceeded", 30)))

    assert payload["error"].endswith("(retryable)")
    assert payload["details"]["retryAfterSeconds"] == 30


def test_format_error_validation_details():
    error = YouTubeAPIError.validation("Invalid arguments", {"videoId": ["Required"]})

    payload = json.loads(format_error(error))

    assert payload["details"]["details"] == {"videoId": ["Required"]}
    assert payload["details"]["statusCode"] == 400


def test_format_error_generic_exception():
    payload = json.loads(format_error(ValueError("bad")))

    assert payload["error"] == "Error: bad"
    assert payload["details"] == {"name": "ValueError", "message": "bad"}


def test_format_error_network_exception():
    payload = json.loads(format_error(requests.Timeout("slow")))

    assert payload["error"] == "Error: slow (retryable)"
    assert payload["details"]["retryable"] is True


def test_format_error_non_exception():
    payload = json.loads(format_error("plain"))

    assert payload == {"error": "Error: plain", "details": {"error": "plain"}}


def test_limit_text():
    assert limit_text("abc", 10) == "abc"

    limited = limit_text("x" * 100, 40)

    assert limited.startswith("x" * 40 + "\n")
    assert "60 of 100 characters omitted" in limited
