"""
Output Formatting - Render tool results as JSON or markdown text.

Paginated results render as a per-entity markdown table, single resources
as a bulleted field list. Errors render as a JSON payload with details.
"""

import json
import re
from typing import Any, Callable, Literal, Optional

from api_errors import YouTubeAPIError, error_details, is_retryable
from youtube_api import Page


DEFAULT_CHARACTER_LIMIT = 50000
TITLE_WIDTH = 40
TEXT_WIDTH = 50

ResponseFormat = Literal["json", "markdown"]


def truncate(text: str, max_length: int) -> str:
    """Cut text to max_length characters, ending with an ellipsis when cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length - 3] + "..."


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def format_key(key: str) -> str:
    """camelCase -> Title Case."""
    spaced = re.sub(r"([A-Z])", r" \1", key)
    return capitalize(spaced).strip()


def _dig(data: Any, *path: str) -> Any:
    """Walk nested dicts, returning None at the first missing step."""
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _cell(value: Any, max_length: Optional[int] = None) -> str:
    """Render a table cell: '-' for empty, one line, pipes escaped."""
    if value is None or value == "":
        return "-"
    if isinstance(value, bool):
        text = "yes" if value else "no"
    elif isinstance(value, (dict, list)):
        text = json.dumps(value, ensure_ascii=False)
    else:
        text = str(value)
    text = text.replace("\r", " ").replace("\n", " ").replace("|", "\\|")
    if max_length:
        text = truncate(text, max_length)
    return text


def _table(headers: list[str], rows: list[list[str]]) -> str:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("---" for _ in headers) + "|",
    ]
    for row in rows:
        lines.append("| " + " | ".join(row) + " |")
    return "\n".join(lines)


# =============================================================================
# Entity tables
# =============================================================================

def _videos_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Title", "Channel", "Views", "Duration"],
        [
            [
                _cell(v.get("id")),
                _cell(_dig(v, "snippet", "title"), TITLE_WIDTH),
                _cell(_dig(v, "snippet", "channelTitle")),
                _cell(_dig(v, "statistics", "viewCount")),
                _cell(_dig(v, "contentDetails", "duration")),
            ]
            for v in items
        ],
    )


def _channels_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Title", "Subscribers", "Videos"],
        [
            [
                _cell(c.get("id")),
                _cell(_dig(c, "snippet", "title"), TITLE_WIDTH),
                _cell(_dig(c, "statistics", "subscriberCount")),
                _cell(_dig(c, "statistics", "videoCount")),
            ]
            for c in items
        ],
    )


def _playlists_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Title", "Items", "Privacy"],
        [
            [
                _cell(p.get("id")),
                _cell(_dig(p, "snippet", "title"), TITLE_WIDTH),
                _cell(_dig(p, "contentDetails", "itemCount")),
                _cell(_dig(p, "status", "privacyStatus")),
            ]
            for p in items
        ],
    )


def _playlist_items_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Position", "Video Title", "Video ID"],
        [
            [
                _cell(i.get("id")),
                _cell(_dig(i, "snippet", "position")),
                _cell(_dig(i, "snippet", "title"), TITLE_WIDTH),
                _cell(
                    _dig(i, "contentDetails", "videoId")
                    or _dig(i, "snippet", "resourceId", "videoId")
                ),
            ]
            for i in items
        ],
    )


def _search_results_table(items: list[dict]) -> str:
    rows = []
    for result in items:
        result_id = result.get("id") or {}
        kind = (result_id.get("kind") or "").replace("youtube#", "")
        target = (
            result_id.get("videoId")
            or result_id.get("channelId")
            or result_id.get("playlistId")
        )
        rows.append([
            _cell(kind),
            _cell(target),
            _cell(_dig(result, "snippet", "title"), TITLE_WIDTH),
            _cell(_dig(result, "snippet", "channelTitle")),
        ])
    return _table(["Type", "ID", "Title", "Channel"], rows)


def _comments_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Author", "Comment", "Likes"],
        [
            [
                _cell(c.get("id")),
                _cell(_dig(c, "snippet", "authorDisplayName")),
                _cell(_dig(c, "snippet", "textDisplay"), TEXT_WIDTH),
                _cell(_dig(c, "snippet", "likeCount")),
            ]
            for c in items
        ],
    )


def _comment_threads_table(items: list[dict]) -> str:
    rows = []
    for thread in items:
        top = _dig(thread, "snippet", "topLevelComment") or {}
        rows.append([
            _cell(thread.get("id")),
            _cell(_dig(top, "snippet", "authorDisplayName")),
            _cell(_dig(top, "snippet", "textDisplay"), TEXT_WIDTH),
            _cell(_dig(thread, "snippet", "totalReplyCount")),
        ])
    return _table(["ID", "Author", "Comment", "Replies"], rows)


def _subscriptions_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Channel", "New Items"],
        [
            [
                _cell(s.get("id")),
                _cell(_dig(s, "snippet", "title"), TITLE_WIDTH),
                _cell(_dig(s, "contentDetails", "newItemCount")),
            ]
            for s in items
        ],
    )


def _captions_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Language", "Name", "Kind", "Draft"],
        [
            [
                _cell(c.get("id")),
                _cell(_dig(c, "snippet", "language")),
                _cell(_dig(c, "snippet", "name"), TITLE_WIDTH),
                _cell(_dig(c, "snippet", "trackKind")),
                _cell(_dig(c, "snippet", "isDraft")),
            ]
            for c in items
        ],
    )


def _activities_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Type", "Title", "Published"],
        [
            [
                _cell(a.get("id")),
                _cell(_dig(a, "snippet", "type")),
                _cell(_dig(a, "snippet", "title"), TITLE_WIDTH),
                _cell(_dig(a, "snippet", "publishedAt")),
            ]
            for a in items
        ],
    )


def _channel_sections_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Type", "Title", "Position"],
        [
            [
                _cell(s.get("id")),
                _cell(_dig(s, "snippet", "type")),
                _cell(_dig(s, "snippet", "title"), TITLE_WIDTH),
                _cell(_dig(s, "snippet", "position")),
            ]
            for s in items
        ],
    )


def _named_table(items: list[dict]) -> str:
    # i18n languages and regions share the {id, snippet.name} shape
    return _table(
        ["ID", "Name"],
        [[_cell(i.get("id")), _cell(_dig(i, "snippet", "name"))] for i in items],
    )


def _video_categories_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Title", "Assignable"],
        [
            [
                _cell(c.get("id")),
                _cell(_dig(c, "snippet", "title"), TITLE_WIDTH),
                _cell(_dig(c, "snippet", "assignable")),
            ]
            for c in items
        ],
    )


def _abuse_reasons_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Label"],
        [[_cell(r.get("id")), _cell(_dig(r, "snippet", "label"), TEXT_WIDTH)] for r in items],
    )


def _members_table(items: list[dict]) -> str:
    rows = []
    for member in items:
        details = _dig(member, "snippet", "memberDetails") or {}
        memberships = _dig(member, "snippet", "membershipsDetails") or {}
        rows.append([
            _cell(details.get("channelId")),
            _cell(details.get("displayName"), TITLE_WIDTH),
            _cell(memberships.get("highestAccessibleLevelDisplayName")),
            _cell(_dig(memberships, "membershipsDuration", "memberSince")),
        ])
    return _table(["Channel ID", "Name", "Level", "Since"], rows)


def _membership_levels_table(items: list[dict]) -> str:
    return _table(
        ["ID", "Name"],
        [
            [_cell(level.get("id")), _cell(_dig(level, "snippet", "levelDetails", "displayName"))]
            for level in items
        ],
    )


def _generic_table(items: list) -> str:
    """Columns are the first item's first five keys; other shapes show '-'."""
    if not items:
        return "_No items_"

    first = items[0] if isinstance(items[0], dict) else {"value": items[0]}
    keys = list(first.keys())[:5]

    rows = []
    for item in items:
        record = item if isinstance(item, dict) else {"value": item}
        rows.append([_cell(record.get(k), TEXT_WIDTH) for k in keys])
    return _table(keys, rows)


TABLE_RENDERERS: dict[str, Callable[[list], str]] = {
    "videos": _videos_table,
    "channels": _channels_table,
    "playlists": _playlists_table,
    "playlistItems": _playlist_items_table,
    "searchResults": _search_results_table,
    "comments": _comments_table,
    "commentThreads": _comment_threads_table,
    "subscriptions": _subscriptions_table,
    "captions": _captions_table,
    "activities": _activities_table,
    "channelSections": _channel_sections_table,
    "languages": _named_table,
    "regions": _named_table,
    "videoCategories": _video_categories_table,
    "abuseReasons": _abuse_reasons_table,
    "members": _members_table,
    "membershipLevels": _membership_levels_table,
}


# =============================================================================
# Markdown
# =============================================================================

def _page_as_markdown(page: Page, entity_type: str) -> str:
    lines = [f"## {capitalize(entity_type)}", ""]

    if page.total_results is not None:
        lines.append(f"**Total:** {page.total_results} | **Showing:** {page.count}")
    else:
        lines.append(f"**Showing:** {page.count}")

    if page.has_more:
        lines.append(f"**More available:** Yes (nextPageToken: `{page.next_page_token}`)")
    lines.append("")

    if not page.items:
        lines.append("_No items found._")
        return "\n".join(lines)

    renderer = TABLE_RENDERERS.get(entity_type, _generic_table)
    lines.append(renderer(page.items))
    return "\n".join(lines)


def _object_as_markdown(data: dict, entity_type: str) -> str:
    title = re.sub(r"s$", "", entity_type)
    lines = [f"## {capitalize(title)}", ""]

    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            lines.append(f"- **{format_key(key)}:**")
            lines.append("```json")
            lines.append(json.dumps(value, indent=2, ensure_ascii=False))
            lines.append("```")
        else:
            lines.append(f"- **{format_key(key)}:** {value}")

    return "\n".join(lines)


def _as_page(data: Any) -> Optional[Page]:
    if isinstance(data, Page):
        return data
    if isinstance(data, dict) and isinstance(data.get("items"), list):
        return Page(
            items=data["items"],
            total_results=data.get("totalResults"),
            results_per_page=data.get("resultsPerPage"),
            next_page_token=data.get("nextPageToken"),
            prev_page_token=data.get("prevPageToken"),
        )
    return None


def format_as_markdown(data: Any, entity_type: str) -> str:
    page = _as_page(data)
    if page is not None:
        return _page_as_markdown(page, entity_type)
    if isinstance(data, list):
        return _generic_table(data)
    if isinstance(data, dict):
        return _object_as_markdown(data, entity_type)
    return str(data)


# =============================================================================
# Public API
# =============================================================================

def to_json(data: Any) -> str:
    """Pretty-print a result, unwrapping Page envelopes."""
    if isinstance(data, Page):
        data = data.to_dict()
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_response(data: Any, fmt: ResponseFormat, entity_type: str) -> str:
    """
    Render a successful result.

    Args:
        data: Page, resource dict, list or scalar
        fmt: "json" or "markdown"
        entity_type: Tag choosing the markdown table layout (e.g. "videos")
    """
    if fmt == "markdown":
        return format_as_markdown(data, entity_type)
    return to_json(data)


def format_confirmation(message: str, **resources: Any) -> str:
    """Render the acknowledgement returned by mutating operations."""
    payload: dict[str, Any] = {"success": True, "message": message}
    payload.update(resources)
    return to_json(payload)


def format_error(error: object) -> str:
    """Render any raised value as {"error": "...", "details": {...}} JSON text."""
    if isinstance(error, BaseException):
        message = f"Error: {error.message if isinstance(error, YouTubeAPIError) else error}"
        if is_retryable(error):
            message += " (retryable)"
    else:
        message = f"Error: {error}"

    return json.dumps({"error": message, "details": error_details(error)}, indent=2)


def limit_text(text: str, limit: int = DEFAULT_CHARACTER_LIMIT) -> str:
    """Cap a response payload, noting how much was cut."""
    if limit <= 0 or len(text) <= limit:
        return text
    return (
        text[:limit]
        + f"\n\n[Response truncated: {len(text) - limit} of {len(text)} characters omitted. "
        "Use pagination or fewer parts to narrow the result.]"
    )
