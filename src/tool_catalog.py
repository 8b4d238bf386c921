"""
Tool Catalog - MCP tool declarations for every YouTube Data API operation.

Each Tool carries a JSON input schema. validate_arguments() applies the
schema defaults and rejects missing or out-of-range arguments before any
upstream call is made.
"""

from typing import Optional

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError
from mcp.types import Tool

from api_errors import YouTubeAPIError


MAX_IDS = 50
DEFAULT_PAGE_SIZE = 25

FORMAT = {
    "type": "string",
    "enum": ["json", "markdown"],
    "default": "json",
    "description": "Response format: 'json' (default) or 'markdown' tables",
}
PAGE_TOKEN = {"type": "string", "description": "Pagination token from a previous response"}
PRIVACY = ["private", "public", "unlisted"]
SEARCH_ORDER = ["date", "rating", "relevance", "title", "videoCount", "viewCount"]
SECTION_TYPES = [
    "allPlaylists",
    "completedEvents",
    "liveEvents",
    "multipleChannels",
    "multiplePlaylists",
    "popularUploads",
    "recentUploads",
    "singlePlaylist",
    "subscriptions",
    "upcomingEvents",
]


def _string(description: str, **extra) -> dict:
    return {"type": "string", "description": description, **extra}


def _enum(values: list[str], description: str, **extra) -> dict:
    return {"type": "string", "enum": values, "description": description, **extra}


def _bool(description: str, **extra) -> dict:
    return {"type": "boolean", "description": description, **extra}


def _int(description: str, minimum: Optional[int] = None, maximum: Optional[int] = None, **extra) -> dict:
    prop = {"type": "integer", "description": description, **extra}
    if minimum is not None:
        prop["minimum"] = minimum
    if maximum is not None:
        prop["maximum"] = maximum
    return prop


def _ids(description: str, max_items: Optional[int] = MAX_IDS) -> dict:
    prop = {"type": "array", "items": {"type": "string"}, "description": description}
    if max_items:
        prop["maxItems"] = max_items
    return prop


def _parts(default: list[str], description: str = "Resource parts to include") -> dict:
    return {
        "type": "array",
        "items": {"type": "string"},
        "default": default,
        "description": description,
    }


def _max_results(maximum: int = 50) -> dict:
    return _int(f"Maximum results (1-{maximum})", 1, maximum, default=DEFAULT_PAGE_SIZE)


def _tool(tool_name: str, tool_description: str, required: tuple = (), **properties) -> Tool:
    # Positional names must not collide with property names such as "name"
    return Tool(
        name=tool_name,
        description=tool_description,
        inputSchema={
            "type": "object",
            "properties": properties,
            "required": list(required),
        },
    )


OAUTH = "Requires OAuth authentication."


# =============================================================================
# Videos
# =============================================================================

VIDEO_TOOLS = [
    _tool(
        "youtube_get_video",
        "Get details for a YouTube video by ID (title, description, statistics, status).",
        ("videoId",),
        videoId=_string("YouTube video ID"),
        parts=_parts(["snippet", "contentDetails", "statistics", "status"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_list_videos",
        "Get details for multiple YouTube videos by ID (max 50).",
        ("videoIds",),
        videoIds=_ids("Array of YouTube video IDs"),
        parts=_parts(["snippet", "contentDetails", "statistics"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_search_videos",
        "Search for YouTube videos.",
        ("query",),
        query=_string("Search query"),
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        order=_enum(["date", "rating", "relevance", "title", "viewCount"], "Sort order"),
        channelId=_string("Filter by channel ID"),
        publishedAfter=_string("Filter videos published after (RFC 3339)"),
        publishedBefore=_string("Filter videos published before (RFC 3339)"),
        regionCode=_string("ISO country code"),
        videoDuration=_enum(["any", "long", "medium", "short"], "Filter by duration"),
        videoDefinition=_enum(["any", "high", "standard"], "Filter by definition"),
        videoType=_enum(["any", "episode", "movie"], "Filter by type"),
        eventType=_enum(["completed", "live", "upcoming"], "Filter live events"),
        safeSearch=_enum(["moderate", "none", "strict"], "Safe search setting"),
        format=FORMAT,
    ),
    _tool(
        "youtube_update_video",
        f"Update a YouTube video's metadata. Omitted fields keep their current value. {OAUTH}",
        ("videoId",),
        videoId=_string("Video ID to update"),
        title=_string("New title"),
        description=_string("New description"),
        tags=_ids("New tags", max_items=None),
        categoryId=_string("New category ID"),
        defaultLanguage=_string("Default language code"),
        privacyStatus=_enum(PRIVACY, "Privacy status"),
        embeddable=_bool("Whether the video can be embedded"),
        publicStatsViewable=_bool("Whether statistics are publicly viewable"),
        madeForKids=_bool("Made for kids designation"),
    ),
    _tool(
        "youtube_delete_video",
        f"Delete a YouTube video. {OAUTH}",
        ("videoId",),
        videoId=_string("Video ID to delete"),
    ),
    _tool(
        "youtube_rate_video",
        f"Rate a YouTube video (like, dislike, or remove rating). {OAUTH}",
        ("videoId", "rating"),
        videoId=_string("Video ID to rate"),
        rating=_enum(["like", "dislike", "none"], "Rating to apply"),
    ),
    _tool(
        "youtube_get_video_rating",
        f"Get your rating for one or more videos. {OAUTH}",
        ("videoIds",),
        videoIds=_ids("Video IDs to check"),
    ),
    _tool(
        "youtube_report_video_abuse",
        f"Report a video for abusive content. Reason IDs come from "
        f"youtube_list_video_abuse_report_reasons. {OAUTH}",
        ("videoId", "reasonId"),
        videoId=_string("Video ID to report"),
        reasonId=_string("Abuse reason ID"),
        secondaryReasonId=_string("Secondary reason ID"),
        comments=_string("Additional comments"),
    ),
]


# =============================================================================
# Channels
# =============================================================================

CHANNEL_TOOLS = [
    _tool(
        "youtube_get_my_channel",
        f"Get the authenticated user's YouTube channel. {OAUTH}",
        parts=_parts(["snippet", "contentDetails", "statistics"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_get_channel",
        "Get a YouTube channel by ID.",
        ("channelId",),
        channelId=_string("YouTube channel ID"),
        parts=_parts(["snippet", "contentDetails", "statistics"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_list_channels",
        "Get multiple YouTube channels by ID (max 50).",
        ("channelIds",),
        channelIds=_ids("Array of channel IDs"),
        parts=_parts(["snippet", "contentDetails", "statistics"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_get_channel_by_username",
        "Get a YouTube channel by its legacy username.",
        ("username",),
        username=_string("YouTube username"),
        parts=_parts(["snippet", "contentDetails", "statistics"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_update_channel",
        f"Update a channel's branding settings. Omitted fields keep their current value. {OAUTH}",
        ("channelId",),
        channelId=_string("Channel ID to update"),
        description=_string("New description"),
        keywords=_string("Keywords (space-separated)"),
        defaultLanguage=_string("Default language code"),
        country=_string("Country code"),
        unsubscribedTrailer=_string("Video ID of the trailer shown to unsubscribed viewers"),
    ),
    _tool(
        "youtube_search_channels",
        "Search for YouTube channels.",
        ("query",),
        query=_string("Search query"),
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        order=_enum(SEARCH_ORDER, "Sort order"),
        regionCode=_string("ISO country code"),
        format=FORMAT,
    ),
]


# =============================================================================
# Playlists and playlist items
# =============================================================================

PLAYLIST_TOOLS = [
    _tool(
        "youtube_list_my_playlists",
        f"List the authenticated user's playlists. {OAUTH}",
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        parts=_parts(["snippet", "contentDetails", "status"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_list_channel_playlists",
        "List playlists for a specific channel.",
        ("channelId",),
        channelId=_string("Channel ID"),
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        parts=_parts(["snippet", "contentDetails", "status"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_get_playlist",
        "Get a playlist by ID.",
        ("playlistId",),
        playlistId=_string("Playlist ID"),
        parts=_parts(["snippet", "contentDetails", "status"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_create_playlist",
        f"Create a new playlist. {OAUTH}",
        ("title",),
        title=_string("Playlist title"),
        description=_string("Playlist description"),
        privacyStatus=_enum(PRIVACY, "Privacy status", default="private"),
        defaultLanguage=_string("Default language code"),
    ),
    _tool(
        "youtube_update_playlist",
        f"Update a playlist. Omitted fields keep their current value. {OAUTH}",
        ("playlistId",),
        playlistId=_string("Playlist ID to update"),
        title=_string("New title"),
        description=_string("New description"),
        privacyStatus=_enum(PRIVACY, "Privacy status"),
        defaultLanguage=_string("Default language"),
    ),
    _tool(
        "youtube_delete_playlist",
        f"Delete a playlist. {OAUTH}",
        ("playlistId",),
        playlistId=_string("Playlist ID to delete"),
    ),
    _tool(
        "youtube_search_playlists",
        "Search for YouTube playlists.",
        ("query",),
        query=_string("Search query"),
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        channelId=_string("Filter by channel ID"),
        format=FORMAT,
    ),
]

PLAYLIST_ITEM_TOOLS = [
    _tool(
        "youtube_list_playlist_items",
        "List videos in a playlist.",
        ("playlistId",),
        playlistId=_string("Playlist ID"),
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        parts=_parts(["snippet", "contentDetails", "status"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_add_video_to_playlist",
        f"Add a video to a playlist. {OAUTH}",
        ("playlistId", "videoId"),
        playlistId=_string("Playlist ID"),
        videoId=_string("Video ID to add"),
        position=_int("Position in playlist (0-indexed)", 0),
    ),
    _tool(
        "youtube_update_playlist_item",
        f"Move a playlist item to a new position. {OAUTH}",
        ("playlistItemId", "playlistId", "videoId", "position"),
        playlistItemId=_string("Playlist item ID"),
        playlistId=_string("Playlist ID"),
        videoId=_string("Video ID"),
        position=_int("New position (0-indexed)", 0),
    ),
    _tool(
        "youtube_remove_from_playlist",
        f"Remove a video from a playlist by playlist item ID (not video ID). {OAUTH}",
        ("playlistItemId",),
        playlistItemId=_string("Playlist item ID to remove"),
    ),
]


# =============================================================================
# Comments
# =============================================================================

COMMENT_TOOLS = [
    _tool(
        "youtube_list_comment_threads",
        "List comment threads (top-level comments with replies) for a video or channel.",
        videoId=_string("Video ID"),
        channelId=_string("Channel ID"),
        allThreadsRelatedToChannelId=_string("Get all threads related to channel"),
        maxResults=_max_results(100),
        pageToken=PAGE_TOKEN,
        order=_enum(["time", "relevance"], "Sort order"),
        searchTerms=_string("Filter by search terms"),
        moderationStatus=_enum(["heldForReview", "likelySpam", "published"], "Moderation status (requires auth)"),
        format=FORMAT,
    ),
    _tool(
        "youtube_get_comment_thread",
        "Get a specific comment thread by ID.",
        ("commentThreadId",),
        commentThreadId=_string("Comment thread ID"),
        parts=_parts(["snippet", "replies"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_post_comment",
        f"Post a new top-level comment on a video, or on the channel when videoId is omitted. {OAUTH}",
        ("channelId", "text"),
        channelId=_string("Channel ID"),
        videoId=_string("Video ID"),
        text=_string("Comment text"),
    ),
    _tool(
        "youtube_list_comment_replies",
        "List replies to a comment.",
        ("parentId",),
        parentId=_string("Parent comment ID"),
        maxResults=_max_results(100),
        pageToken=PAGE_TOKEN,
        format=FORMAT,
    ),
    _tool(
        "youtube_reply_to_comment",
        f"Reply to an existing comment. {OAUTH}",
        ("parentId", "text"),
        parentId=_string("Parent comment ID"),
        text=_string("Reply text"),
    ),
    _tool(
        "youtube_update_comment",
        f"Update an existing comment. {OAUTH}",
        ("commentId", "text"),
        commentId=_string("Comment ID to update"),
        text=_string("New comment text"),
    ),
    _tool(
        "youtube_delete_comment",
        f"Delete a comment. {OAUTH}",
        ("commentId",),
        commentId=_string("Comment ID to delete"),
    ),
    _tool(
        "youtube_set_comment_moderation_status",
        f"Set the moderation status of comments on your videos. {OAUTH}",
        ("commentIds", "moderationStatus"),
        commentIds=_ids("Comment IDs to moderate"),
        moderationStatus=_enum(["heldForReview", "published", "rejected"], "Moderation status"),
        banAuthor=_bool("Ban the author", default=False),
    ),
]


# =============================================================================
# Subscriptions
# =============================================================================

SUBSCRIPTION_TOOLS = [
    _tool(
        "youtube_list_my_subscriptions",
        f"List the authenticated user's subscriptions. {OAUTH}",
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        parts=_parts(["snippet", "contentDetails"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_list_my_subscribers",
        f"List the authenticated user's subscribers. {OAUTH}",
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        parts=_parts(["snippet", "subscriberSnippet"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_subscribe",
        f"Subscribe to a YouTube channel. {OAUTH}",
        ("channelId",),
        channelId=_string("Channel ID to subscribe to"),
    ),
    _tool(
        "youtube_unsubscribe",
        f"Unsubscribe using the subscription ID (not the channel ID). {OAUTH}",
        ("subscriptionId",),
        subscriptionId=_string("Subscription ID"),
    ),
]


# =============================================================================
# Captions
# =============================================================================

CAPTION_TOOLS = [
    _tool(
        "youtube_list_captions",
        "List caption tracks for a video.",
        ("videoId",),
        videoId=_string("Video ID"),
        parts=_parts(["snippet"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_download_caption",
        f"Download a caption track, optionally converted or translated. {OAUTH}",
        ("captionId",),
        captionId=_string("Caption track ID"),
        format=_enum(["sbv", "scc", "srt", "ttml", "vtt"], "Caption format"),
        language=_string("Translate to language code"),
    ),
    _tool(
        "youtube_insert_caption",
        f"Upload a caption track for one of your videos. {OAUTH}",
        ("videoId", "language", "name", "captionData"),
        videoId=_string("Video ID"),
        language=_string("Language code (e.g. 'en', 'es')"),
        name=_string("Track name"),
        captionData=_string("Caption content (SRT, VTT, ...)"),
        isDraft=_bool("Is draft", default=False),
    ),
    _tool(
        "youtube_update_caption",
        f"Update a caption track's draft flag and/or content. {OAUTH}",
        ("captionId",),
        captionId=_string("Caption track ID"),
        isDraft=_bool("Is draft"),
        captionData=_string("New caption content"),
    ),
    _tool(
        "youtube_delete_caption",
        f"Delete a caption track. {OAUTH}",
        ("captionId",),
        captionId=_string("Caption track ID"),
    ),
]


# =============================================================================
# Activities, channel sections, reference data, members, search
# =============================================================================

ACTIVITY_TOOLS = [
    _tool(
        "youtube_list_activities",
        "List channel activity events (uploads, likes, comments, etc.).",
        channelId=_string("Channel ID"),
        mine=_bool("Get my activities (requires OAuth)"),
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        publishedAfter=_string("Filter after date (RFC 3339)"),
        publishedBefore=_string("Filter before date (RFC 3339)"),
        regionCode=_string("Region code"),
        format=FORMAT,
    ),
]

CHANNEL_SECTION_TOOLS = [
    _tool(
        "youtube_list_channel_sections",
        "List channel sections (shelves) for a channel.",
        ("channelId",),
        channelId=_string("Channel ID"),
        parts=_parts(["snippet", "contentDetails"]),
        format=FORMAT,
    ),
    _tool(
        "youtube_insert_channel_section",
        f"Add a channel section (shelf) to your channel. Maximum 10 sections per channel. {OAUTH}",
        ("type",),
        type=_enum(SECTION_TYPES, "Section type"),
        title=_string("Section title"),
        position=_int("Position (0-indexed)", 0),
        playlistIds=_ids("Playlist IDs (singlePlaylist, multiplePlaylists)", max_items=None),
        channelIds=_ids("Channel IDs (multipleChannels)", max_items=None),
    ),
    _tool(
        "youtube_update_channel_section",
        f"Update a channel section. {OAUTH}",
        ("sectionId", "type"),
        sectionId=_string("Section ID"),
        type=_string("Section type"),
        title=_string("Section title"),
        position=_int("Position (0-indexed)", 0),
        playlistIds=_ids("Playlist IDs", max_items=None),
        channelIds=_ids("Channel IDs", max_items=None),
    ),
    _tool(
        "youtube_delete_channel_section",
        f"Delete a channel section. {OAUTH}",
        ("sectionId",),
        sectionId=_string("Section ID"),
    ),
]

REFERENCE_TOOLS = [
    _tool(
        "youtube_list_languages",
        "List application languages supported by YouTube.",
        hl=_string("Language code for localization"),
        format=FORMAT,
    ),
    _tool(
        "youtube_list_regions",
        "List content regions supported by YouTube.",
        hl=_string("Language code for localization"),
        format=FORMAT,
    ),
    _tool(
        "youtube_list_video_categories",
        "List video categories available for a region.",
        regionCode=_string("ISO 3166-1 alpha-2 region code", default="US"),
        hl=_string("Language code for localization"),
        format=FORMAT,
    ),
    _tool(
        "youtube_list_video_abuse_report_reasons",
        "List reasons available for reporting abusive videos.",
        hl=_string("Language code for localization"),
        format=FORMAT,
    ),
]

MEMBER_TOOLS = [
    _tool(
        "youtube_list_members",
        f"List channel members. Only for channels with memberships enabled. {OAUTH}",
        mode=_enum(["all_current", "updates"], "List mode", default="all_current"),
        maxResults=_max_results(1000),
        pageToken=PAGE_TOKEN,
        hasAccessToLevel=_string("Filter by membership level ID"),
        filterByMemberChannelId=_string("Filter by member channel ID"),
        format=FORMAT,
    ),
    _tool(
        "youtube_list_membership_levels",
        f"List membership levels for the authenticated channel. {OAUTH}",
        parts=_parts(["snippet"]),
        format=FORMAT,
    ),
]

SEARCH_TOOLS = [
    _tool(
        "youtube_search",
        "Search YouTube for videos, channels, or playlists.",
        ("query",),
        query=_string("Search query"),
        type=_enum(["video", "channel", "playlist"], "Resource type"),
        maxResults=_max_results(),
        pageToken=PAGE_TOKEN,
        order=_enum(SEARCH_ORDER, "Sort order"),
        channelId=_string("Filter by channel ID"),
        publishedAfter=_string("Published after (RFC 3339)"),
        publishedBefore=_string("Published before (RFC 3339)"),
        regionCode=_string("ISO country code"),
        relevanceLanguage=_string("Relevance language code"),
        safeSearch=_enum(["moderate", "none", "strict"], "Safe search"),
        eventType=_enum(["completed", "live", "upcoming"], "Live event type"),
        location=_string("Geographic coordinates (lat,lng)"),
        locationRadius=_string("Search radius (e.g. '100km', '50mi')"),
        topicId=_string("Freebase topic ID"),
        forMine=_bool("Only search the authenticated user's videos (requires OAuth, type video)"),
        forContentOwner=_bool("Only search videos owned by the authenticated content owner"),
        videoCategoryId=_string("Video category ID"),
        videoDefinition=_enum(["any", "high", "standard"], "Filter by definition"),
        videoDimension=_enum(["2d", "3d", "any"], "Filter by dimension"),
        videoDuration=_enum(["any", "long", "medium", "short"], "Filter by duration"),
        videoEmbeddable=_enum(["any", "true"], "Filter embeddable videos"),
        videoLicense=_enum(["any", "creativeCommon", "youtube"], "Filter by license"),
        videoType=_enum(["any", "episode", "movie"], "Filter by type"),
        format=FORMAT,
    ),
    _tool(
        "youtube_test_connection",
        "Test the connection to the YouTube API with the configured credentials.",
    ),
]


TOOLS: list[Tool] = [
    *VIDEO_TOOLS,
    *CHANNEL_TOOLS,
    *PLAYLIST_TOOLS,
    *PLAYLIST_ITEM_TOOLS,
    *COMMENT_TOOLS,
    *SUBSCRIPTION_TOOLS,
    *CAPTION_TOOLS,
    *ACTIVITY_TOOLS,
    *CHANNEL_SECTION_TOOLS,
    *REFERENCE_TOOLS,
    *MEMBER_TOOLS,
    *SEARCH_TOOLS,
]

TOOLS_BY_NAME: dict[str, Tool] = {tool.name: tool for tool in TOOLS}


# =============================================================================
# Argument validation
# =============================================================================


def _describe(error: ValidationError) -> str:
    """Short message for one schema violation."""
    expected = error.validator_value
    if error.validator == "type":
        return f"Expected {expected}, got {type(error.instance).__name__}"
    if error.validator == "enum":
        return f"Must be one of: {', '.join(expected)}"
    if error.validator == "minimum":
        return f"Must be >= {expected}"
    if error.validator == "maximum":
        return f"Must be <= {expected}"
    if error.validator == "maxItems":
        return f"At most {expected} items allowed"
    return error.message


def _schema_errors(schema: dict, arguments: dict) -> dict[str, list[str]]:
    details: dict[str, list[str]] = {}
    for error in Draft202012Validator(schema).iter_errors(arguments):
        if error.validator == "required":
            for name in error.validator_value:
                if name not in error.instance and name not in details:
                    details[name] = ["Required"]
            continue
        field = str(error.path[0]) if error.path else "arguments"
        details.setdefault(field, []).append(_describe(error))
    return details


def validate_arguments(tool: Tool, arguments: Optional[dict]) -> dict:
    """
    Check arguments against a tool's input schema and fill in defaults.

    Null and unknown arguments are ignored; a required string may not be
    empty. Raises a VALIDATION YouTubeAPIError with a field -> messages map
    when anything is missing or out of range.
    """
    schema = tool.inputSchema
    arguments = {k: v for k, v in (arguments or {}).items() if v is not None}

    details = _schema_errors(schema, arguments)
    for name in schema.get("required", []):
        if arguments.get(name) == "":
            details.setdefault(name, ["Required"])

    if details:
        fields = ", ".join(sorted(details))
        raise YouTubeAPIError.validation(f"Invalid arguments for {tool.name}: {fields}", details)

    resolved = {}
    for name, prop in schema.get("properties", {}).items():
        if name in arguments:
            resolved[name] = arguments[name]
        elif "default" in prop:
            default = prop["default"]
            resolved[name] = list(default) if isinstance(default, list) else default
    return resolved
