"""
YouTube Data MCP Server - Main server implementation.

Exposes every YouTube Data API v3 resource operation as an MCP tool.
"""

import asyncio
import logging
import os
import sys
from typing import Any, Callable, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    Tool,
    TextContent,
    CallToolResult,
)

from api_errors import YouTubeAPIError
from credentials import (
    TenantCredentials,
    credentials_from_env,
    parse_credentials,
    validate_credentials,
)
from output import (
    DEFAULT_CHARACTER_LIMIT,
    format_confirmation,
    format_error,
    format_response,
    limit_text,
    to_json,
)
from tool_catalog import TOOLS, TOOLS_BY_NAME, validate_arguments
from youtube_api import (
    DEFAULT_TIMEOUT,
    ActivityQuery,
    CaptionInsert,
    CaptionUpdate,
    ChannelSectionInput,
    ChannelUpdate,
    CommentThreadQuery,
    MemberQuery,
    PlaylistCreate,
    PlaylistUpdate,
    SearchParams,
    VideoUpdate,
    YouTubeAPI,
)


logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_LOG_LEVEL = "WARNING"

Handler = Callable[[YouTubeAPI, dict[str, Any]], str]


def _search_params(args: dict[str, Any]) -> SearchParams:
    """Translate camelCase tool arguments into SearchParams."""
    return SearchParams(
        query=args.get("query"),
        type=args.get("type"),
        max_results=args.get("maxResults"),
        page_token=args.get("pageToken"),
        order=args.get("order"),
        channel_id=args.get("channelId"),
        published_after=args.get("publishedAfter"),
        published_before=args.get("publishedBefore"),
        region_code=args.get("regionCode"),
        relevance_language=args.get("relevanceLanguage"),
        safe_search=args.get("safeSearch"),
        video_category_id=args.get("videoCategoryId"),
        video_definition=args.get("videoDefinition"),
        video_dimension=args.get("videoDimension"),
        video_duration=args.get("videoDuration"),
        video_embeddable=args.get("videoEmbeddable"),
        video_license=args.get("videoLicense"),
        video_type=args.get("videoType"),
        event_type=args.get("eventType"),
        location=args.get("location"),
        location_radius=args.get("locationRadius"),
        topic_id=args.get("topicId"),
        for_mine=args.get("forMine"),
        for_content_owner=args.get("forContentOwner"),
    )


def _section_input(args: dict[str, Any]) -> ChannelSectionInput:
    return ChannelSectionInput(
        type=args["type"],
        title=args.get("title"),
        position=args.get("position"),
        playlist_ids=args.get("playlistIds"),
        channel_ids=args.get("channelIds"),
    )


class YouTubeMCPServer:
    """YouTube Data MCP Server with one tool per API operation."""

    def __init__(
        self,
        credentials: Optional[TenantCredentials] = None,
        character_limit: int = DEFAULT_CHARACTER_LIMIT,
        timeout: float = DEFAULT_TIMEOUT,
        ssl_bypass: bool = False,
    ):
        self.credentials = credentials or TenantCredentials()
        self.character_limit = character_limit
        self.youtube_api = YouTubeAPI(self.credentials, timeout=timeout, ssl_bypass=ssl_bypass)

        self.handlers: dict[str, Handler] = {
            # Videos
            "youtube_get_video": self._get_video,
            "youtube_list_videos": self._list_videos,
            "youtube_search_videos": self._search_videos,
            "youtube_update_video": self._update_video,
            "youtube_delete_video": self._delete_video,
            "youtube_rate_video": self._rate_video,
            "youtube_get_video_rating": self._get_video_rating,
            "youtube_report_video_abuse": self._report_video_abuse,
            # Channels
            "youtube_get_my_channel": self._get_my_channel,
            "youtube_get_channel": self._get_channel,
            "youtube_list_channels": self._list_channels,
            "youtube_get_channel_by_username": self._get_channel_by_username,
            "youtube_update_channel": self._update_channel,
            "youtube_search_channels": self._search_channels,
            # Playlists
            "youtube_list_my_playlists": self._list_my_playlists,
            "youtube_list_channel_playlists": self._list_channel_playlists,
            "youtube_get_playlist": self._get_playlist,
            "youtube_create_playlist": self._create_playlist,
            "youtube_update_playlist": self._update_playlist,
            "youtube_delete_playlist": self._delete_playlist,
            "youtube_search_playlists": self._search_playlists,
            # Playlist items
            "youtube_list_playlist_items": self._list_playlist_items,
            "youtube_add_video_to_playlist": self._add_video_to_playlist,
            "youtube_update_playlist_item": self._update_playlist_item,
            "youtube_remove_from_playlist": self._remove_from_playlist,
            # Comments
            "youtube_list_comment_threads": self._list_comment_threads,
            "youtube_get_comment_thread": self._get_comment_thread,
            "youtube_post_comment": self._post_comment,
            "youtube_list_comment_replies": self._list_comment_replies,
            "youtube_reply_to_comment": self._reply_to_comment,
            "youtube_update_comment": self._update_comment,
            "youtube_delete_comment": self._delete_comment,
            "youtube_set_comment_moderation_status": self._set_comment_moderation_status,
            # Subscriptions
            "youtube_list_my_subscriptions": self._list_my_subscriptions,
            "youtube_list_my_subscribers": self._list_my_subscribers,
            "youtube_subscribe": self._subscribe,
            "youtube_unsubscribe": self._unsubscribe,
            # Captions
            "youtube_list_captions": self._list_captions,
            "youtube_download_caption": self._download_caption,
            "youtube_insert_caption": self._insert_caption,
            "youtube_update_caption": self._update_caption,
            "youtube_delete_caption": self._delete_caption,
            # Activities and channel sections
            "youtube_list_activities": self._list_activities,
            "youtube_list_channel_sections": self._list_channel_sections,
            "youtube_insert_channel_section": self._insert_channel_section,
            "youtube_update_channel_section": self._update_channel_section,
            "youtube_delete_channel_section": self._delete_channel_section,
            # Reference data
            "youtube_list_languages": self._list_languages,
            "youtube_list_regions": self._list_regions,
            "youtube_list_video_categories": self._list_video_categories,
            "youtube_list_video_abuse_report_reasons": self._list_video_abuse_report_reasons,
            # Members
            "youtube_list_members": self._list_members,
            "youtube_list_membership_levels": self._list_membership_levels,
            # Search
            "youtube_search": self._search,
            "youtube_test_connection": self._test_connection,
        }

        # MCP Server
        self.server = Server("youtube-data-mcp")
        self._setup_handlers()

    def _setup_handlers(self):
        """Setup MCP tool handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return TOOLS

        # validate_arguments owns argument checking
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
            return await self.handle_call(name, arguments, self._request_credentials())

    def _request_credentials(self) -> TenantCredentials:
        """
        Credentials for the request being served.

        Header-carrying transports may send X-YouTube-Access-Token or
        X-YouTube-API-Key; otherwise (stdio) the configured credentials apply.
        """
        try:
            request = self.server.request_context.request
        except LookupError:
            return self.credentials

        headers = getattr(request, "headers", None)
        if not headers:
            return self.credentials
        credentials = parse_credentials(headers)
        if credentials.access_token or credentials.api_key:
            return credentials
        return self.credentials

    def _client_for(self, credentials: TenantCredentials) -> YouTubeAPI:
        if credentials == self.credentials:
            return self.youtube_api
        return self.youtube_api.with_credentials(credentials)

    async def handle_call(
        self,
        name: str,
        arguments: Optional[dict[str, Any]],
        credentials: Optional[TenantCredentials] = None,
    ) -> CallToolResult:
        """
        Run one tool invocation and wrap its outcome.

        Every failure becomes an isError result carrying the formatted error.
        """
        handler = self.handlers.get(name)
        tool = TOOLS_BY_NAME.get(name)
        if handler is None or tool is None:
            return CallToolResult(
                content=[TextContent(type="text", text=f"Unknown tool: {name}")],
                isError=True,
            )

        credentials = credentials or self.credentials
        logger.info("Calling tool %s", name)
        try:
            validate_credentials(credentials)
            args = validate_arguments(tool, arguments)
            text = await asyncio.to_thread(handler, self._client_for(credentials), args)
        except YouTubeAPIError as e:
            logger.info("Tool %s failed: %s", name, e.code)
            return self._error(e)
        except Exception as e:
            logger.exception("Unexpected error in tool %s", name)
            return self._error(e)

        return CallToolResult(
            content=[TextContent(type="text", text=limit_text(text, self.character_limit))],
        )

    @staticmethod
    def _error(error: Exception) -> CallToolResult:
        return CallToolResult(
            content=[TextContent(type="text", text=format_error(error))],
            isError=True,
        )

    # =========================================================================
    # Videos
    # =========================================================================

    def _get_video(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        video = api.get_video(args["videoId"], args.get("parts"))
        return format_response(video, args["format"], "video")

    def _list_videos(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_videos(args["videoIds"], args.get("parts"))
        return format_response(page, args["format"], "videos")

    def _search_videos(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.search_videos(_search_params(args))
        return format_response(page, args["format"], "searchResults")

    def _update_video(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        update = VideoUpdate(
            title=args.get("title"),
            description=args.get("description"),
            tags=args.get("tags"),
            category_id=args.get("categoryId"),
            default_language=args.get("defaultLanguage"),
            privacy_status=args.get("privacyStatus"),
            embeddable=args.get("embeddable"),
            public_stats_viewable=args.get("publicStatsViewable"),
            made_for_kids=args.get("madeForKids"),
        )
        video = api.update_video(args["videoId"], update)
        return format_confirmation("Video updated", video=video)

    def _delete_video(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        api.delete_video(args["videoId"])
        return format_confirmation(f"Video {args['videoId']} deleted")

    def _rate_video(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        api.rate_video(args["videoId"], args["rating"])
        return format_confirmation(f"Video {args['videoId']} rated: {args['rating']}")

    def _get_video_rating(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        return to_json(api.get_video_rating(args["videoIds"]))

    def _report_video_abuse(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        api.report_video_abuse(
            args["videoId"],
            args["reasonId"],
            args.get("secondaryReasonId"),
            args.get("comments"),
        )
        return format_confirmation(f"Video {args['videoId']} reported")

    # =========================================================================
    # Channels
    # =========================================================================

    def _get_my_channel(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        channel = api.get_my_channel(args.get("parts"))
        return format_response(channel, args["format"], "channel")

    def _get_channel(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        channel = api.get_channel(args["channelId"], args.get("parts"))
        return format_response(channel, args["format"], "channel")

    def _list_channels(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_channels(args["channelIds"], args.get("parts"))
        return format_response(page, args["format"], "channels")

    def _get_channel_by_username(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        channel = api.get_channel_by_username(args["username"], args.get("parts"))
        return format_response(channel, args["format"], "channel")

    def _update_channel(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        update = ChannelUpdate(
            description=args.get("description"),
            keywords=args.get("keywords"),
            default_language=args.get("defaultLanguage"),
            country=args.get("country"),
            unsubscribed_trailer=args.get("unsubscribedTrailer"),
        )
        channel = api.update_channel(args["channelId"], update)
        return format_confirmation("Channel updated", channel=channel)

    def _search_channels(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.search_channels(_search_params(args))
        return format_response(page, args["format"], "searchResults")

    # =========================================================================
    # Playlists
    # =========================================================================

    def _list_my_playlists(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_my_playlists(
            args.get("maxResults"), args.get("pageToken"), args.get("parts")
        )
        return format_response(page, args["format"], "playlists")

    def _list_channel_playlists(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_channel_playlists(
            args["channelId"], args.get("maxResults"), args.get("pageToken"), args.get("parts")
        )
        return format_response(page, args["format"], "playlists")

    def _get_playlist(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        playlist = api.get_playlist(args["playlistId"], args.get("parts"))
        return format_response(playlist, args["format"], "playlist")

    def _create_playlist(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        playlist = api.create_playlist(PlaylistCreate(
            title=args["title"],
            description=args.get("description"),
            privacy_status=args.get("privacyStatus") or "private",
            default_language=args.get("defaultLanguage"),
        ))
        return format_confirmation("Playlist created", playlist=playlist)

    def _update_playlist(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        playlist = api.update_playlist(args["playlistId"], PlaylistUpdate(
            title=args.get("title"),
            description=args.get("description"),
            privacy_status=args.get("privacyStatus"),
            default_language=args.get("defaultLanguage"),
        ))
        return format_confirmation("Playlist updated", playlist=playlist)

    def _delete_playlist(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        api.delete_playlist(args["playlistId"])
        return format_confirmation(f"Playlist {args['playlistId']} deleted")

    def _search_playlists(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.search_playlists(_search_params(args))
        return format_response(page, args["format"], "searchResults")

    # =========================================================================
    # Playlist items
    # =========================================================================

    def _list_playlist_items(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_playlist_items(
            args["playlistId"], args.get("maxResults"), args.get("pageToken"), args.get("parts")
        )
        return format_response(page, args["format"], "playlistItems")

    def _add_video_to_playlist(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        item = api.add_video_to_playlist(
            args["playlistId"], args["videoId"], args.get("position")
        )
        return format_confirmation("Video added to playlist", playlistItem=item)

    def _update_playlist_item(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        item = api.update_playlist_item(
            args["playlistItemId"], args["playlistId"], args["videoId"], args["position"]
        )
        return format_confirmation("Playlist item updated", playlistItem=item)

    def _remove_from_playlist(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        api.remove_from_playlist(args["playlistItemId"])
        return format_confirmation(f"Playlist item {args['playlistItemId']} removed")

    # =========================================================================
    # Comments
    # =========================================================================

    def _list_comment_threads(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_comment_threads(CommentThreadQuery(
            video_id=args.get("videoId"),
            channel_id=args.get("channelId"),
            all_threads_related_to_channel_id=args.get("allThreadsRelatedToChannelId"),
            max_results=args.get("maxResults"),
            page_token=args.get("pageToken"),
            order=args.get("order"),
            search_terms=args.get("searchTerms"),
            moderation_status=args.get("moderationStatus"),
        ))
        return format_response(page, args["format"], "commentThreads")

    def _get_comment_thread(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        thread = api.get_comment_thread(args["commentThreadId"], args.get("parts"))
        return format_response(thread, args["format"], "commentThread")

    def _post_comment(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        thread = api.post_comment(args["channelId"], args.get("videoId"), args["text"])
        return format_confirmation("Comment posted", commentThread=thread)

    def _list_comment_replies(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_comments(
            args["parentId"], args.get("maxResults"), args.get("pageToken")
        )
        return format_response(page, args["format"], "comments")

    def _reply_to_comment(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        comment = api.reply_to_comment(args["parentId"], args["text"])
        return format_confirmation("Reply posted", comment=comment)

    def _update_comment(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        comment = api.update_comment(args["commentId"], args["text"])
        return format_confirmation("Comment updated", comment=comment)

    def _delete_comment(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        api.delete_comment(args["commentId"])
        return format_confirmation(f"Comment {args['commentId']} deleted")

    def _set_comment_moderation_status(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        comment_ids = args["commentIds"]
        status = args["moderationStatus"]
        api.set_comment_moderation_status(comment_ids, status, args.get("banAuthor", False))
        return format_confirmation(
            f"Moderation status set to {status} for {len(comment_ids)} comment(s)"
        )

    # =========================================================================
    # Subscriptions
    # =========================================================================

    def _list_my_subscriptions(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_my_subscriptions(
            args.get("maxResults"), args.get("pageToken"), args.get("parts")
        )
        return format_response(page, args["format"], "subscriptions")

    def _list_my_subscribers(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_my_subscribers(
            args.get("maxResults"), args.get("pageToken"), args.get("parts")
        )
        return format_response(page, args["format"], "subscriptions")

    def _subscribe(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        subscription = api.subscribe(args["channelId"])
        return format_confirmation("Subscribed", subscription=subscription)

    def _unsubscribe(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        api.unsubscribe(args["subscriptionId"])
        return format_confirmation(f"Unsubscribed (subscription {args['subscriptionId']})")

    # =========================================================================
    # Captions
    # =========================================================================

    def _list_captions(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_captions(args["videoId"], args.get("parts"))
        return format_response(page, args["format"], "captions")

    def _download_caption(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        # Raw caption text; "format" here is the caption file format
        return api.download_caption(
            args["captionId"], args.get("format"), args.get("language")
        )

    def _insert_caption(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        caption = api.insert_caption(args["videoId"], CaptionInsert(
            language=args["language"],
            name=args["name"],
            caption_data=args["captionData"],
            is_draft=args.get("isDraft", False),
        ))
        return format_confirmation("Caption track created", caption=caption)

    def _update_caption(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        caption = api.update_caption(args["captionId"], CaptionUpdate(
            is_draft=args.get("isDraft"),
            caption_data=args.get("captionData"),
        ))
        return format_confirmation("Caption track updated", caption=caption)

    def _delete_caption(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        api.delete_caption(args["captionId"])
        return format_confirmation(f"Caption track {args['captionId']} deleted")

    # =========================================================================
    # Activities and channel sections
    # =========================================================================

    def _list_activities(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_activities(ActivityQuery(
            channel_id=args.get("channelId"),
            mine=args.get("mine"),
            max_results=args.get("maxResults"),
            page_token=args.get("pageToken"),
            published_after=args.get("publishedAfter"),
            published_before=args.get("publishedBefore"),
            region_code=args.get("regionCode"),
        ))
        return format_response(page, args["format"], "activities")

    def _list_channel_sections(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_channel_sections(args["channelId"], args.get("parts"))
        return format_response(page, args["format"], "channelSections")

    def _insert_channel_section(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        section = api.insert_channel_section(_section_input(args))
        return format_confirmation("Channel section created", channelSection=section)

    def _update_channel_section(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        section = api.update_channel_section(args["sectionId"], _section_input(args))
        return format_confirmation("Channel section updated", channelSection=section)

    def _delete_channel_section(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        api.delete_channel_section(args["sectionId"])
        return format_confirmation(f"Channel section {args['sectionId']} deleted")

    # =========================================================================
    # Reference data
    # =========================================================================

    def _list_languages(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_languages(args.get("hl"))
        return format_response(page, args["format"], "languages")

    def _list_regions(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_regions(args.get("hl"))
        return format_response(page, args["format"], "regions")

    def _list_video_categories(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_video_categories(args.get("regionCode", "US"), args.get("hl"))
        return format_response(page, args["format"], "videoCategories")

    def _list_video_abuse_report_reasons(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_video_abuse_report_reasons(args.get("hl"))
        return format_response(page, args["format"], "abuseReasons")

    # =========================================================================
    # Members
    # =========================================================================

    def _list_members(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_members(MemberQuery(
            mode=args.get("mode", "all_current"),
            max_results=args.get("maxResults"),
            page_token=args.get("pageToken"),
            has_access_to_level=args.get("hasAccessToLevel"),
            filter_by_member_channel_id=args.get("filterByMemberChannelId"),
        ))
        return format_response(page, args["format"], "members")

    def _list_membership_levels(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.list_membership_levels(args.get("parts"))
        return format_response(page, args["format"], "membershipLevels")

    # =========================================================================
    # Search
    # =========================================================================

    def _search(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        page = api.search(_search_params(args))
        return format_response(page, args["format"], "searchResults")

    def _test_connection(self, api: YouTubeAPI, args: dict[str, Any]) -> str:
        return to_json(api.test_connection())

    async def run(self):
        """Run the MCP server."""
        logger.info("Starting youtube-data-mcp over stdio")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def _env_number(name: str, default, cast=int):
    """Read a numeric setting, falling back to the default when malformed."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def configure_logging() -> None:
    """Send logs to stderr; stdout carries the MCP stream."""
    level = os.environ.get("YOUTUBE_MCP_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def server_from_env() -> YouTubeMCPServer:
    """Build a server from environment configuration."""
    return YouTubeMCPServer(
        credentials=credentials_from_env(),
        character_limit=_env_number("YOUTUBE_MCP_CHARACTER_LIMIT", DEFAULT_CHARACTER_LIMIT),
        timeout=_env_number("YOUTUBE_MCP_TIMEOUT", DEFAULT_TIMEOUT, float),
        ssl_bypass=_env_flag("YOUTUBE_MCP_SSL_BYPASS"),
    )


def main():
    """Main entry point."""
    configure_logging()
    server = server_from_env()
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
