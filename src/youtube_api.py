"""
YouTube Data API Integration - Authenticated access to every v3 resource.

Each public method maps onto exactly one upstream endpoint (update methods
read the current resource first). Credentials are supplied per client as
TenantCredentials: an OAuth access token is sent as a bearer header,
otherwise the API key is sent as the `key` query parameter.
"""

import json
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Optional
import urllib3

import requests
from requests.adapters import HTTPAdapter

from api_errors import YouTubeAPIError, parse_retry_after
from credentials import TenantCredentials


logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 25
DEFAULT_TIMEOUT = 30.0

VIDEO_PARTS = ["snippet", "contentDetails", "statistics"]
VIDEO_DETAIL_PARTS = ["snippet", "contentDetails", "statistics", "status"]
CHANNEL_PARTS = ["snippet", "contentDetails", "statistics"]
PLAYLIST_PARTS = ["snippet", "contentDetails", "status"]
PLAYLIST_ITEM_PARTS = ["snippet", "contentDetails", "status"]
COMMENT_THREAD_PARTS = ["snippet", "replies"]
COMMENT_PARTS = ["snippet"]
SUBSCRIPTION_PARTS = ["snippet", "contentDetails"]
SUBSCRIBER_PARTS = ["snippet", "subscriberSnippet"]
CAPTION_PARTS = ["snippet"]
CHANNEL_SECTION_PARTS = ["snippet", "contentDetails"]
MEMBERSHIP_LEVEL_PARTS = ["snippet"]


# =============================================================================
# Paginated envelope
# =============================================================================

@dataclass
class Page:
    """Uniform wrapper around any upstream list result."""

    items: list = field(default_factory=list)
    total_results: Optional[int] = None
    results_per_page: Optional[int] = None
    next_page_token: Optional[str] = None
    prev_page_token: Optional[str] = None

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def has_more(self) -> bool:
        return bool(self.next_page_token)

    def to_dict(self) -> dict:
        data: dict[str, Any] = {
            "items": self.items,
            "count": self.count,
        }
        if self.total_results is not None:
            data["totalResults"] = self.total_results
        if self.results_per_page is not None:
            data["resultsPerPage"] = self.results_per_page
        data["hasMore"] = self.has_more
        if self.next_page_token:
            data["nextPageToken"] = self.next_page_token
        if self.prev_page_token:
            data["prevPageToken"] = self.prev_page_token
        return data


def to_page(payload: Optional[dict]) -> Page:
    """Normalize an upstream list response (items, pageInfo, tokens) into a Page."""
    payload = payload or {}
    page_info = payload.get("pageInfo") or {}
    return Page(
        items=list(payload.get("items") or []),
        total_results=page_info.get("totalResults"),
        results_per_page=page_info.get("resultsPerPage"),
        next_page_token=payload.get("nextPageToken") or None,
        prev_page_token=payload.get("prevPageToken") or None,
    )


# =============================================================================
# Operation inputs
# =============================================================================

@dataclass
class SearchParams:
    """Filters accepted by the search endpoint."""

    query: Optional[str] = None
    type: Optional[str] = None
    max_results: Optional[int] = None
    page_token: Optional[str] = None
    order: Optional[str] = None
    channel_id: Optional[str] = None
    published_after: Optional[str] = None
    published_before: Optional[str] = None
    region_code: Optional[str] = None
    relevance_language: Optional[str] = None
    safe_search: Optional[str] = None
    video_category_id: Optional[str] = None
    video_definition: Optional[str] = None
    video_dimension: Optional[str] = None
    video_duration: Optional[str] = None
    video_embeddable: Optional[str] = None
    video_license: Optional[str] = None
    video_type: Optional[str] = None
    event_type: Optional[str] = None
    for_mine: Optional[bool] = None
    for_content_owner: Optional[bool] = None
    location: Optional[str] = None
    location_radius: Optional[str] = None
    topic_id: Optional[str] = None

    def to_params(self) -> dict:
        return {
            "part": "snippet",
            "q": self.query,
            "type": self.type,
            "channelId": self.channel_id,
            "order": self.order,
            "maxResults": self.max_results or DEFAULT_PAGE_SIZE,
            "pageToken": self.page_token,
            "publishedAfter": self.published_after,
            "publishedBefore": self.published_before,
            "regionCode": self.region_code,
            "relevanceLanguage": self.relevance_language,
            "safeSearch": self.safe_search,
            "videoCategoryId": self.video_category_id,
            "videoDefinition": self.video_definition,
            "videoDimension": self.video_dimension,
            "videoDuration": self.video_duration,
            "videoEmbeddable": self.video_embeddable,
            "videoLicense": self.video_license,
            "videoType": self.video_type,
            "eventType": self.event_type,
            "forMine": self.for_mine,
            "forContentOwner": self.for_content_owner,
            "location": self.location,
            "locationRadius": self.location_radius,
            "topicId": self.topic_id,
        }


@dataclass
class VideoUpdate:
    """Video metadata changes; None means keep the current value."""

    title: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[list[str]] = None
    category_id: Optional[str] = None
    default_language: Optional[str] = None
    privacy_status: Optional[str] = None
    embeddable: Optional[bool] = None
    public_stats_viewable: Optional[bool] = None
    made_for_kids: Optional[bool] = None


@dataclass
class ChannelUpdate:
    """Channel branding changes; None means keep the current value."""

    description: Optional[str] = None
    keywords: Optional[str] = None
    default_language: Optional[str] = None
    country: Optional[str] = None
    unsubscribed_trailer: Optional[str] = None


@dataclass
class PlaylistCreate:
    title: str
    description: Optional[str] = None
    privacy_status: str = "private"
    default_language: Optional[str] = None


@dataclass
class PlaylistUpdate:
    title: Optional[str] = None
    description: Optional[str] = None
    privacy_status: Optional[str] = None
    default_language: Optional[str] = None


@dataclass
class CommentThreadQuery:
    """Comment thread filter. Only one of the three scopes is sent."""

    video_id: Optional[str] = None
    channel_id: Optional[str] = None
    all_threads_related_to_channel_id: Optional[str] = None
    max_results: Optional[int] = None
    page_token: Optional[str] = None
    order: Optional[str] = None
    search_terms: Optional[str] = None
    moderation_status: Optional[str] = None


@dataclass
class CaptionInsert:
    language: str
    name: str
    caption_data: str
    is_draft: bool = False


@dataclass
class CaptionUpdate:
    is_draft: Optional[bool] = None
    caption_data: Optional[str] = None


@dataclass
class ActivityQuery:
    channel_id: Optional[str] = None
    mine: Optional[bool] = None
    max_results: Optional[int] = None
    page_token: Optional[str] = None
    published_after: Optional[str] = None
    published_before: Optional[str] = None
    region_code: Optional[str] = None


@dataclass
class ChannelSectionInput:
    type: str
    title: Optional[str] = None
    position: Optional[int] = None
    playlist_ids: Optional[list[str]] = None
    channel_ids: Optional[list[str]] = None

    def to_body(self) -> dict:
        body: dict[str, Any] = {
            "snippet": _compact({
                "type": self.type,
                "title": self.title,
                "position": self.position,
            }),
        }
        if self.playlist_ids or self.channel_ids:
            body["contentDetails"] = _compact({
                "playlists": self.playlist_ids,
                "channels": self.channel_ids,
            })
        return body


@dataclass
class MemberQuery:
    mode: str = "all_current"
    max_results: Optional[int] = None
    page_token: Optional[str] = None
    has_access_to_level: Optional[str] = None
    filter_by_member_channel_id: Optional[str] = None


# =============================================================================
# Helpers
# =============================================================================

def _compact(values: dict) -> dict:
    """Drop keys whose value is None."""
    return {k: v for k, v in values.items() if v is not None}


def _merge(updates: dict, current: Optional[dict]) -> dict:
    """Overlay non-None updates on the current sub-object, field by field."""
    current = current or {}
    merged = {}
    for key, value in updates.items():
        merged[key] = value if value is not None else current.get(key)
    return _compact(merged)


def _encode(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def _join(parts: Optional[list[str]], default: list[str]) -> str:
    return ",".join(parts or default)


def _first(page: Page, entity_type: str, entity_id: str) -> dict:
    if not page.items:
        raise YouTubeAPIError.not_found(entity_type, entity_id)
    return page.items[0]


class YouTubeAPI:
    """
    YouTube Data API v3 client.

    Stateless apart from its connection pool. No call is retried: rate limit
    failures are raised with retryable=True for the caller to act on.
    """

    BASE_URL = "https://www.googleapis.com/youtube/v3"
    UPLOAD_URL = "https://www.googleapis.com/upload/youtube/v3"

    def __init__(
        self,
        credentials: TenantCredentials,
        timeout: float = DEFAULT_TIMEOUT,
        ssl_bypass: bool = False,
    ):
        """
        Initialize YouTube API client.

        Args:
            credentials: Access token and/or API key for this tenant
            timeout: Per-request network timeout in seconds
            ssl_bypass: Bypass SSL certificate verification (for corporate environments)
        """
        self.credentials = credentials
        self.timeout = timeout
        self.ssl_bypass = ssl_bypass
        self._session = None

    @property
    def session(self) -> requests.Session:
        """Lazy initialization of requests session."""
        if self._session is None:
            self._session = requests.Session()
            if self.ssl_bypass:
                urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
                self._session.verify = False
            adapter = HTTPAdapter(max_retries=0)
            self._session.mount('http://', adapter)
            self._session.mount('https://', adapter)
        return self._session

    def with_credentials(self, credentials: TenantCredentials) -> "YouTubeAPI":
        """Client for another tenant sharing this connection pool."""
        client = YouTubeAPI(credentials, timeout=self.timeout, ssl_bypass=self.ssl_bypass)
        client._session = self.session
        return client

    # -------------------------------------------------------------------------
    # HTTP plumbing
    # -------------------------------------------------------------------------

    def _auth(self) -> tuple[dict, dict]:
        """Return (query params, headers) carrying the credentials."""
        if self.credentials.access_token:
            return {}, {"Authorization": f"Bearer {self.credentials.access_token}"}
        if self.credentials.api_key:
            return {"key": self.credentials.api_key}, {}
        raise YouTubeAPIError.authentication(
            "No credentials provided. Include X-YouTube-Access-Token or X-YouTube-API-Key header."
        )

    def _send(
        self,
        method: str,
        url: str,
        params: Optional[dict] = None,
        **kwargs,
    ) -> requests.Response:
        auth_params, headers = self._auth()
        query = {k: _encode(v) for k, v in (params or {}).items() if v is not None}
        query.update(auth_params)

        logger.debug("%s %s params=%s", method, url, sorted(k for k in query if k != "key"))
        response = self.session.request(
            method,
            url,
            params=query,
            headers=headers,
            timeout=self.timeout,
            **kwargs,
        )
        logger.debug("%s %s -> %s", method, url, response.status_code)
        self._check_response(method, url, response)
        return response

    def _check_response(self, method: str, url: str, response: requests.Response) -> None:
        """Map a non-2xx response onto the error taxonomy."""
        status = response.status_code
        if 200 <= status < 300:
            return

        logger.warning("YouTube API %s %s failed with status %s", method, url, status)

        if status == 429:
            raise YouTubeAPIError.rate_limit(
                "Rate limit exceeded",
                parse_retry_after(response.headers.get("Retry-After")),
            )
        if status == 401:
            raise YouTubeAPIError.authentication(
                "Authentication failed. Check your OAuth token or API key."
            )
        if status == 403:
            if "quotaExceeded" in response.text:
                raise YouTubeAPIError.quota_exceeded("YouTube API quota exceeded.")
            raise YouTubeAPIError.forbidden(
                "Access forbidden. You may lack required permissions."
            )
        if status == 404:
            raise YouTubeAPIError.not_found("Resource", "unknown")

        message = f"API error: {status}"
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            error = data.get("error")
            if isinstance(error, dict) and error.get("message"):
                message = error["message"]
            elif data.get("message"):
                message = data["message"]
        raise YouTubeAPIError(message, status_code=status)

    @staticmethod
    def _parse(response: requests.Response) -> Any:
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        body: Optional[dict] = None,
    ) -> Any:
        """Make a JSON API request against the data endpoint."""
        kwargs = {}
        if body is not None:
            kwargs["json"] = body
        response = self._send(method, f"{self.BASE_URL}/{endpoint}", params, **kwargs)
        return self._parse(response)

    def _upload(self, method: str, endpoint: str, metadata: dict, media: str) -> Any:
        """Submit metadata plus a text payload as a multipart form to the upload endpoint."""
        files = {
            "metadata": (None, json.dumps(metadata), "application/json"),
            "media": (None, media.encode("utf-8"), "text/plain"),
        }
        response = self._send(
            method,
            f"{self.UPLOAD_URL}/{endpoint}",
            {"uploadType": "multipart", "part": "snippet"},
            files=files,
        )
        return self._parse(response)

    def _list(self, endpoint: str, params: dict) -> Page:
        return to_page(self._request("GET", endpoint, params))

    # -------------------------------------------------------------------------
    # Connection
    # -------------------------------------------------------------------------

    def test_connection(self) -> dict:
        """Issue a cheap call to confirm the credentials work."""
        try:
            if self.credentials.access_token:
                self._request("GET", "channels", {"part": "id", "mine": True})
                return {"connected": True, "message": "Successfully connected to YouTube API (OAuth)"}
            self._request("GET", "videoCategories", {"part": "snippet", "regionCode": "US"})
            return {"connected": True, "message": "Successfully connected to YouTube API (API Key)"}
        except (YouTubeAPIError, requests.RequestException) as e:
            return {"connected": False, "message": str(e) or "Connection failed"}

    # -------------------------------------------------------------------------
    # Videos
    # -------------------------------------------------------------------------

    def list_videos(self, video_ids: list[str], parts: Optional[list[str]] = None) -> Page:
        return self._list("videos", {
            "part": _join(parts, VIDEO_PARTS),
            "id": video_ids,
        })

    def get_video(self, video_id: str, parts: Optional[list[str]] = None) -> dict:
        """
        Get a single video.

        Raises:
            YouTubeAPIError: NOT_FOUND naming the video when the id matches nothing
        """
        page = self.list_videos([video_id], parts or VIDEO_DETAIL_PARTS)
        return _first(page, "Video", video_id)

    def search_videos(self, params: SearchParams) -> Page:
        return self.search(replace(params, type="video"))

    def update_video(self, video_id: str, update: VideoUpdate) -> dict:
        """
        Update video metadata.

        The API replaces the snippet and status objects wholesale, so the
        current video is fetched and every omitted field is sent back as-is.
        """
        current = self.get_video(video_id, ["snippet", "status"])
        body = {
            "id": video_id,
            "snippet": _merge({
                "title": update.title,
                "description": update.description,
                "tags": update.tags,
                "categoryId": update.category_id,
                "defaultLanguage": update.default_language,
            }, current.get("snippet")),
            "status": _merge({
                "privacyStatus": update.privacy_status,
                "embeddable": update.embeddable,
                "publicStatsViewable": update.public_stats_viewable,
                "madeForKids": update.made_for_kids,
            }, current.get("status")),
        }
        return self._request("PUT", "videos", {"part": "snippet,status"}, body)

    def delete_video(self, video_id: str) -> None:
        self._request("DELETE", "videos", {"id": video_id})

    def rate_video(self, video_id: str, rating: str) -> None:
        self._request("POST", "videos/rate", {"id": video_id, "rating": rating})

    def get_video_rating(self, video_ids: list[str]) -> list[dict]:
        data = self._request("GET", "videos/getRating", {"id": video_ids}) or {}
        return data.get("items") or []

    def report_video_abuse(
        self,
        video_id: str,
        reason_id: str,
        secondary_reason_id: Optional[str] = None,
        comments: Optional[str] = None,
    ) -> None:
        body = _compact({
            "videoId": video_id,
            "reasonId": reason_id,
            "secondaryReasonId": secondary_reason_id or None,
            "comments": comments or None,
        })
        self._request("POST", "videos/reportAbuse", body=body)

    # -------------------------------------------------------------------------
    # Channels
    # -------------------------------------------------------------------------

    def get_my_channel(self, parts: Optional[list[str]] = None) -> dict:
        page = self._list("channels", {"part": _join(parts, CHANNEL_PARTS), "mine": True})
        return _first(page, "Channel", "mine")

    def list_channels(self, channel_ids: list[str], parts: Optional[list[str]] = None) -> Page:
        return self._list("channels", {
            "part": _join(parts, CHANNEL_PARTS),
            "id": channel_ids,
        })

    def get_channel(self, channel_id: str, parts: Optional[list[str]] = None) -> dict:
        return _first(self.list_channels([channel_id], parts), "Channel", channel_id)

    def list_channels_by_username(self, username: str, parts: Optional[list[str]] = None) -> Page:
        return self._list("channels", {
            "part": _join(parts, CHANNEL_PARTS),
            "forUsername": username,
        })

    def get_channel_by_username(self, username: str, parts: Optional[list[str]] = None) -> dict:
        return _first(self.list_channels_by_username(username, parts), "Channel", username)

    def update_channel(self, channel_id: str, update: ChannelUpdate) -> dict:
        """Update channel branding, keeping every branding field not supplied."""
        current = self.get_channel(channel_id, ["brandingSettings"])
        branding = dict(current.get("brandingSettings") or {})
        current_channel = branding.get("channel") or {}
        # Fields outside the editable set (e.g. title) are sent back unchanged
        branding["channel"] = {**current_channel, **_merge({
            "description": update.description,
            "keywords": update.keywords,
            "defaultLanguage": update.default_language,
            "country": update.country,
            "unsubscribedTrailer": update.unsubscribed_trailer,
        }, current_channel)}

        body = {"id": channel_id, "brandingSettings": branding}
        return self._request("PUT", "channels", {"part": "brandingSettings"}, body)

    def search_channels(self, params: SearchParams) -> Page:
        return self.search(replace(params, type="channel"))

    # -------------------------------------------------------------------------
    # Playlists
    # -------------------------------------------------------------------------

    def list_my_playlists(
        self,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
        parts: Optional[list[str]] = None,
    ) -> Page:
        return self._list("playlists", {
            "part": _join(parts, PLAYLIST_PARTS),
            "mine": True,
            "maxResults": max_results or DEFAULT_PAGE_SIZE,
            "pageToken": page_token,
        })

    def list_channel_playlists(
        self,
        channel_id: str,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
        parts: Optional[list[str]] = None,
    ) -> Page:
        return self._list("playlists", {
            "part": _join(parts, PLAYLIST_PARTS),
            "channelId": channel_id,
            "maxResults": max_results or DEFAULT_PAGE_SIZE,
            "pageToken": page_token,
        })

    def get_playlist(self, playlist_id: str, parts: Optional[list[str]] = None) -> dict:
        page = self._list("playlists", {
            "part": _join(parts, PLAYLIST_PARTS),
            "id": playlist_id,
        })
        return _first(page, "Playlist", playlist_id)

    def create_playlist(self, playlist: PlaylistCreate) -> dict:
        body = {
            "snippet": _compact({
                "title": playlist.title,
                "description": playlist.description,
                "defaultLanguage": playlist.default_language,
            }),
            "status": {"privacyStatus": playlist.privacy_status or "private"},
        }
        return self._request("POST", "playlists", {"part": "snippet,status"}, body)

    def update_playlist(self, playlist_id: str, update: PlaylistUpdate) -> dict:
        current = self.get_playlist(playlist_id, ["snippet", "status"])
        body = {
            "id": playlist_id,
            "snippet": _merge({
                "title": update.title,
                "description": update.description,
                "defaultLanguage": update.default_language,
            }, current.get("snippet")),
            "status": _merge({
                "privacyStatus": update.privacy_status,
            }, current.get("status")),
        }
        return self._request("PUT", "playlists", {"part": "snippet,status"}, body)

    def delete_playlist(self, playlist_id: str) -> None:
        self._request("DELETE", "playlists", {"id": playlist_id})

    def search_playlists(self, params: SearchParams) -> Page:
        return self.search(replace(params, type="playlist"))

    # -------------------------------------------------------------------------
    # Playlist items
    # -------------------------------------------------------------------------

    def list_playlist_items(
        self,
        playlist_id: str,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
        parts: Optional[list[str]] = None,
    ) -> Page:
        return self._list("playlistItems", {
            "part": _join(parts, PLAYLIST_ITEM_PARTS),
            "playlistId": playlist_id,
            "maxResults": max_results or DEFAULT_PAGE_SIZE,
            "pageToken": page_token,
        })

    def add_video_to_playlist(
        self,
        playlist_id: str,
        video_id: str,
        position: Optional[int] = None,
    ) -> dict:
        snippet: dict[str, Any] = {
            "playlistId": playlist_id,
            "resourceId": {"kind": "youtube#video", "videoId": video_id},
        }
        if position is not None:
            snippet["position"] = position
        return self._request("POST", "playlistItems", {"part": "snippet"}, {"snippet": snippet})

    def update_playlist_item(
        self,
        playlist_item_id: str,
        playlist_id: str,
        video_id: str,
        position: int,
    ) -> dict:
        body = {
            "id": playlist_item_id,
            "snippet": {
                "playlistId": playlist_id,
                "resourceId": {"kind": "youtube#video", "videoId": video_id},
                "position": position,
            },
        }
        return self._request("PUT", "playlistItems", {"part": "snippet"}, body)

    def remove_from_playlist(self, playlist_item_id: str) -> None:
        self._request("DELETE", "playlistItems", {"id": playlist_item_id})

    # -------------------------------------------------------------------------
    # Comments
    # -------------------------------------------------------------------------

    def list_comment_threads(self, query: CommentThreadQuery) -> Page:
        params: dict[str, Any] = {
            "part": "snippet,replies",
            "maxResults": query.max_results or DEFAULT_PAGE_SIZE,
            "pageToken": query.page_token,
            "order": query.order,
            "searchTerms": query.search_terms,
            "moderationStatus": query.moderation_status,
        }
        if query.video_id:
            params["videoId"] = query.video_id
        elif query.channel_id:
            params["channelId"] = query.channel_id
        elif query.all_threads_related_to_channel_id:
            params["allThreadsRelatedToChannelId"] = query.all_threads_related_to_channel_id
        return self._list("commentThreads", params)

    def get_comment_thread(self, thread_id: str, parts: Optional[list[str]] = None) -> dict:
        page = self._list("commentThreads", {
            "part": _join(parts, COMMENT_THREAD_PARTS),
            "id": thread_id,
        })
        return _first(page, "CommentThread", thread_id)

    def post_comment(self, channel_id: str, video_id: Optional[str], text: str) -> dict:
        snippet: dict[str, Any] = {
            "channelId": channel_id,
            "topLevelComment": {"snippet": {"textOriginal": text}},
        }
        if video_id:
            snippet["videoId"] = video_id
        return self._request("POST", "commentThreads", {"part": "snippet"}, {"snippet": snippet})

    def list_comments(
        self,
        parent_id: str,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
        parts: Optional[list[str]] = None,
    ) -> Page:
        return self._list("comments", {
            "part": _join(parts, COMMENT_PARTS),
            "parentId": parent_id,
            "maxResults": max_results or DEFAULT_PAGE_SIZE,
            "pageToken": page_token,
        })

    def reply_to_comment(self, parent_id: str, text: str) -> dict:
        body = {"snippet": {"parentId": parent_id, "textOriginal": text}}
        return self._request("POST", "comments", {"part": "snippet"}, body)

    def update_comment(self, comment_id: str, text: str) -> dict:
        body = {"id": comment_id, "snippet": {"textOriginal": text}}
        return self._request("PUT", "comments", {"part": "snippet"}, body)

    def delete_comment(self, comment_id: str) -> None:
        self._request("DELETE", "comments", {"id": comment_id})

    def set_comment_moderation_status(
        self,
        comment_ids: list[str],
        moderation_status: str,
        ban_author: bool = False,
    ) -> None:
        self._request("POST", "comments/setModerationStatus", {
            "id": comment_ids,
            "moderationStatus": moderation_status,
            "banAuthor": ban_author,
        })

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    def list_my_subscriptions(
        self,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
        parts: Optional[list[str]] = None,
    ) -> Page:
        return self._list("subscriptions", {
            "part": _join(parts, SUBSCRIPTION_PARTS),
            "mine": True,
            "maxResults": max_results or DEFAULT_PAGE_SIZE,
            "pageToken": page_token,
        })

    def list_my_subscribers(
        self,
        max_results: Optional[int] = None,
        page_token: Optional[str] = None,
        parts: Optional[list[str]] = None,
    ) -> Page:
        return self._list("subscriptions", {
            "part": _join(parts, SUBSCRIBER_PARTS),
            "mySubscribers": True,
            "maxResults": max_results or DEFAULT_PAGE_SIZE,
            "pageToken": page_token,
        })

    def subscribe(self, channel_id: str) -> dict:
        body = {"snippet": {"resourceId": {"kind": "youtube#channel", "channelId": channel_id}}}
        return self._request("POST", "subscriptions", {"part": "snippet"}, body)

    def unsubscribe(self, subscription_id: str) -> None:
        self._request("DELETE", "subscriptions", {"id": subscription_id})

    # -------------------------------------------------------------------------
    # Captions
    # -------------------------------------------------------------------------

    def list_captions(self, video_id: str, parts: Optional[list[str]] = None) -> Page:
        return self._list("captions", {
            "part": _join(parts, CAPTION_PARTS),
            "videoId": video_id,
        })

    def download_caption(
        self,
        caption_id: str,
        fmt: Optional[str] = None,
        language: Optional[str] = None,
    ) -> str:
        """Download a caption track as raw text, optionally converted or translated."""
        response = self._send(
            "GET",
            f"{self.BASE_URL}/captions/{caption_id}",
            {"tfmt": fmt, "tlang": language},
        )
        return response.text

    def insert_caption(self, video_id: str, caption: CaptionInsert) -> dict:
        metadata = {
            "snippet": {
                "videoId": video_id,
                "language": caption.language,
                "name": caption.name,
                "isDraft": bool(caption.is_draft),
            },
        }
        return self._upload("POST", "captions", metadata, caption.caption_data)

    def update_caption(self, caption_id: str, update: CaptionUpdate) -> dict:
        """
        Update a caption track.

        New caption content goes through the multipart upload endpoint;
        a metadata-only change is a plain JSON PUT.
        """
        body: dict[str, Any] = {"id": caption_id}
        if update.is_draft is not None:
            body["snippet"] = {"isDraft": update.is_draft}

        if update.caption_data:
            return self._upload("PUT", "captions", body, update.caption_data)
        return self._request("PUT", "captions", {"part": "snippet"}, body)

    def delete_caption(self, caption_id: str) -> None:
        self._request("DELETE", "captions", {"id": caption_id})

    # -------------------------------------------------------------------------
    # Activities
    # -------------------------------------------------------------------------

    def list_activities(self, query: ActivityQuery) -> Page:
        params: dict[str, Any] = {
            "part": "snippet,contentDetails",
            "maxResults": query.max_results or DEFAULT_PAGE_SIZE,
            "pageToken": query.page_token,
            "publishedAfter": query.published_after,
            "publishedBefore": query.published_before,
            "regionCode": query.region_code,
        }
        if query.mine:
            params["mine"] = True
        elif query.channel_id:
            params["channelId"] = query.channel_id
        return self._list("activities", params)

    # -------------------------------------------------------------------------
    # Channel sections
    # -------------------------------------------------------------------------

    def list_channel_sections(self, channel_id: str, parts: Optional[list[str]] = None) -> Page:
        return self._list("channelSections", {
            "part": _join(parts, CHANNEL_SECTION_PARTS),
            "channelId": channel_id,
        })

    def insert_channel_section(self, section: ChannelSectionInput) -> dict:
        return self._request(
            "POST", "channelSections", {"part": "snippet,contentDetails"}, section.to_body()
        )

    def update_channel_section(self, section_id: str, section: ChannelSectionInput) -> dict:
        body = {"id": section_id, **section.to_body()}
        return self._request("PUT", "channelSections", {"part": "snippet,contentDetails"}, body)

    def delete_channel_section(self, section_id: str) -> None:
        self._request("DELETE", "channelSections", {"id": section_id})

    # -------------------------------------------------------------------------
    # Reference data
    # -------------------------------------------------------------------------

    def list_languages(self, hl: Optional[str] = None) -> Page:
        return self._list("i18nLanguages", {"part": "snippet", "hl": hl})

    def list_regions(self, hl: Optional[str] = None) -> Page:
        return self._list("i18nRegions", {"part": "snippet", "hl": hl})

    def list_video_categories(self, region_code: str = "US", hl: Optional[str] = None) -> Page:
        return self._list("videoCategories", {
            "part": "snippet",
            "regionCode": region_code or "US",
            "hl": hl,
        })

    def list_video_abuse_report_reasons(self, hl: Optional[str] = None) -> Page:
        return self._list("videoAbuseReportReasons", {"part": "snippet", "hl": hl})

    # -------------------------------------------------------------------------
    # Members
    # -------------------------------------------------------------------------

    def list_members(self, query: MemberQuery) -> Page:
        return self._list("members", {
            "part": "snippet",
            "mode": query.mode or "all_current",
            "maxResults": query.max_results or DEFAULT_PAGE_SIZE,
            "pageToken": query.page_token,
            "hasAccessToLevel": query.has_access_to_level,
            "filterByMemberChannelId": query.filter_by_member_channel_id,
        })

    def list_membership_levels(self, parts: Optional[list[str]] = None) -> Page:
        return self._list("membershipsLevels", {"part": _join(parts, MEMBERSHIP_LEVEL_PARTS)})

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def search(self, params: SearchParams) -> Page:
        """
        Search for videos, channels or playlists.

        Args:
            params: Search filters; unset filters are not sent

        Returns:
            Page of search results
        """
        return self._list("search", params.to_params())
