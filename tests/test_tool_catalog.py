"""Tests for tool declarations and argument validation."""

import pytest

from api_errors import ErrorKind, YouTubeAPIError
from tool_catalog import TOOLS, TOOLS_BY_NAME, validate_arguments


def test_tool_names_unique_and_prefixed():
    names = [tool.name for tool in TOOLS]

    assert len(names) == len(set(names))
    assert all(name.startswith("youtube_") for name in names)


def test_required_fields_are_declared():
    for tool in TOOLS:
        properties = tool.inputSchema["properties"]
        for name in tool.inputSchema["required"]:
            assert name in properties, f"{tool.name}.{name}"


def test_defaults_applied():
    args = validate_arguments(TOOLS_BY_NAME["youtube_list_my_playlists"], {})

    assert args["format"] == "json"
    assert args["maxResults"] == 25
    assert args["parts"] == ["snippet", "contentDetails", "status"]


def test_default_lists_are_copies():
    tool = TOOLS_BY_NAME["youtube_get_video"]

    args = validate_arguments(tool, {"videoId": "v1"})
    args["parts"].append("player")

    assert "player" not in tool.inputSchema["properties"]["parts"]["default"]


def test_unknown_arguments_ignored():
    args = validate_arguments(TOOLS_BY_NAME["youtube_delete_video"], {"videoId": "v1", "extra": 1})

    assert args == {"videoId": "v1"}


def test_missing_required():
    with pytest.raises(YouTubeAPIError) as exc:
        validate_arguments(TOOLS_BY_NAME["youtube_rate_video"], {"videoId": "v1"})

    assert exc.value.kind is ErrorKind.VALIDATION
    assert exc.value.details == {"rating": ["Required"]}


def test_empty_string_counts_as_missing():
    with pytest.raises(YouTubeAPIError) as exc:
        validate_arguments(TOOLS_BY_NAME["youtube_get_video"], {"videoId": ""})

    assert "videoId" in exc.value.details


def test_too_many_ids():
    ids = [f"v{i}" for i in range(51)]

    with pytest.raises(YouTubeAPIError) as exc:
        validate_arguments(TOOLS_BY_NAME["youtube_list_videos"], {"videoIds": ids})

    assert exc.value.details["videoIds"] == ["At most 50 items allowed"]


def test_wrong_type():
    with pytest.raises(YouTubeAPIError) as exc:
        validate_arguments(TOOLS_BY_NAME["youtube_list_videos"], {"videoIds": "v1"})

    assert exc.value.details["videoIds"] == ["Expected array, got str"]


def test_boolean_is_not_an_integer():
    with pytest.raises(YouTubeAPIError):
        validate_arguments(TOOLS_BY_NAME["youtube_search"], {"query": "q", "maxResults": True})


@pytest.mark.parametrize(
    "tool, value, ok",
    [
        ("youtube_search", 50, True),
        ("youtube_search", 51, False),
        ("youtube_search", 0, False),
        ("youtube_list_comment_replies", 100, True),
        ("youtube_list_members", 1000, True),
        ("youtube_list_members", 1001, False),
    ],
)
def test_max_results_bounds(tool, value, ok):
    args = {"maxResults": value, "query": "q", "parentId": "p"}
    schema_tool = TOOLS_BY_NAME[tool]

    if ok:
        assert validate_arguments(schema_tool, args)["maxResults"] == value
    else:
        with pytest.raises(YouTubeAPIError):
            validate_arguments(schema_tool, args)


def test_enum_rejected():
    with pytest.raises(YouTubeAPIError) as exc:
        validate_arguments(TOOLS_BY_NAME["youtube_rate_video"], {"videoId": "v", "rating": "love"})

    assert exc.value.details["rating"] == ["Must be one of: like, dislike, none"]


def test_array_items_must_be_strings():
    with pytest.raises(YouTubeAPIError) as exc:
        validate_arguments(TOOLS_BY_NAME["youtube_list_videos"], {"videoIds": ["v1", 2]})

    assert exc.value.details == {"videoIds": ["Expected string, got int"]}


def test_null_arguments_treated_as_absent():
    args = validate_arguments(
        TOOLS_BY_NAME["youtube_search"],
        {"query": "q", "pageToken": None, "maxResults": None},
    )

    assert "pageToken" not in args
    assert args["maxResults"] == 25


def test_several_problems_reported_together():
    with pytest.raises(YouTubeAPIError) as exc:
        validate_arguments(
            TOOLS_BY_NAME["youtube_set_comment_moderation_status"],
            {"commentIds": [f"c{i}" for i in range(60)], "banAuthor": "yes"},
        )

    assert exc.value.details == {
        "commentIds": ["At most 50 items allowed"],
        "moderationStatus": ["Required"],
        "banAuthor": ["Expected boolean, got str"],
    }
    assert exc.value.message.startswith("Invalid arguments for youtube_set_comment_moderation_status")


def test_parameter_named_like_a_property():
    schema = TOOLS_BY_NAME["youtube_insert_caption"].inputSchema

    assert TOOLS_BY_NAME["youtube_insert_caption"].description.startswith("Upload a caption track")
    assert schema["properties"]["name"]["type"] == "string"
    assert TOOLS_BY_NAME["youtube_update_video"].inputSchema["properties"]["description"]["type"] == "string"
