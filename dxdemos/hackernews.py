"""Hacker News data model, story summaries and an API client."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

import requests

from .shop import _get, _list, _str

BASE_API_URL = "https://hacker-news.firebaseio.com/v0/"
ITEM_API = "item/"
USER_API = "user/"
COMMENT_DEPTH = 1

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _check_i64(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    if not _I64_MIN <= value <= _I64_MAX:
        raise ValueError(f"{what} is out of range: {value!r}")
    return value


def _i64(data: Any, key: str) -> int:
    return _check_i64(_get(data, key), f"field `{key}`")


def _i64_list(data: Any, key: str) -> list[int]:
    return [_check_i64(item, f"item of `{key}`") for item in _list(data, key)]


def _opt_str(data: Any, key: str) -> str | None:
    if not _has(data, key):
        return None
    value = data[key]
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string, got {value!r}")
    return value


def _timestamp(data: Any, key: str) -> datetime:
    seconds = _i64(data, key)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ValueError(f"field `{key}` is not a valid timestamp: {seconds!r}") from None


def _has(data: Any, key: str) -> bool:
    return isinstance(data, Mapping) and key in data


def _or_default(data: Any, key: str, read: Callable[[Any, str], Any], default: Any) -> Any:
    return read(data, key) if _has(data, key) else default


def _trim_start_matches(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


@dataclass
class PreviewState:
    """The story currently shown in the preview pane, if any."""

    active_story: int | None = None

    @classmethod
    def parse(cls, text: str) -> PreviewState:
        """Parse a story id; raise ValueError when it is not a 64-bit integer."""
        stripped = text[1:] if text[:1] in "+-" else text
        if not stripped or not stripped.isascii() or not stripped.isdigit():
            raise ValueError(f"invalid story id: {text!r}")
        return cls(active_story=_check_i64(int(text), "story id"))

    def __str__(self) -> str:
        return "" if self.active_story is None else str(self.active_story)


@dataclass
class StoryItem:
    id: int
    title: str
    url: str | None
    text: str | None
    time: datetime
    type: str
    by: str = ""
    score: int = 0
    descendants: int = 0
    kids: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StoryItem:
        return cls(
            id=_i64(data, "id"),
            title=_str(data, "title"),
            url=_opt_str(data, "url"),
            text=_opt_str(data, "text"),
            by=_or_default(data, "by", _str, ""),
            score=_or_default(data, "score", _i64, 0),
            descendants=_or_default(data, "descendants", _i64, 0),
            time=_timestamp(data, "time"),
            kids=_or_default(data, "kids", _i64_list, None) or [],
            type=_str(data, "type"),
        )


@dataclass
class CommentData:
    id: int
    time: datetime
    type: str
    by: str = ""
    text: str = ""
    kids: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CommentData:
        return cls(
            id=_i64(data, "id"),
            by=_or_default(data, "by", _str, ""),
            text=_or_default(data, "text", _str, ""),
            time=_timestamp(data, "time"),
            kids=_or_default(data, "kids", _i64_list, None) or [],
            type=_str(data, "type"),
        )


@dataclass
class StoryPageData:
    """A story together with any comments delivered alongside it."""

    item: StoryItem
    comments: list[CommentData] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StoryPageData:
        item = StoryItem.from_dict(data)
        raw_comments = _or_default(data, "comments", _list, None) or []
        return cls(item=item, comments=[CommentData.from_dict(c) for c in raw_comments])


@dataclass(frozen=True)
class StorySummary:
    """The text shown for one entry of the story list."""

    id: int
    title: str
    url: str
    hostname: str
    by: str
    score: str
    comments: str
    time: str


def _format_time(moment: datetime) -> str:
    hour12 = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%m/%d/%y} {hour12:>2}:{moment:%M} {meridiem}"


def summarize_story(item: StoryItem) -> StorySummary:
    """Build the list-entry texts for a story."""
    url = item.url or ""
    hostname = url
    for prefix in ("https://", "http://", "www."):
        hostname = _trim_start_matches(hostname, prefix)
    score = f"{item.score} {' point' if item.score == 1 else ' points'}"
    count = len(item.kids)
    comments = f"{count} {' comment' if count == 1 else ' comments'}"
    return StorySummary(
        id=item.id,
        title=item.title,
        url=url,
        hostname=hostname,
        by=item.by,
        score=score,
        comments=comments,
        time=_format_time(item.time),
    )


class HackerNewsClient:
    """Reads top stories, stories and comments from the Hacker News API."""

    def __init__(
        self,
        base_url: str = BASE_API_URL,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get_json(self, path: str) -> Any:
        return self.session.get(f"{self.base_url}{path}", timeout=self.timeout).json()

    def top_stories(self, limit: int = 30) -> list[int]:
        """Ids of the current top stories, at most `limit` of them."""
        payload = self._get_json("topstories.json")
        if not isinstance(payload, list):
            raise ValueError(f"expected a list, got {type(payload).__name__}")
        ids = [_check_i64(item, "story id") for item in payload]
        return ids[: max(limit, 0)]

    def get_story(self, story_id: int) -> StoryPageData:
        return StoryPageData.from_dict(self._get_json(f"{ITEM_API}{story_id}.json"))

    def get_comment(self, comment_id: int) -> CommentData:
        return CommentData.from_dict(self._get_json(f"{ITEM_API}{comment_id}.json"))