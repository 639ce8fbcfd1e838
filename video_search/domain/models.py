"""Pydantic models for the Brave video search request and response shapes."""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

FRESHNESS_CODES: tuple[str, ...] = ("pd", "pw", "pm", "py")
FRESHNESS_RANGE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}to[0-9]{4}-[0-9]{2}-[0-9]{2}")
FRESHNESS_FORMAT_HINT = (
    "freshness must be one of pd, pw, pm, py or a date range "
    "in format YYYY-MM-DDtoYYYY-MM-DD"
)

MIN_COUNT = 1
MAX_COUNT = 20
DEFAULT_COUNT = 10


class SafeSearchLevel(str, Enum):
    OFF = "off"
    MODERATE = "moderate"
    STRICT = "strict"


class VideoSearchInput(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    query: str = Field(
        ...,
        min_length=1,
        description="The term to search the internet for videos of",
    )
    count: int = Field(
        default=DEFAULT_COUNT,
        ge=MIN_COUNT,
        le=MAX_COUNT,
        strict=True,
        description="The number of results to return, minimum 1, maximum 20",
    )
    freshness: str | None = Field(
        default=None,
        description=(
            "Filters search results by when they were discovered.\n"
            "The following values are supported:\n"
            "- pd: Discovered within the last 24 hours.\n"
            "- pw: Discovered within the last 7 Days.\n"
            "- pm: Discovered within the last 31 Days.\n"
            "- py: Discovered within the last 365 Days.\n"
            "- YYYY-MM-DDtoYYYY-MM-DD: Custom date range (e.g., 2022-04-01to2022-07-30)"
        ),
    )

    @field_validator("query")
    @classmethod
    def _query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("query must not be empty")
        return value

    @field_validator("freshness")
    @classmethod
    def _check_freshness(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if value in FRESHNESS_CODES or FRESHNESS_RANGE_PATTERN.fullmatch(value):
            return value
        raise ValueError(FRESHNESS_FORMAT_HINT)


class VideoSearchOptions(BaseModel):
    """Options the tool may forward to the video search endpoint.

    Field order is the order parameters are serialized in.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    country: str | None = None
    search_lang: str | None = None
    ui_lang: str | None = None
    count: int | None = None
    offset: int | None = None
    spellcheck: bool | None = None
    safesearch: SafeSearchLevel | None = None
    freshness: str | None = None


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class Profile(_UpstreamModel):
    name: str | None = None
    long_name: str | None = None
    url: str | None = None
    img: str | None = None


class Thumbnail(_UpstreamModel):
    src: str | None = None
    original: str | None = None


class MetaUrl(_UpstreamModel):
    scheme: str | None = None
    netloc: str | None = None
    hostname: str | None = None
    favicon: str | None = None
    path: str | None = None


class VideoData(_UpstreamModel):
    duration: str | None = None
    views: int | str | None = None
    creator: str | None = None
    publisher: str | None = None
    thumbnail: Thumbnail | None = None
    # Not part of every upstream response; each may be absent independently.
    requires_subscription: bool | None = None
    tags: list[str] | None = None
    author: Profile | None = None


class VideoResult(_UpstreamModel):
    type: str | None = None
    title: str | None = None
    url: str | None = None
    description: str | None = None
    age: str | None = None
    page_age: str | None = None
    fetched_content_timestamp: int | None = None
    thumbnail: Thumbnail | None = None
    meta_url: MetaUrl | None = None
    video: VideoData = Field(default_factory=VideoData)


class Query(_UpstreamModel):
    original: str | None = None
    altered: str | None = None
    cleaned: str | None = None
    spellcheck_off: bool | None = None
    show_strict_warning: bool | None = None


class VideoSearchApiResponse(_UpstreamModel):
    type: str | None = "video"
    query: Query | None = None
    results: list[VideoResult] = Field(default_factory=list)

    @field_validator("results", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        return value


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ToolTextResult(BaseModel):
    content: list[TextContent]

    @classmethod
    def from_text(cls, text: str) -> ToolTextResult:
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)


__all__ = [
    "DEFAULT_COUNT",
    "FRESHNESS_CODES",
    "FRESHNESS_FORMAT_HINT",
    "FRESHNESS_RANGE_PATTERN",
    "MAX_COUNT",
    "MIN_COUNT",
    "MetaUrl",
    "Profile",
    "Query",
    "SafeSearchLevel",
    "TextContent",
    "Thumbnail",
    "ToolTextResult",
    "VideoData",
    "VideoResult",
    "VideoSearchApiResponse",
    "VideoSearchInput",
    "VideoSearchOptions",
]
