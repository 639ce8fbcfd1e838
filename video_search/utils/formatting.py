"""Plain-text rendering of video search results for agents."""

from __future__ import annotations

from typing import Any, Sequence

from video_search.domain.models import VideoResult

RESULT_SEPARATOR = "\n---\n"


def _display(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def format_video_result(result: VideoResult) -> str:
    video = result.video
    lines = [
        f"Title: {_display(result.title)}",
        f"URL: {_display(result.url)}",
        f"Description: {_display(result.description)}",
        f"Age: {_display(result.age)}",
        f"Duration: {_display(video.duration)}",
        f"Views: {_display(video.views)}",
        f"Creator: {_display(video.creator)}",
    ]
    if video.requires_subscription is not None:
        lines.append(
            "Requires subscription" if video.requires_subscription else "No subscription"
        )
    if video.tags:
        lines.append(f"Tags: {', '.join(video.tags)}")
    if video.author is not None and video.author.name:
        lines.append(f"Author: {video.author.name}")
    thumbnail = result.thumbnail or video.thumbnail
    if thumbnail is not None and thumbnail.src:
        lines.append(f"Thumbnail: {thumbnail.src}")
    return "\n".join(lines)


def format_video_results(results: Sequence[VideoResult]) -> str:
    """Render every result in upstream order, separated by a horizontal rule."""

    return RESULT_SEPARATOR.join(format_video_result(result) for result in results or ())


__all__ = ["RESULT_SEPARATOR", "format_video_result", "format_video_results"]
