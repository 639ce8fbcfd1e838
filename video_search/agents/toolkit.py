"""Video search tool and the registry exposing it to pydantic-ai agents."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from functools import wraps
from typing import Any, Iterable, Mapping, Protocol

from pydantic import BaseModel, Field
from pydantic import ValidationError as SchemaError
from pydantic_ai import Tool

from video_search.agents.tool_logging import (
    extract_tool_arguments,
    log_tool_event,
    serialize_tool_payload,
    should_log_tool_call,
)
from video_search.domain.models import (
    SafeSearchLevel,
    ToolTextResult,
    VideoSearchApiResponse,
    VideoSearchInput,
    VideoSearchOptions,
)
from video_search.logging import logger
from video_search.services.exceptions import ValidationError
from video_search.services.video_search import VideoSearchService
from video_search.utils.formatting import format_video_results

VIDEO_SEARCH_TOOL_NAME = "brave_video_search"
VIDEO_SEARCH_TOOL_DESCRIPTION = (
    "Searches for videos using the Brave Search API. "
    "Use this for video content, tutorials, or any media-related queries. "
    "Returns a list of videos with titles, URLs, and descriptions. "
    "Maximum 20 results per request."
)


class ServerLog(Protocol):
    def log(self, message: str) -> None: ...


class ToolErrorPayload(BaseModel):
    error_code: str = Field(..., description="Stable identifier for the failure")
    message: str = Field(..., description="Short diagnostic hint")
    details: dict[str, Any] | None = None


def no_results_message(query: str) -> str:
    return f'No video results found for "{query}"'


def _describe_errors(exc: SchemaError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "input"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


class VideoSearchTool:
    """Validate a query, run one video search and summarise the hits as text."""

    name = VIDEO_SEARCH_TOOL_NAME
    description = VIDEO_SEARCH_TOOL_DESCRIPTION
    input_schema = VideoSearchInput

    def __init__(self, server: ServerLog, service: VideoSearchService) -> None:
        self._server = server
        self._service = service

    def validate(self, data: VideoSearchInput | Mapping[str, Any]) -> VideoSearchInput:
        if isinstance(data, VideoSearchInput):
            return data
        if not isinstance(data, Mapping):
            raise ValidationError("Tool input must be an object with a 'query' field.")
        try:
            return VideoSearchInput.model_validate(dict(data))
        except SchemaError as exc:
            raise ValidationError(
                f"Invalid video search input: {_describe_errors(exc)}",
                errors=exc.errors(include_url=False, include_context=False),
            ) from exc

    async def search(self, request: VideoSearchInput) -> VideoSearchApiResponse:
        # SafeSearch is pinned to strict and is not exposed as an input.
        options = VideoSearchOptions(
            count=request.count,
            safesearch=SafeSearchLevel.STRICT,
            freshness=request.freshness,
        )
        return await self._service.search(request.query, options)

    async def execute(self, data: VideoSearchInput | Mapping[str, Any]) -> ToolTextResult:
        request = self.validate(data)
        response = await self.search(request)
        if not response.results:
            text = no_results_message(request.query)
            self._server.log(text)
            return ToolTextResult.from_text(text)
        return ToolTextResult.from_text(format_video_results(response.results))


class ToolHandler(Protocol):
    async def __call__(self, data: BaseModel) -> object: ...


@dataclass(slots=True)
class ToolTemplate:
    """Declarative metadata for registering a tool with the agent."""

    handler: ToolHandler
    name: str
    description: str
    takes_ctx: bool = False
    environment: str | None = None

    def build(self) -> Tool:
        original_handler = self.handler

        @wraps(original_handler)
        async def _logged_handler(*args: Any, **kwargs: Any) -> object:
            should_log = should_log_tool_call(self.environment)
            tool_input = extract_tool_arguments(args, kwargs, self.takes_ctx)
            if should_log:
                log_tool_event(self.name, "request", serialize_tool_payload(tool_input))
            try:
                result = await original_handler(*args, **kwargs)
            except Exception as exc:
                _log_tool_error(should_log, self.name, exc)
                return _wrap_tool_error(exc)
            if should_log:
                log_tool_event(self.name, "response", serialize_tool_payload(result))
            return result

        _logged_handler.__signature__ = inspect.signature(original_handler)

        return Tool(
            _logged_handler,
            name=self.name,
            description=self.description,
            takes_ctx=self.takes_ctx,
        )


def video_search_template(tool: VideoSearchTool, environment: str | None = None) -> ToolTemplate:
    async def brave_video_search(data: VideoSearchInput) -> ToolTextResult:
        return await tool.execute(data)

    return ToolTemplate(
        handler=brave_video_search,
        name=tool.name,
        description=tool.description,
        environment=environment,
    )


class ToolRegistry:
    def __init__(self, presets: Iterable[ToolTemplate] | None = None) -> None:
        self._templates: list[ToolTemplate] = list(presets or ())

    def register(self, template: ToolTemplate) -> None:
        if any(existing.name == template.name for existing in self._templates):
            raise ValueError(f"Tool '{template.name}' is already registered")
        self._templates.append(template)

    def names(self) -> list[str]:
        return [template.name for template in self._templates]

    def iter_tools(
        self,
        *,
        include: Iterable[str] | None = None,
        exclude: Iterable[str] | None = None,
    ) -> Iterable[Tool]:
        include_set = {name for name in include} if include else None
        exclude_set = {name for name in exclude} if exclude else set()
        tools: list[Tool] = []
        for template in self._templates:
            if include_set is not None and template.name not in include_set:
                continue
            if template.name in exclude_set:
                continue
            tools.append(template.build())
        return tuple(tools)


def _wrap_tool_error(exc: Exception) -> ToolErrorPayload:
    error_code = getattr(exc, "error_code", None) or exc.__class__.__name__
    message = str(exc) or error_code
    details: dict[str, Any] | None = None
    status_code = getattr(exc, "status_code", None)
    if status_code is not None:
        details = {"status_code": status_code}
    return ToolErrorPayload(error_code=error_code, message=message, details=details)


def _log_tool_error(should_log: bool, tool_name: str, exc: Exception) -> None:
    logger.warning("tool_execution_failed", tool=tool_name, error=str(exc))
    if should_log:
        log_tool_event(tool_name, "error", serialize_tool_payload({"error": str(exc)}))


__all__ = [
    "ServerLog",
    "ToolErrorPayload",
    "ToolRegistry",
    "ToolTemplate",
    "VIDEO_SEARCH_TOOL_DESCRIPTION",
    "VIDEO_SEARCH_TOOL_NAME",
    "VideoSearchTool",
    "no_results_message",
    "video_search_template",
]
