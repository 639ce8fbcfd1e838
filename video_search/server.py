"""Host object wiring settings, the HTTP client and registered tools together."""

from __future__ import annotations

from typing import Any

import httpx

from video_search.agents.toolkit import ToolRegistry, VideoSearchTool, video_search_template
from video_search.config import ToolSettings, get_settings
from video_search.logging import logger
from video_search.services.video_search import VideoSearchService


class ToolServer:
    """Owns the shared HTTP client and the log sink tools report to."""

    def __init__(
        self,
        settings: ToolSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient()
        self._video_search_tool = VideoSearchTool(
            self, VideoSearchService(self.http_client, self.settings)
        )
        self.registry = ToolRegistry()
        self.registry.register(
            video_search_template(self._video_search_tool, self.settings.environment)
        )

    def log(self, message: str, level: str = "info", **fields: Any) -> None:
        log_method = getattr(logger, level, logger.info)
        log_method("server_log", message=message, **fields)

    def video_search_tool(self) -> VideoSearchTool:
        return self._video_search_tool

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> ToolServer:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["ToolServer"]
