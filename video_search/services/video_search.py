"""Brave Search video endpoint integration."""

from __future__ import annotations

from enum import Enum
from typing import Any

import httpx
from pydantic import ValidationError as SchemaError

from video_search.config import ToolSettings
from video_search.domain.models import VideoSearchApiResponse, VideoSearchOptions
from video_search.logging import logger
from video_search.services.exceptions import ConfigurationError, UpstreamError

VIDEO_SEARCH_PATH = "/videos/search"


def serialize_options(options: VideoSearchOptions) -> dict[str, str]:
    """Render the set options as query-string values, skipping unset ones."""

    params: dict[str, str] = {}
    for key in VideoSearchOptions.model_fields:
        value = getattr(options, key)
        if value is None:
            continue
        params[key] = _to_text(value)
    return params


def _to_text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class _BaseToolService:
    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ToolSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ToolSettings()

    @staticmethod
    def _read_secret(secret: Any) -> str | None:
        if not secret:
            return None
        try:
            return secret.get_secret_value()
        except AttributeError:
            return str(secret)


class VideoSearchService(_BaseToolService):
    """Issues a single video search request per call. Never retries."""

    def endpoint(self) -> str:
        return f"{self._settings.api_root()}{VIDEO_SEARCH_PATH}"

    def headers(self) -> dict[str, str]:
        api_key = self._read_secret(self._settings.api_key)
        if not api_key:
            raise ConfigurationError("Brave Search API key is not configured.")
        return {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "X-Subscription-Token": api_key,
        }

    def build_params(self, query: str, options: VideoSearchOptions) -> dict[str, str]:
        return {"q": query, **serialize_options(options)}

    async def search(
        self, query: str, options: VideoSearchOptions | None = None
    ) -> VideoSearchApiResponse:
        headers = self.headers()
        params = self.build_params(query, options or VideoSearchOptions())
        logger.debug("video_search_request", endpoint=self.endpoint(), params=params)

        try:
            response = await self._client.get(
                self.endpoint(),
                params=params,
                headers=headers,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            detail = exc.response.text[:500] if exc.response is not None else str(exc)
            status_code = exc.response.status_code if exc.response is not None else None
            logger.warning("video_search_failed", status_code=status_code, query=query)
            raise UpstreamError(
                f"Video search request failed ({status_code}): {detail}",
                status_code=status_code,
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("video_search_failed", error=str(exc), query=query)
            raise UpstreamError(f"Video search request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(
                "Video search response is not valid JSON.",
                status_code=response.status_code,
            ) from exc
        if not isinstance(data, dict):
            raise UpstreamError(
                "Video search response format is invalid.",
                status_code=response.status_code,
            )
        try:
            return VideoSearchApiResponse.model_validate(data)
        except SchemaError as exc:
            raise UpstreamError(
                f"Video search response format is invalid: {exc.error_count()} error(s)",
                status_code=response.status_code,
            ) from exc


__all__ = ["VIDEO_SEARCH_PATH", "VideoSearchService", "serialize_options"]
