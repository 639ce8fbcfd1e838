"""Domain-specific exceptions."""

from __future__ import annotations

from typing import Any, Sequence


class ToolServiceError(RuntimeError):
    """Raised when an external integration fails or is misconfigured."""

    error_code = "TOOL_SERVICE_ERROR"


class ConfigurationError(ToolServiceError):
    error_code = "CONFIGURATION_ERROR"


class ValidationError(ToolServiceError):
    """Tool input was rejected before any request was sent."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, errors: Sequence[dict[str, Any]] = ()) -> None:
        super().__init__(message)
        self.errors = list(errors)


class UpstreamError(ToolServiceError):
    """The search endpoint failed, was unreachable, or returned a malformed body."""

    error_code = "UPSTREAM_ERROR"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "ToolServiceError",
    "ConfigurationError",
    "ValidationError",
    "UpstreamError",
]
