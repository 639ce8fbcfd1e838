"""Shared fixtures for the video search tool tests."""

from __future__ import annotations

import pytest
from pydantic import SecretStr

from video_search.config import ToolSettings

from tests.helpers import RecordingServer


@pytest.fixture
def settings() -> ToolSettings:
    return ToolSettings(
        api_key=SecretStr("test-token"),
        base_url="https://brave.example/res/v1",
        environment="prod",
    )


@pytest.fixture
def server() -> RecordingServer:
    return RecordingServer()
