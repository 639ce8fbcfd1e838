"""Test doubles shared across the test modules."""

from __future__ import annotations

from typing import Any, Callable

import httpx


class RecordingServer:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response_factory: Callable[[httpx.Request], httpx.Response]) -> None:
        self._factory = response_factory
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._factory(request)

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.requests[-1].url.params)


def json_handler(payload: Any, status_code: int = 200) -> RecordingHandler:
    return RecordingHandler(lambda request: httpx.Response(status_code, json=payload))


SAMPLE_RESULTS = [
    {
        "type": "video_result",
        "title": "Funny cats compilation",
        "url": "https://example.com/cats",
        "description": "The best cat videos",
        "age": "2 days ago",
        "thumbnail": {"src": "https://imgs.example/cats.jpg"},
        "video": {
            "duration": "10:02",
            "views": 1200,
            "creator": "CatChannel",
            "requires_subscription": False,
            "tags": ["cats", "funny"],
            "author": {"name": "Cat Person", "url": "https://example.com/u/cat"},
        },
    },
    {
        "title": "Cat care basics",
        "url": "https://example.com/care",
        "description": "How to look after a cat",
        "video": {"duration": "4:30", "views": "87", "creator": "VetTalk"},
    },
]
