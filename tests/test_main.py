"""Tests for logging configuration, the tool server and the CLI entrypoint."""

from __future__ import annotations

import logging

import httpx
import pytest
import structlog
from structlog.testing import capture_logs

from video_search import main as main_module
from video_search.logging import configure_logging, resolve_level
from video_search.server import ToolServer

from tests.helpers import SAMPLE_RESULTS, json_handler


def test_configure_logging_outputs_json(capsys):
    configure_logging()
    logger = structlog.get_logger()
    logger.info("unit-test", foo="bar")
    out = capsys.readouterr().out
    assert "unit-test" in out
    assert "foo" in out


def test_server_log_emits_structured_event(settings):
    server = ToolServer(settings=settings, http_client=httpx.AsyncClient())
    with capture_logs() as logs:
        server.log('No video results found for "x"')
    assert logs == [
        {"event": "server_log", "log_level": "info", "message": 'No video results found for "x"'}
    ]


@pytest.mark.asyncio
async def test_server_registers_video_tool_and_logs_empty_results(settings):
    handler = json_handler({"type": "video", "results": []})
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with ToolServer(settings=settings, http_client=client) as server:
        assert server.registry.names() == ["brave_video_search"]
        with capture_logs() as logs:
            result = await server.video_search_tool().execute({"query": "zzz"})

    assert result.text == 'No video results found for "zzz"'
    assert [entry["message"] for entry in logs if entry["event"] == "server_log"] == [
        'No video results found for "zzz"'
    ]
    assert not client.is_closed
    await client.aclose()


@pytest.mark.asyncio
async def test_server_closes_owned_client(settings):
    async with ToolServer(settings=settings) as server:
        client = server.http_client
    assert client.is_closed


def _patch_server(monkeypatch, settings, handler):
    def _factory(settings=None, http_client=None):
        return ToolServer(
            settings=settings,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )

    monkeypatch.setattr(main_module, "get_settings", lambda: settings)
    monkeypatch.setattr(main_module, "ToolServer", _factory)
    monkeypatch.setattr(main_module, "configure_logging", lambda level=None: None)


@pytest.mark.asyncio
async def test_main_prints_results(monkeypatch, capsys, settings):
    handler = json_handler({"type": "video", "results": SAMPLE_RESULTS})
    _patch_server(monkeypatch, settings, handler)

    exit_code = await main_module.main(["cats", "--count", "3", "--freshness", "pm"])

    assert exit_code == 0
    assert "Title: Funny cats compilation" in capsys.readouterr().out
    assert handler.last_params == {
        "q": "cats",
        "count": "3",
        "safesearch": "strict",
        "freshness": "pm",
    }


@pytest.mark.asyncio
async def test_main_reports_validation_errors(monkeypatch, capsys, settings):
    handler = json_handler({"type": "video", "results": SAMPLE_RESULTS})
    _patch_server(monkeypatch, settings, handler)

    exit_code = await main_module.main(["cats", "--count", "25"])

    assert exit_code == 1
    assert "count" in capsys.readouterr().err
    assert handler.requests == []


@pytest.mark.asyncio
async def test_main_passes_empty_freshness_to_validation(monkeypatch, capsys, settings):
    handler = json_handler({"type": "video", "results": SAMPLE_RESULTS})
    _patch_server(monkeypatch, settings, handler)

    exit_code = await main_module.main(["cats", "--freshness", ""])

    assert exit_code == 1
    assert "YYYY-MM-DDtoYYYY-MM-DD" in capsys.readouterr().err
    assert handler.requests == []


@pytest.mark.asyncio
async def test_main_configures_logging_from_settings(monkeypatch, settings):
    handler = json_handler({"type": "video", "results": SAMPLE_RESULTS})
    _patch_server(monkeypatch, settings.model_copy(update={"log_level": "WARNING"}), handler)
    levels: list[str] = []
    monkeypatch.setattr(main_module, "configure_logging", levels.append)

    assert await main_module.main(["cats"]) == 0
    assert levels == ["WARNING"]


def test_configure_logging_filters_below_level(capsys):
    try:
        configure_logging("warning")
        logger = structlog.get_logger()
        logger.info("hidden-event")
        logger.warning("shown-event")
        out = capsys.readouterr().out
    finally:
        configure_logging()
    assert "hidden-event" not in out
    assert "shown-event" in out


def test_resolve_level_rejects_unknown_names():
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level(logging.ERROR) == logging.ERROR
    with pytest.raises(ValueError):
        resolve_level("chatty")
