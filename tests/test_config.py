from __future__ import annotations

from video_search.config import DEFAULT_BASE_URL, ToolSettings, get_settings


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("BRAVE_API_KEY", "env-token")
    monkeypatch.setenv("BRAVE_BASE_URL", "https://proxy.example/brave/")
    monkeypatch.setenv("BRAVE_REQUEST_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("BRAVE_ENVIRONMENT", "dev")

    settings = ToolSettings(_env_file=None)

    assert settings.api_key.get_secret_value() == "env-token"
    assert settings.api_root() == "https://proxy.example/brave"
    assert settings.request_timeout_seconds == 5
    assert settings.environment == "dev"


def test_settings_defaults(monkeypatch):
    for name in ("BRAVE_API_KEY", "BRAVE_BASE_URL", "BRAVE_ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)

    settings = ToolSettings(_env_file=None)

    assert settings.api_key is None
    assert settings.api_root() == DEFAULT_BASE_URL
    assert settings.environment == "prod"


def test_blank_api_key_is_treated_as_missing():
    assert ToolSettings(_env_file=None, api_key="  ").api_key is None


def test_get_settings_is_cached(monkeypatch):
    get_settings.cache_clear()
    monkeypatch.setenv("BRAVE_API_KEY", "cached")
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("BRAVE_LOG_LEVEL", "debug")
    assert ToolSettings(_env_file=None).log_level == "DEBUG"
    monkeypatch.delenv("BRAVE_LOG_LEVEL")
    assert ToolSettings(_env_file=None).log_level == "INFO"
