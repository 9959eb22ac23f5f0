"""Tests for environment-based configuration."""

import pytest

from config import DEFAULT_NEWS_API_URL, Settings
from exceptions import ConfigError

_VARS = (
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHANNEL_ID",
    "TELEGRAM_WEBHOOK_SECRET",
    "NEWS_API_URL_BASE",
    "NEWS_API_URL",
    "NEWS_API_TIMEOUT_SECONDS",
    "CRON_SECRET",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings.from_env(dotenv=False)
    assert settings.telegram_bot_token == ""
    assert settings.news_api_url == DEFAULT_NEWS_API_URL
    assert settings.request_timeout == 10.0
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", " 123:abc ")
    monkeypatch.setenv("TELEGRAM_CHANNEL_ID", "@headlines")
    monkeypatch.setenv("NEWS_API_URL_BASE", "https://news.example.com/news")
    monkeypatch.setenv("NEWS_API_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env(dotenv=False)

    assert settings.telegram_bot_token == "123:abc"
    assert settings.telegram_channel_id == "@headlines"
    assert settings.news_api_base_url == "https://news.example.com/news"
    assert settings.request_timeout == 2.5
    assert settings.log_level == "DEBUG"


def test_empty_news_url_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("NEWS_API_URL", "")
    assert Settings.from_env(dotenv=False).news_api_url == DEFAULT_NEWS_API_URL


@pytest.mark.parametrize("value", ["abc", "0", "-3", "nan", "inf", "-inf"])
def test_invalid_timeout(monkeypatch, value):
    monkeypatch.setenv("NEWS_API_TIMEOUT_SECONDS", value)
    with pytest.raises(ConfigError):
        Settings.from_env(dotenv=False)


def test_require_lists_every_missing_variable():
    settings = Settings(telegram_channel_id="@headlines")
    with pytest.raises(ConfigError) as exc_info:
        settings.require("telegram_bot_token", "telegram_channel_id", "news_api_base_url")
    assert exc_info.value.missing == ["TELEGRAM_BOT_TOKEN", "NEWS_API_URL_BASE"]


def test_require_passes_when_present():
    Settings(telegram_bot_token="123:abc").require("telegram_bot_token")


def test_unknown_setting_name():
    with pytest.raises(AttributeError):
        Settings().missing("nope")
