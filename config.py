"""
config.py
---------
Central configuration module. Loads environment variables (optionally
from a .env file) into a single immutable ``Settings`` object that is
built once at startup and passed to every component that needs it.
"""

import math
import os
from dataclasses import dataclass, fields

from dotenv import load_dotenv

from exceptions import ConfigError

DEFAULT_NEWS_API_URL = "https://airshorts.vercel.app/news?category=all"

# Attribute name -> environment variable, used in error messages.
_ENV_NAMES = {
    "telegram_bot_token": "TELEGRAM_BOT_TOKEN",
    "news_api_base_url": "NEWS_API_URL_BASE",
    "telegram_channel_id": "TELEGRAM_CHANNEL_ID",
    "news_api_url": "NEWS_API_URL",
    "webhook_secret": "TELEGRAM_WEBHOOK_SECRET",
    "cron_secret": "CRON_SECRET",
    "request_timeout": "NEWS_API_TIMEOUT_SECONDS",
    "log_level": "LOG_LEVEL",
}


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration.

    Attributes:
        telegram_bot_token: Bot API token, needed by both handlers.
        news_api_base_url: Base URL for ``/news`` lookups; ``?category=`` is appended.
        telegram_channel_id: Destination of the scheduled broadcast.
        news_api_url: Full URL fetched by the scheduled broadcast.
        webhook_secret: Expected ``X-Telegram-Bot-Api-Secret-Token`` header (optional).
        cron_secret: Expected ``Authorization: Bearer`` token for the broadcast (optional).
        request_timeout: Total timeout in seconds for news API requests.
        log_level: Root logging level name.
    """

    # ── Telegram ──────────────────────────────────────────
    telegram_bot_token: str = ""
    telegram_channel_id: str = ""
    webhook_secret: str = ""

    # ── News API ──────────────────────────────────────────
    news_api_base_url: str = ""
    news_api_url: str = DEFAULT_NEWS_API_URL
    request_timeout: float = 10.0

    # ── Scheduler ─────────────────────────────────────────
    cron_secret: str = ""

    # ── Logging ───────────────────────────────────────────
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, dotenv: bool = True) -> "Settings":
        """
        Build settings from the process environment.

        Args:
            dotenv: Load a ``.env`` file first (existing variables win).

        Returns:
            A populated Settings instance.

        Raises:
            ConfigError: If NEWS_API_TIMEOUT_SECONDS is not a positive, finite number.
        """
        if dotenv:
            load_dotenv()

        raw_timeout = os.getenv("NEWS_API_TIMEOUT_SECONDS", "10").strip()
        try:
            timeout = float(raw_timeout)
        except ValueError:
            timeout = 0.0
        if not math.isfinite(timeout) or timeout <= 0:
            raise ConfigError(["NEWS_API_TIMEOUT_SECONDS"])

        return cls(
            telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN", "").strip(),
            telegram_channel_id=os.getenv("TELEGRAM_CHANNEL_ID", "").strip(),
            webhook_secret=os.getenv("TELEGRAM_WEBHOOK_SECRET", "").strip(),
            news_api_base_url=os.getenv("NEWS_API_URL_BASE", "").strip(),
            news_api_url=os.getenv("NEWS_API_URL", "").strip() or DEFAULT_NEWS_API_URL,
            request_timeout=timeout,
            cron_secret=os.getenv("CRON_SECRET", "").strip(),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
        )

    def missing(self, *names: str) -> list[str]:
        """Return the environment variable names of the empty settings among ``names``."""
        known = {f.name for f in fields(self)}
        result = []
        for name in names:
            if name not in known:
                raise AttributeError(f"Unknown setting: {name}")
            if not getattr(self, name):
                result.append(_ENV_NAMES[name])
        return result

    def require(self, *names: str) -> None:
        """
        Ensure the given settings are present.

        Raises:
            ConfigError: Listing every missing environment variable.
        """
        missing = self.missing(*names)
        if missing:
            raise ConfigError(missing)
