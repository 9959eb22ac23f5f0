"""
api/app.py
----------
ASGI application factory.

Builds the Telegram bot, the news API client and the broadcast service
once per process and hands them to the routes through ``app.state``.
A component whose settings are missing is left as None; its route then
answers 500 without touching the network.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from api import endpoints
from bot import NewsBot
from config import Settings
from exceptions import ConfigError
from services.broadcast_service import BroadcastService
from services.news_client import NewsClient
from utils.logger import get_logger, set_level

logger = get_logger(__name__)


def build_components(settings: Settings):
    """
    Construct the long-lived collaborators from ``settings``.

    Returns:
        Tuple of (news_client, news_bot or None, broadcaster or None).
    """
    news_client = NewsClient(base_url=settings.news_api_base_url, timeout=settings.request_timeout)

    news_bot: Optional[NewsBot] = None
    try:
        news_bot = NewsBot.from_settings(settings, news_client)
    except ConfigError as e:
        logger.error(f"Webhook handler disabled: {e}")

    broadcaster: Optional[BroadcastService] = None
    if news_bot is not None:
        try:
            broadcaster = BroadcastService.from_settings(settings, news_bot.bot, news_client)
        except ConfigError as e:
            logger.error(f"Broadcast handler disabled: {e}")

    if not settings.news_api_base_url:
        logger.warning("NEWS_API_URL_BASE is not set; /news will report a configuration error.")

    return news_client, news_bot, broadcaster


def create_app(
    settings: Optional[Settings] = None,
    news_bot: Optional[NewsBot] = None,
    broadcaster: Optional[BroadcastService] = None,
    news_client: Optional[NewsClient] = None,
) -> FastAPI:
    """
    Create the FastAPI app.

    Args:
        settings: Defaults to ``Settings.from_env()``.
        news_bot, broadcaster, news_client: Pre-built components. When none
            of them is given they are built from ``settings``.
    """
    settings = settings or Settings.from_env()
    set_level(settings.log_level)

    if news_bot is None and broadcaster is None and news_client is None:
        news_client, news_bot, broadcaster = build_components(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if news_bot is not None:
            await news_bot.start()
        yield
        if news_bot is not None:
            await news_bot.stop()
        if news_client is not None:
            await news_client.close()

    app = FastAPI(title="AirShorts News Bot", lifespan=lifespan)
    app.state.settings = settings
    app.state.news_bot = news_bot
    app.state.broadcaster = broadcaster
    app.include_router(endpoints.router, prefix="/api")

    @app.get("/")
    async def root():
        return {
            "message": "AirShorts News Bot is running",
            "webhook": news_bot is not None,
            "broadcast": broadcaster is not None,
        }

    return app
