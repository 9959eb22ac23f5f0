"""
services/broadcast_service.py
-----------------------------
Posts the latest headline to a fixed Telegram channel.
Invoked by the scheduler through POST /api/send-news (or `main.py send-news`).
"""

from dataclasses import dataclass

from telegram import Bot, LinkPreviewOptions
from telegram.constants import ParseMode

from config import Settings
from exceptions import NewsStatusError
from services.news_client import NewsClient
from services.news_formatter import format_headline
from utils.logger import get_logger

logger = get_logger(__name__)

# The channel post uses shorter placeholders than the /news reply.
NO_TITLE = "No Title"
UNKNOWN_AUTHOR = "Unknown"

POSTED = "News posted successfully to Telegram channel."
NOTHING_TO_POST = "No news found to post."
FAILED = "An error occurred while posting news."


@dataclass(frozen=True)
class BroadcastResult:
    """Outcome of one broadcast run, ready to be returned as an HTTP response."""
    status_code: int
    message: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class BroadcastService:
    """
    Fetches one headline and pushes it to the configured channel.

    Each run is independent: nothing about previous runs is remembered,
    so two runs before the source updates post the same headline twice.
    """

    def __init__(self, bot: Bot, news_client: NewsClient, channel_id: str, news_url: str):
        self.bot = bot
        self.news_client = news_client
        self.channel_id = channel_id
        self.news_url = news_url

    @classmethod
    def from_settings(cls, settings: Settings, bot: Bot, news_client: NewsClient) -> "BroadcastService":
        """
        Raises:
            ConfigError: If the bot token or channel id is missing.
        """
        settings.require("telegram_bot_token", "telegram_channel_id")
        return cls(bot, news_client, settings.telegram_channel_id, settings.news_api_url)

    async def post_latest(self) -> BroadcastResult:
        """
        Run the broadcast pipeline once. Never raises.

        Returns:
            BroadcastResult with 200 on success or when there is nothing to post,
            the upstream status when the news API fails, 500 on any other error.
        """
        try:
            logger.info(f"Attempting to fetch news from: {self.news_url}")
            try:
                headlines = await self.news_client.fetch(self.news_url)
            except NewsStatusError as e:
                logger.error(f"Failed to fetch news from AirShorts API: {e.status} - {e.body}")
                return BroadcastResult(e.status, f"Failed to fetch news from API: {e.body}")

            if not headlines:
                logger.info("No news found to post from API.")
                return BroadcastResult(200, NOTHING_TO_POST)

            latest = headlines[0]
            text = format_headline(latest, title_placeholder=NO_TITLE, author_placeholder=UNKNOWN_AUTHOR)

            logger.info(f"Sending news to channel {self.channel_id}: {latest}")
            await self.bot.send_message(
                chat_id=self.channel_id,
                text=text,
                parse_mode=ParseMode.HTML,
                link_preview_options=LinkPreviewOptions(is_disabled=False),
            )
            logger.info("News successfully posted to Telegram.")
            return BroadcastResult(200, POSTED)

        except Exception:
            logger.exception("An unexpected error occurred in send-news handler")
            return BroadcastResult(500, FAILED)
