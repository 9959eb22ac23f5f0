"""
handlers/news_handler.py
-------------------------
Handles the /news [category] command.
Fetches the latest headline for the category and replies with it.
"""

from telegram import Bot, LinkPreviewOptions, Update
from telegram.constants import ParseMode
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown

from exceptions import NewsFetchError
from models.category import ALLOWED_CATEGORIES, is_valid_category, normalize_category
from services.news_client import NewsClient
from services.news_formatter import format_headline
from utils.logger import get_logger

logger = get_logger(__name__)

CONFIG_ERROR_TEXT = (
    "Bot configuration error: News API URL is not set. "
    "Please inform the bot administrator."
)
FETCH_ERROR_TEXT = (
    "Sorry, I'm having trouble fetching news right now from the source. "
    "Please try again later."
)
UNEXPECTED_ERROR_TEXT = (
    "An unexpected error occurred while processing your request. Please try again."
)


def fetching_text(category: str) -> str:
    return f"Fetching latest news for category: *{escape_markdown(category)}*..."


def invalid_category_text(category: str) -> str:
    valid = "`, `".join(ALLOWED_CATEGORIES)
    return (
        f'Sorry, "{escape_markdown(category)}" is not a valid category. '
        f"Please try one of these: \n`{valid}`."
    )


def no_news_text(category: str) -> str:
    return (
        f"No news found for category: *{escape_markdown(category)}*. "
        f"Please try another category or check back later."
    )


class NewsCommandHandler:
    """
    Callback for /news, bound to the news API client it queries.

    The client is injected so the same handler works with the webhook
    application, the polling application and test doubles.
    """

    def __init__(self, news_client: NewsClient):
        self.news_client = news_client

    async def news_command(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """
        Handle /news [category].

        Usage:
            /news               → category "all"
            /news Technology    → category "technology"
        """
        chat_id = update.effective_chat.id
        category = normalize_category(" ".join(context.args or []))

        try:
            await self._reply_with_headline(context.bot, chat_id, category)
        except Exception:
            logger.exception(f"Error in /news command handler (chat {chat_id}, category '{category}')")
            await context.bot.send_message(chat_id=chat_id, text=UNEXPECTED_ERROR_TEXT)

    async def _reply_with_headline(self, bot: Bot, chat_id: int, category: str) -> None:
        await bot.send_message(
            chat_id=chat_id,
            text=fetching_text(category),
            parse_mode=ParseMode.MARKDOWN,
        )

        if not is_valid_category(category):
            await bot.send_message(
                chat_id=chat_id,
                text=invalid_category_text(category),
                parse_mode=ParseMode.MARKDOWN,
            )
            return

        if not self.news_client.base_url:
            logger.error("NEWS_API_URL_BASE environment variable is not set.")
            await bot.send_message(chat_id=chat_id, text=CONFIG_ERROR_TEXT)
            return

        try:
            headlines = await self.news_client.fetch_category(category)
        except NewsFetchError as e:
            logger.error(f"Failed to fetch news from AirShorts API: {e}")
            await bot.send_message(chat_id=chat_id, text=FETCH_ERROR_TEXT)
            return

        if not headlines:
            await bot.send_message(
                chat_id=chat_id,
                text=no_news_text(category),
                parse_mode=ParseMode.MARKDOWN,
            )
            return

        await bot.send_message(
            chat_id=chat_id,
            text=format_headline(headlines[0]),
            parse_mode=ParseMode.HTML,
            link_preview_options=LinkPreviewOptions(is_disabled=False),
        )
        logger.info(f"News for '{category}' successfully sent to chat {chat_id}.")
