"""
bot.py
------
Builds the Telegram application and wires the command handlers to it.

The same `NewsBot` serves the webhook endpoint (updates pushed by
Telegram) and the `poll` CLI mode (updates pulled for local testing).
"""

from typing import Any

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from config import Settings
from handlers.news_handler import NewsCommandHandler
from handlers.start_handler import start_command, unknown_text
from services.news_client import NewsClient
from utils.logger import get_logger

logger = get_logger(__name__)

BOT_COMMANDS = [
    BotCommand("start", "Show the welcome message"),
    BotCommand("news", "Latest headline, optionally for a category"),
]


async def log_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Application-level error handler: anything a callback lets escape ends up here."""
    logger.error(f"Error while handling update {update}", exc_info=context.error)


def register_handlers(application: Application, news_client: NewsClient) -> None:
    """Attach the /start, /news and fallback handlers to ``application``."""
    news = NewsCommandHandler(news_client)

    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("news", news.news_command))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, unknown_text))
    application.add_error_handler(log_error)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram."""
    await application.bot.set_my_commands(BOT_COMMANDS)
    logger.info("Bot commands menu registered successfully.")


class NewsBot:
    """
    Thin wrapper around a python-telegram-bot Application.

    Responsibilities:
        - Decode raw webhook payloads into Update objects.
        - Hand updates to the registered handlers.
        - Manage the Application lifecycle for the ASGI app.
    """

    def __init__(self, application: Application):
        self.application = application

    @classmethod
    def from_settings(
        cls, settings: Settings, news_client: NewsClient, polling: bool = False
    ) -> "NewsBot":
        """
        Build the Application for ``settings``.

        Args:
            settings: Must contain the bot token.
            news_client: Client used by /news.
            polling: Keep the Updater so `run_polling` can be used.

        Raises:
            ConfigError: If TELEGRAM_BOT_TOKEN is missing.
        """
        settings.require("telegram_bot_token")
        builder = Application.builder().token(settings.telegram_bot_token)
        if polling:
            async def close_news_client(_: Application) -> None:
                await news_client.close()

            builder = builder.post_init(set_bot_commands).post_shutdown(close_news_client)
        else:
            builder = builder.updater(None)
        application = builder.build()
        register_handlers(application, news_client)
        return cls(application)

    @property
    def bot(self):
        return self.application.bot

    async def start(self) -> None:
        await self.application.initialize()
        logger.info("Telegram application initialized.")

    async def stop(self) -> None:
        await self.application.shutdown()
        logger.info("Telegram application shut down.")

    def parse_update(self, payload: Any) -> Update:
        """
        Decode a webhook body.

        Raises:
            ValueError: If the payload is not a JSON object.
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object, got {type(payload).__name__}")
        return Update.de_json(payload, self.application.bot)

    async def dispatch(self, update: Update) -> None:
        """Run ``update`` through the handlers; handler errors go to `log_error`."""
        await self.application.process_update(update)
