"""
main.py
-------
Entry point for the AirShorts news bot.

Commands:
    serve            Run the HTTP app (webhook + broadcast endpoints) with uvicorn.
    poll             Run the command handlers with long polling (local development).
    set-webhook URL  Point Telegram at the deployed webhook and register the command menu.
    send-news        Run one channel broadcast from the shell.
"""

import argparse
import asyncio
import sys

import uvicorn
from telegram import Bot

from bot import BOT_COMMANDS, NewsBot
from config import Settings
from exceptions import ConfigError
from services.broadcast_service import BroadcastResult, BroadcastService
from services.news_client import NewsClient
from utils.logger import get_logger, set_level

logger = get_logger(__name__)


def serve(host: str, port: int) -> None:
    """Run the ASGI app; settings are read from the environment by the factory."""
    logger.info(f"🚀 Serving webhook and broadcast endpoints on {host}:{port}")
    uvicorn.run("api.app:create_app", factory=True, host=host, port=port)


def poll(settings: Settings) -> None:
    """Run the bot with long polling instead of a webhook."""
    news_client = NewsClient(base_url=settings.news_api_base_url, timeout=settings.request_timeout)
    news_bot = NewsBot.from_settings(settings, news_client, polling=True)

    logger.info("🚀 News bot is polling! Press Ctrl+C to stop.")
    news_bot.application.run_polling(drop_pending_updates=True, allowed_updates=["message"])
    logger.info("News bot stopped.")


async def set_webhook(settings: Settings, url: str) -> None:
    """
    Register ``url`` as the bot's webhook.

    The secret token, when configured, is what security.auth checks on
    every incoming update.
    """
    settings.require("telegram_bot_token")
    async with Bot(settings.telegram_bot_token) as bot:
        await bot.set_webhook(
            url=url,
            secret_token=settings.webhook_secret or None,
            allowed_updates=["message"],
        )
        await bot.set_my_commands(BOT_COMMANDS)
    logger.info(f"Webhook set to {url}")


async def send_news_once(settings: Settings) -> BroadcastResult:
    """Run the broadcast pipeline once with short-lived clients."""
    settings.require("telegram_bot_token", "telegram_channel_id")
    async with NewsClient(timeout=settings.request_timeout) as news_client:
        async with Bot(settings.telegram_bot_token) as bot:
            service = BroadcastService.from_settings(settings, bot, news_client)
            return await service.post_latest()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AirShorts headlines for Telegram")
    sub = parser.add_subparsers(dest="command", required=True)

    serve_cmd = sub.add_parser("serve", help="run the HTTP endpoints")
    serve_cmd.add_argument("--host", default="0.0.0.0")
    serve_cmd.add_argument("--port", type=int, default=8000)

    sub.add_parser("poll", help="run the bot with long polling")

    webhook_cmd = sub.add_parser("set-webhook", help="register the webhook URL with Telegram")
    webhook_cmd.add_argument("url", help="public URL of /api/telegram-webhook")

    sub.add_parser("send-news", help="post the latest headline to the channel once")
    return parser


def main(argv=None) -> int:
    """Parse arguments and run the selected command. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        serve(args.host, args.port)
        return 0

    try:
        settings = Settings.from_env()
        set_level(settings.log_level)

        if args.command == "poll":
            poll(settings)
        elif args.command == "set-webhook":
            asyncio.run(set_webhook(settings, args.url))
        elif args.command == "send-news":
            result = asyncio.run(send_news_once(settings))
            print(f"{result.status_code} {result.message}")
            return 0 if result.ok else 1
    except ConfigError as e:
        logger.error(str(e))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
