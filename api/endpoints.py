"""
api/endpoints.py
----------------
HTTP routes for the two serverless-style handlers.

    POST /api/telegram-webhook   Telegram pushes chat updates here.
    POST /api/send-news          The scheduler triggers a channel broadcast here.

Only POST is routed; FastAPI answers any other method with 405.
"""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status
from fastapi.responses import PlainTextResponse

from bot import NewsBot
from security.auth import verify_cron_secret, verify_telegram_secret
from services.broadcast_service import BroadcastService
from utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()


def get_news_bot(request: Request) -> Optional[NewsBot]:
    return request.app.state.news_bot


def get_broadcaster(request: Request) -> Optional[BroadcastService]:
    return request.app.state.broadcaster


@router.post(
    "/telegram-webhook",
    response_class=PlainTextResponse,
    dependencies=[Depends(verify_telegram_secret)],
)
async def telegram_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    news_bot: Optional[NewsBot] = Depends(get_news_bot),
):
    """
    Accept a Telegram update and acknowledge it immediately.

    The update is handled after the response is sent, so a slow or failing
    reply never delays the 200 that stops Telegram from redelivering.
    """
    if news_bot is None:
        logger.error("TELEGRAM_BOT_TOKEN is not set. Cannot initialize bot.")
        return PlainTextResponse(
            "Bot not configured. Check environment variables.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    try:
        payload = await request.json()
        logger.info(f"Received Telegram update: {payload}")
        update = news_bot.parse_update(payload)
        background_tasks.add_task(news_bot.dispatch, update)
    except Exception:
        logger.exception("Error processing Telegram webhook")
        return PlainTextResponse(
            "Error processing update.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return PlainTextResponse("OK")


@router.post(
    "/send-news",
    response_class=PlainTextResponse,
    dependencies=[Depends(verify_cron_secret)],
)
async def send_news(broadcaster: Optional[BroadcastService] = Depends(get_broadcaster)):
    """Post the latest headline to the configured channel."""
    if broadcaster is None:
        logger.error("Critical: TELEGRAM_BOT_TOKEN or TELEGRAM_CHANNEL_ID is not set.")
        return PlainTextResponse(
            "Bot not configured. Check environment variables.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    result = await broadcaster.post_latest()
    return PlainTextResponse(result.message, status_code=result.status_code)
