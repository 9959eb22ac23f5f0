"""
handlers/start_handler.py
--------------------------
Handles /start and plain text the bot does not understand.
"""

from telegram import Update
from telegram.ext import ContextTypes

from utils.logger import get_logger

logger = get_logger(__name__)

WELCOME_TEXT = (
    "Hello! I'm your AirShorts news bot. Send me a command like /news or "
    "/news <category> to get the latest headlines. Try /news all, "
    "/news technology, or /news sports!"
)

UNKNOWN_TEXT = (
    "I'm not sure how to respond to that. Try sending /news or "
    "/news <category> (e.g., /news technology)."
)


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle /start command - show welcome and usage."""
    chat = update.effective_chat
    logger.info(f"Chat {chat.id} started the bot.")
    await context.bot.send_message(chat_id=chat.id, text=WELCOME_TEXT)


async def unknown_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """
    Fallback for plain text messages.

    Commands that no handler matched are ignored silently, so anything
    starting with "/" gets no reply here either.
    """
    message = update.effective_message
    if message is None or not message.text or message.text.startswith("/"):
        return
    await context.bot.send_message(chat_id=update.effective_chat.id, text=UNKNOWN_TEXT)
