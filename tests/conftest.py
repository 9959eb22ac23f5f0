from unittest.mock import AsyncMock, MagicMock

import pytest

from models.headline import Headline


def make_update(text: str = "", chat_id: int = 42):
    """Minimal stand-in for telegram.Update as seen by the command callbacks."""
    update = MagicMock()
    update.effective_chat.id = chat_id
    update.effective_message.text = text
    return update


def make_context(args=None):
    context = MagicMock()
    context.args = args if args is not None else []
    context.bot = AsyncMock()
    return context


def sent_texts(bot) -> list[str]:
    return [call.kwargs["text"] for call in bot.send_message.await_args_list]


@pytest.fixture
def headline():
    return Headline(
        title="Chip exports\nrise again",
        content="Exports of semiconductors grew for the third quarter in a row.",
        read_more_url="https://example.com/chips?utm_source=inshorts",
        author="Asha Rao ",
    )


@pytest.fixture
def news_client(headline):
    """News API client double returning a single headline."""
    client = MagicMock()
    client.base_url = "https://news.example.com/news"
    client.fetch_category = AsyncMock(return_value=[headline])
    client.fetch = AsyncMock(return_value=[headline])
    return client
