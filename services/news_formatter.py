"""
services/news_formatter.py
--------------------------
Turns a Headline into a Telegram HTML message.

Both the /news command and the scheduled broadcast use `format_headline`,
so a headline looks the same wherever it is posted.
"""

import html
import re
from typing import Optional

from models.headline import Headline

TELEGRAM_MESSAGE_LIMIT = 4096

MAX_CONTENT_LENGTH = 1000
MAX_TITLE_LENGTH = 300
MAX_AUTHOR_LENGTH = 100
MAX_URL_LENGTH = 2048

ELLIPSIS = "..."
SOURCE_PREFIX = "Source: Inshorts by"
READ_MORE_LABEL = "Read More"

NO_CONTENT = "No content available."
NO_LINK = "link unavailable"

# Placeholders used by the /news command.
NO_TITLE = "No Title Available"
UNKNOWN_AUTHOR = "Unknown Author"

_LINE_BREAKS = re.compile(r"\r\n|\r|\n")
_LINE_BREAK_CHARS = re.compile(r"[\r\n]")


def _single_line(text: str) -> str:
    return _LINE_BREAKS.sub(" ", text)


def _clip(text: str, limit: int) -> str:
    """Cut ``text`` to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit].strip() + ELLIPSIS


def format_title(title: Optional[str], placeholder: str = NO_TITLE) -> str:
    text = _single_line(title).strip() if title else ""
    if not text:
        return placeholder
    return _clip(text, MAX_TITLE_LENGTH)


def format_content(content: Optional[str]) -> str:
    """
    Replace line breaks with spaces and cap the summary at MAX_CONTENT_LENGTH characters.

    Every "\r" and "\n" becomes one space, so the length of the raw content
    decides whether the ellipsis is added.
    """
    if not content:
        return NO_CONTENT
    text = _LINE_BREAK_CHARS.sub(" ", content)
    return _clip(text, MAX_CONTENT_LENGTH).strip() or NO_CONTENT


def format_author(author: Optional[str], placeholder: str = UNKNOWN_AUTHOR) -> str:
    text = author.strip() if author else ""
    if not text:
        return placeholder
    return _clip(_single_line(text), MAX_AUTHOR_LENGTH)


def format_link(url: Optional[str]) -> str:
    """Render the "Read More" link; the URL is not validated, only escaped for the attribute."""
    if not url or len(url) > MAX_URL_LENGTH:
        return f"{READ_MORE_LABEL}: {NO_LINK}"
    return f'<a href="{html.escape(url, quote=True)}">{READ_MORE_LABEL}</a>'


def format_headline(
    headline: Headline,
    title_placeholder: str = NO_TITLE,
    author_placeholder: str = UNKNOWN_AUTHOR,
) -> str:
    """
    Build the HTML message for one headline.

    Args:
        headline: The article to render.
        title_placeholder: Shown in bold when the title is missing.
        author_placeholder: Shown in the attribution when the author is missing.

    Returns:
        A message for ``parse_mode="HTML"``. Title, author and link are
        bounded, so the parsed text always fits TELEGRAM_MESSAGE_LIMIT.
    """
    title = html.escape(format_title(headline.title, title_placeholder), quote=False)
    body = html.escape(format_content(headline.content), quote=False)
    author = html.escape(format_author(headline.author, author_placeholder), quote=False)

    return (
        f"<b>{title}</b>\n"
        f"\n"
        f"{body}\n"
        f"\n"
        f"{format_link(headline.read_more_url)}\n"
        f"{SOURCE_PREFIX} {author}"
    )
