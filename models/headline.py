"""
models/headline.py
------------------
Domain model for a single headline returned by the news API.
"""

from dataclasses import dataclass
from typing import Any, Optional


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Headline:
    """
    One article from the news API ``data`` array.

    Every field is optional: the API is not guaranteed to fill them, and
    the formatter substitutes placeholders for the missing ones.

    Attributes:
        title: Headline text.
        content: Article summary.
        read_more_url: Link to the full article (``readMoreUrl`` in JSON).
        author: Author name as published.
    """
    title: Optional[str] = None
    content: Optional[str] = None
    read_more_url: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Headline":
        """Build a Headline from one JSON object; non-objects yield an empty Headline."""
        if not isinstance(data, dict):
            return cls()
        return cls(
            title=_text(data.get("title")),
            content=_text(data.get("content")),
            read_more_url=_text(data.get("readMoreUrl")),
            author=_text(data.get("author")),
        )

    def __str__(self) -> str:
        return f"{self.title or '<untitled>'} | {self.author or '?'}"
