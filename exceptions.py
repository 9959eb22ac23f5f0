"""
exceptions.py
-------------
Exception hierarchy shared by the handlers and services.
"""

from typing import Optional


class ConfigError(Exception):
    """Raised when a component is built without the settings it needs."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Missing required configuration: {', '.join(missing)}")


class NewsFetchError(Exception):
    """Raised when headlines cannot be retrieved from the news API."""


class NewsStatusError(NewsFetchError):
    """The news API answered with a non-2xx status."""

    def __init__(self, status: int, body: str, url: Optional[str] = None):
        self.status = status
        self.body = body
        self.url = url
        super().__init__(f"News API returned {status}: {body}")


class NewsTransportError(NewsFetchError):
    """The news API could not be reached or returned an unreadable body."""
