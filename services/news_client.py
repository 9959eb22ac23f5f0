"""
services/news_client.py
-----------------------
Async client for the AirShorts news API.

Responsibilities:
    - Own a single aiohttp session, created lazily and reused across requests.
    - Translate HTTP/transport failures into NewsFetchError subclasses.
    - Turn the JSON ``data`` array into Headline objects.
"""

import asyncio
from typing import Any, Optional

import aiohttp

from exceptions import NewsStatusError, NewsTransportError
from models.headline import Headline
from utils.logger import get_logger

logger = get_logger(__name__)


def parse_headlines(payload: Any) -> list[Headline]:
    """
    Extract headlines from a news API response body.

    Args:
        payload: Decoded JSON, expected shape ``{"data": [{...}, ...]}``.

    Returns:
        Headlines in API order; empty when ``data`` is missing, empty or not a list.
    """
    if not isinstance(payload, dict):
        return []
    data = payload.get("data")
    if not isinstance(data, list):
        return []
    return [Headline.from_dict(item) for item in data]


class NewsClient:
    """
    Fetches headlines over HTTP.

    Usage:
        client = NewsClient(base_url="https://airshorts.vercel.app/news")
        headlines = await client.fetch_category("technology")
        await client.close()
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def fetch(self, url: str, params: Optional[dict[str, str]] = None) -> list[Headline]:
        """
        GET ``url`` and parse the headlines it returns.

        Raises:
            NewsStatusError: The API answered with a non-2xx status.
            NewsTransportError: Network error, timeout, or a body that is not JSON.
        """
        session = self._get_session()
        try:
            async with session.get(url, params=params) as response:
                if not 200 <= response.status < 300:
                    body = await response.text(errors="replace")
                    raise NewsStatusError(response.status, body, url=url)
                try:
                    payload = await response.json(content_type=None)
                except ValueError as e:
                    raise NewsTransportError(f"News API at {url} returned invalid JSON") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NewsTransportError(f"Request to {url} failed: {e!r}") from e

        return parse_headlines(payload)

    async def fetch_category(self, category: str) -> list[Headline]:
        """
        Fetch headlines for one category from ``<base_url>?category=<category>``.

        Raises:
            ValueError: If no base URL is configured.
            NewsFetchError: See `fetch`.
        """
        if not self.base_url:
            raise ValueError("NewsClient has no base_url")
        logger.info(f"Fetching news from: {self.base_url} (category={category})")
        return await self.fetch(self.base_url, params={"category": category})
