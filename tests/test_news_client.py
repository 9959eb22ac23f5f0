"""Tests for the news API client."""

import asyncio

import aiohttp
import pytest
from aiohttp import web
from aiohttp import test_utils

from exceptions import NewsFetchError, NewsStatusError, NewsTransportError
from models.headline import Headline
from services.news_client import NewsClient, parse_headlines


class FakeResponse:
    def __init__(self, status=200, payload=None, body="", json_error=None):
        self.status = status
        self._payload = payload
        self._body = body
        self._json_error = json_error

    async def text(self, errors="strict"):
        return self._body

    async def json(self, content_type="application/json"):
        if self._json_error:
            raise self._json_error
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    closed = False

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None):
        self.calls.append((url, params))
        if self.error:
            raise self.error
        return self.response


class TestParseHeadlines:

    def test_returns_headlines_in_order(self):
        headlines = parse_headlines({"data": [{"title": "first"}, {"title": "second"}]})
        assert [h.title for h in headlines] == ["first", "second"]

    @pytest.mark.parametrize("payload", [None, [], {}, {"data": None}, {"data": []}, {"data": "x"}])
    def test_empty_or_malformed_payload(self, payload):
        assert parse_headlines(payload) == []


class TestNewsClient:

    async def test_fetch_category_sends_category_param(self):
        session = FakeSession(FakeResponse(payload={"data": [{"title": "Hi", "readMoreUrl": "https://x.test"}]}))
        client = NewsClient(base_url="https://news.example.com/news", session=session)

        headlines = await client.fetch_category("technology")

        assert session.calls == [("https://news.example.com/news", {"category": "technology"})]
        assert headlines == [Headline(title="Hi", read_more_url="https://x.test")]

    async def test_fetch_category_without_base_url(self):
        session = FakeSession(FakeResponse(payload={"data": []}))
        client = NewsClient(session=session)

        with pytest.raises(ValueError):
            await client.fetch_category("all")
        assert session.calls == []

    async def test_non_2xx_raises_status_error(self):
        session = FakeSession(FakeResponse(status=503, body="upstream down"))
        client = NewsClient(session=session)

        with pytest.raises(NewsStatusError) as exc_info:
            await client.fetch("https://news.example.com/news?category=all")

        assert exc_info.value.status == 503
        assert exc_info.value.body == "upstream down"

    @pytest.mark.parametrize("error", [aiohttp.ClientConnectionError("refused"), asyncio.TimeoutError()])
    async def test_transport_errors_are_wrapped(self, error):
        client = NewsClient(session=FakeSession(error=error))

        with pytest.raises(NewsTransportError) as exc_info:
            await client.fetch("https://news.example.com/news")

        assert exc_info.value.__cause__ is error
        assert isinstance(exc_info.value, NewsFetchError)

    async def test_invalid_json_is_a_transport_error(self):
        session = FakeSession(FakeResponse(json_error=ValueError("Expecting value")))
        client = NewsClient(session=session)

        with pytest.raises(NewsTransportError):
            await client.fetch("https://news.example.com/news")

    async def test_close_leaves_injected_session_open(self):
        session = FakeSession()
        session.close = None
        client = NewsClient(session=session)

        await client.close()

        assert client._session is None


class TestNewsClientOverHttp:
    """Runs the client against a local aiohttp server."""

    @staticmethod
    def make_app(status, body, content_type="application/json"):
        async def news(request):
            return web.Response(status=status, body=body, content_type=content_type)

        app = web.Application()
        app.router.add_get("/news", news)
        return app

    async def test_headlines_and_category_query(self):
        seen = []

        async def news(request):
            seen.append(request.query.get("category"))
            return web.json_response({"data": [{"title": "Live", "author": "Desk"}]})

        app = web.Application()
        app.router.add_get("/news", news)

        async with test_utils.TestServer(app) as server:
            async with NewsClient(base_url=str(server.make_url("/news")), timeout=5) as client:
                headlines = await client.fetch_category("science")

        assert seen == ["science"]
        assert headlines == [Headline(title="Live", author="Desk")]

    async def test_undecodable_error_body_keeps_upstream_status(self):
        app = self.make_app(502, b"\xff\xfe bad gateway", content_type="text/plain")

        async with test_utils.TestServer(app) as server:
            async with NewsClient(timeout=5) as client:
                with pytest.raises(NewsStatusError) as exc_info:
                    await client.fetch(str(server.make_url("/news")))

        assert exc_info.value.status == 502
        assert "bad gateway" in exc_info.value.body

    async def test_non_json_success_body(self):
        app = self.make_app(200, b"<html>maintenance</html>", content_type="text/html")

        async with test_utils.TestServer(app) as server:
            async with NewsClient(timeout=5) as client:
                with pytest.raises(NewsTransportError):
                    await client.fetch(str(server.make_url("/news")))
