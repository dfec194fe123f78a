"""
Pytest configuration and shared fixtures
"""
import pytest
import os
from unittest.mock import Mock, AsyncMock

import aiohttp

# Add project root to path
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from config import AnalyzerConfig
from models import FetchResult


OPTIMIZED_TITLE = "Handmade Ceramic Mugs and Pottery Studio"
OPTIMIZED_DESCRIPTION = (
    "Browse handmade ceramic mugs, bowls and vases thrown in our small pottery "
    "studio, glazed by hand and fired in small batches."
)


def build_optimized_html(body_words: int = 250) -> str:
    """A page that passes every rule of the scoring rubric"""
    words = " ".join(["pottery"] * body_words)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <title>{OPTIMIZED_TITLE}</title>
    <meta name="description" content="{OPTIMIZED_DESCRIPTION}">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <meta property="og:title" content="Ceramic Mugs">
    <link rel="canonical" href="https://example.com/mugs">
    <link rel="icon" href="/favicon.ico">
    <script type="application/ld+json">{{"@context": "https://schema.org", "@type": "Product"}}</script>
</head>
<body>
    <h1>Ceramic Mugs</h1>
    <img src="/mug.jpg" alt="Blue ceramic mug">
    <p>{words}</p>
    <a href="/shop">Shop</a>
    <a href="https://partner.org/">Partner</a>
</body>
</html>"""


MINIMAL_HTML = "<html><head><title>Hi</title></head><body></body></html>"


@pytest.fixture
def test_config():
    """Test configuration with short timeouts"""
    return AnalyzerConfig(page_timeout=2.0, text_timeout=1.0, head_timeout=0.5)


@pytest.fixture
def optimized_html():
    return build_optimized_html()


@pytest.fixture
def minimal_html():
    return MINIMAL_HTML


@pytest.fixture
def mock_fetcher():
    """Fetcher double with a reachable robots.txt and healthy links"""
    fetcher = Mock()
    fetcher.fetch_page = AsyncMock()
    fetcher.fetch_text = AsyncMock(return_value="User-agent: *\nDisallow:\n")
    fetcher.head_status = AsyncMock(return_value=200)
    return fetcher


def html_result(html: str, final_url: str = "https://example.com/") -> FetchResult:
    return FetchResult(final_url=final_url, status=200,
                       content_type="text/html; charset=utf-8", body=html)


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse"""

    def __init__(self, status: int = 200, headers: dict = None, body: str = "",
                 url: str = "https://example.com/"):
        self.status = status
        self.headers = headers or {}
        self.url = url
        self._body = body
        self.text_calls = 0

    async def text(self, encoding=None, errors="strict"):
        self.text_calls += 1
        return self._body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Routes (method, url) to a FakeResponse or an exception to raise"""

    def __init__(self, routes: dict = None):
        self.routes = routes or {}
        self.calls = []
        self.closed = False

    def _request(self, method: str, url: str, **kwargs):
        self.calls.append((method, url, kwargs))
        outcome = self.routes.get((method, url))
        if outcome is None:
            raise aiohttp.ClientConnectionError(f"Cannot connect to host for {url}")
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def get(self, url, **kwargs):
        return self._request("GET", url, **kwargs)

    def head(self, url, **kwargs):
        return self._request("HEAD", url, **kwargs)

    async def close(self):
        self.closed = True
