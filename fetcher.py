"""
Async HTTP fetching with per-request timeouts
"""
import asyncio
import logging
from typing import Optional

import aiohttp

from models import FetchResult
from config import AnalyzerConfig, config

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Network failure or timeout while fetching a URL"""

    def __init__(self, url: str, message: str):
        super().__init__(message)
        self.url = url


class PageFetcher:
    """Async HTTP client for page, text and HEAD requests.

    Every call carries its own ``aiohttp.ClientTimeout`` so a slow probe
    never cancels its siblings. Redirects are always followed and the
    configured User-Agent is sent on each request. Nothing is retried.
    """

    def __init__(self, settings: Optional[AnalyzerConfig] = None,
                 session: Optional[aiohttp.ClientSession] = None):
        self.settings = settings or config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self):
        self._get_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            self.session = aiohttp.ClientSession()
        return self.session

    async def close(self):
        """Close the session if this fetcher created it"""
        if self._owns_session and self.session is not None:
            await self.session.close()
            self.session = None

    def _headers(self) -> dict:
        return {'User-Agent': self.settings.user_agent}

    async def fetch_page(self, url: str) -> FetchResult:
        """GET a page; the body is only read when the response declares HTML"""
        timeout = aiohttp.ClientTimeout(total=self.settings.page_timeout)
        try:
            async with self._get_session().get(url, allow_redirects=True, timeout=timeout,
                                               headers=self._headers()) as response:
                content_type = response.headers.get('Content-Type', '')
                body = ''
                if 'text/html' in content_type.lower():
                    body = await response.text(errors='replace')

                logger.debug(f"Fetched {url} -> {response.url} ({response.status}, {content_type or 'no content-type'})")
                return FetchResult(
                    final_url=str(response.url),
                    status=response.status,
                    content_type=content_type,
                    body=body
                )
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout for {url}")
            raise FetchError(url, f"Timed out after {self.settings.page_timeout:g}s fetching {url}") from e
        except aiohttp.ClientError as e:
            logger.error(f"Request error for {url}: {e}")
            raise FetchError(url, f"Request failed for {url}: {e}") from e

    async def fetch_text(self, url: str, timeout: Optional[float] = None) -> str:
        """GET a URL and return its body as text, whatever the status"""
        seconds = timeout if timeout is not None else self.settings.text_timeout
        try:
            async with self._get_session().get(url, allow_redirects=True,
                                               timeout=aiohttp.ClientTimeout(total=seconds),
                                               headers=self._headers()) as response:
                return await response.text(errors='replace')
        except asyncio.TimeoutError as e:
            logger.warning(f"Timeout for {url}")
            raise FetchError(url, f"Timed out after {seconds:g}s fetching {url}") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Request error for {url}: {e}")
            raise FetchError(url, f"Request failed for {url}: {e}") from e

    async def head_status(self, url: str, timeout: Optional[float] = None) -> int:
        """HEAD a URL and return its status code, or 0 if the probe failed"""
        seconds = timeout if timeout is not None else self.settings.head_timeout
        try:
            async with self._get_session().head(url, allow_redirects=True,
                                                timeout=aiohttp.ClientTimeout(total=seconds),
                                                headers=self._headers()) as response:
                return response.status
        except Exception as e:
            logger.debug(f"HEAD probe failed for {url}: {e!r}")
            return 0
