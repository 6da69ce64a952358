import asyncio
import logging
from typing import Dict, Optional

import httpx

from livewatch.config.settings import settings
from .models import ChannelIdentifier, LivePage

log = logging.getLogger(__name__)


def browser_headers(user_agent: str) -> Dict[str, str]:
    return {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }


class YouTubePageClient:
    """Fetches channel pages the way a browser would, one bounded request each."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: Optional[float] = None,
                 user_agent: Optional[str] = None):
        self._timeout = timeout
        self._headers = browser_headers(user_agent or settings.user_agent)
        self._owns_client = client is None
        self._http = client or httpx.AsyncClient(follow_redirects=True)

    @property
    def default_timeout(self) -> float:
        return self._timeout if self._timeout is not None else settings.request_timeout_sec

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

    async def aclose(self):
        if self._owns_client:
            await self._http.aclose()

    async def get(self, url: str, timeout: Optional[float] = None) -> httpx.Response:
        limit = timeout if timeout is not None else self.default_timeout
        # httpx timeouts bound each phase, wait_for bounds the whole request
        try:
            return await asyncio.wait_for(
                self._http.get(url, headers=self._headers, follow_redirects=True, timeout=limit),
                limit,
            )
        except asyncio.TimeoutError as e:
            raise httpx.ReadTimeout(f"request exceeded {limit}s", request=httpx.Request("GET", url)) from e

    async def fetch_text(self, url: str, timeout: Optional[float] = None) -> str:
        r = await self.get(url, timeout=timeout)
        r.raise_for_status()
        return r.text

    async def fetch_live_page(self, identifier: ChannelIdentifier) -> LivePage:
        url = identifier.live_page_url
        r = await self.get(url)
        final_url = str(r.url)
        log.debug("Live page %s -> %s (%s)", url, final_url, r.status_code)
        return LivePage(body=r.text, final_url=final_url, status_code=r.status_code)
