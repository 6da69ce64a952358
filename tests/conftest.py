"""Test configuration and common fixtures."""

import json
from typing import Callable, Dict, List, Optional, Union

import httpx
import pytest

from livewatch.errors import ChannelStoreError
from livewatch.storage.base import ChannelStatusUpdate, ChannelStore, MonitoredChannel
from livewatch.youtube.page_client import YouTubePageClient

Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


def player_page(*fragments: str, head: str = "") -> str:
    """Minimal watch-page shaped HTML with the given JSON fragments embedded."""
    blob = ",".join(fragments)
    return (
        f"<html><head>{head}</head><body>"
        f"<script>var ytInitialPlayerResponse = {{{blob}}};</script>"
        f"</body></html>"
    )


def routed_client(routes: Dict[str, Route]) -> YouTubePageClient:
    """A page client whose transport answers from a url -> response table."""

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        route = routes.get(url)
        if route is None:
            return httpx.Response(404, text="<html><title>404 Not Found</title></html>")
        if callable(route):
            return route(request)
        # fresh copy per request, responses are consumed by the client
        return httpx.Response(route.status_code, headers=route.headers, content=route.content)

    transport = httpx.MockTransport(handler)
    return YouTubePageClient(client=httpx.AsyncClient(transport=transport), timeout=1.0)


def redirect(location: str) -> httpx.Response:
    return httpx.Response(302, headers={"Location": location})


def timeout(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("timed out", request=request)


class MemoryStore(ChannelStore):
    def __init__(self, channels: List[MonitoredChannel], fail_load: bool = False, fail_save_for: Optional[set] = None):
        self.channels = channels
        self.fail_load = fail_load
        self.fail_save_for = fail_save_for or set()
        self.saved: Dict[str, ChannelStatusUpdate] = {}

    async def list_channels(self) -> List[MonitoredChannel]:
        if self.fail_load:
            raise ChannelStoreError("connection refused")
        return list(self.channels)

    async def save_status(self, update: ChannelStatusUpdate) -> None:
        if update.channel_id in self.fail_save_for:
            raise ChannelStoreError("write rejected")
        self.saved[update.channel_id] = update


@pytest.fixture
def write_channels(tmp_path):
    def _write(rows):
        path = tmp_path / "channels.json"
        path.write_text(json.dumps(rows), encoding="utf-8")
        return path
    return _write
