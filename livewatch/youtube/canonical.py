import logging
import re
from typing import Optional

import httpx

from livewatch.config.settings import settings
from .models import ChannelIdentifier, IdentifierKind
from .page_client import YouTubePageClient
from .signals import CHANNEL_ID

log = logging.getLogger(__name__)

# Structurally different places a channel page states its own id, most reliable first.
CANONICAL_ID_PATTERNS = [
    re.compile(r'<link\s+rel="canonical"\s+href="https?://www\.youtube\.com/channel/(' + CHANNEL_ID + r')"'),
    re.compile(r'<meta\s+itemprop="(?:channelId|identifier)"\s+content="(' + CHANNEL_ID + r')"'),
    re.compile(r'"externalId"\s*:\s*"(' + CHANNEL_ID + r')"'),
    re.compile(r'/channel/(' + CHANNEL_ID + r')'),
]


def scan_canonical_channel_id(body: str) -> Optional[str]:
    for pattern in CANONICAL_ID_PATTERNS:
        m = pattern.search(body)
        if m:
            return m.group(1)
    return None


async def fetch_canonical_channel_id(client: YouTubePageClient, identifier: ChannelIdentifier) -> Optional[str]:
    if identifier.kind is IdentifierKind.CHANNEL_ID:
        return identifier.value
    try:
        body = await client.fetch_text(identifier.channel_page_url, timeout=settings.canonical_timeout_sec)
    except httpx.HTTPError as e:
        log.warning("Canonical id fetch failed for %s: %s", identifier.channel_page_url, e)
        return None
    channel_id = scan_canonical_channel_id(body)
    if channel_id is None:
        log.info("No canonical channel id found for %s", identifier.channel_page_url)
    return channel_id
