import re
from dataclasses import dataclass, asdict
from typing import Optional
from urllib.parse import quote

import httpx

from livewatch.errors import ChannelLookupError, UnresolvableChannelError
from .canonical import scan_canonical_channel_id
from .identifier import resolve_identifier
from .models import ChannelIdentifier
from .page_client import YouTubePageClient
from .signals import meta_content, page_title

AVATAR_PATTERNS = [
    re.compile(r'"avatar"\s*:\s*\{\s*"thumbnails"\s*:\s*\[\s*\{\s*"url"\s*:\s*"([^"]+)"'),
    re.compile(r'"thumbnails"\s*:\s*\[\s*\{\s*"url"\s*:\s*"([^"]+)"\s*,\s*"width"\s*:\s*48'),
    re.compile(r'yt-img-shadow"\s+src="([^"]+)"'),
    re.compile(r'<meta\s+property="og:image"\s+content="([^"]+)"'),
]

PLACEHOLDER_AVATAR = "https://ui-avatars.com/api/?name={name}&background=ff0000&color=ffffff&size=176&bold=true"


@dataclass
class ChannelInfo:
    identifier: ChannelIdentifier
    channel_id: Optional[str]
    name: str
    avatar_url: str

    def to_dict(self):
        d = asdict(self)
        d["identifier"] = {"kind": self.identifier.kind.value, "value": self.identifier.value}
        return d


def extract_channel_name(body: str, fallback: str) -> str:
    name = fallback
    title = page_title(body)
    if title:
        cleaned = re.sub(r"\s+-\s+YouTube$", "", title.strip()).strip()
        if cleaned and "404" not in cleaned and "Error" not in cleaned:
            name = cleaned
    og = meta_content(body, "og:title")
    if og:
        name = og
    return name


def extract_avatar_url(body: str, name: str) -> str:
    for pattern in AVATAR_PATTERNS:
        m = pattern.search(body)
        if m and m.group(1):
            # ask for the 176px rendition
            url = re.sub(r"=s\d+-", "=s176-", m.group(1))
            return re.sub(r"=s\d+$", "=s176", url)
    return PLACEHOLDER_AVATAR.format(name=quote(name))


async def lookup_channel(client: YouTubePageClient, channel_url: str) -> ChannelInfo:
    identifier = resolve_identifier(channel_url)
    if identifier is None:
        raise UnresolvableChannelError(channel_url)
    try:
        body = await client.fetch_text(identifier.channel_page_url)
    except httpx.HTTPStatusError as e:
        raise ChannelLookupError(f"Failed to fetch YouTube page: {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise ChannelLookupError(f"Failed to fetch YouTube page: {e}") from e

    name = extract_channel_name(body, identifier.value.lstrip("@").replace("-", " "))
    return ChannelInfo(
        identifier=identifier,
        channel_id=scan_canonical_channel_id(body),
        name=name,
        avatar_url=extract_avatar_url(body, name),
    )
