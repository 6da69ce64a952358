import re
from typing import Optional

from .models import ChannelIdentifier, IdentifierKind

# Order matters: the first shape that matches wins.
_SHAPES = [
    (re.compile(r"youtube\.com/@([^/]+)"), IdentifierKind.HANDLE),
    (re.compile(r"youtube\.com/channel/(UC[a-zA-Z0-9_-]+)"), IdentifierKind.CHANNEL_ID),
    (re.compile(r"youtube\.com/c/([^/]+)"), IdentifierKind.CUSTOM_NAME),
    # legacy /user/ URLs are served under /c/ as well
    (re.compile(r"youtube\.com/user/([^/]+)"), IdentifierKind.CUSTOM_NAME),
]


def resolve_identifier(channel_url: Optional[str]) -> Optional[ChannelIdentifier]:
    if not channel_url:
        return None
    clean = channel_url.strip().split("?", 1)[0].split("#", 1)[0].rstrip("/")
    for pattern, kind in _SHAPES:
        m = pattern.search(clean)
        if m:
            return ChannelIdentifier(kind=kind, value=m.group(1))
    return None
