"""Text-level signal extraction from scraped YouTube markup.

Everything that knows about the shape of the embedded ``ytInitialData`` /
``ytInitialPlayerResponse`` blobs and the page ``<head>`` lives here, so the
detector, ownership and metadata code only deal in named signals.
"""
import html as html_lib
import json
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional

VIDEO_ID = r"[A-Za-z0-9_-]{11}"
CHANNEL_ID = r"UC[A-Za-z0-9_-]{22}"
# body of a JSON string literal, escapes included
JSON_STR = r'((?:[^"\\]|\\.)*)'

REPLAY_MARKER = re.compile(r'"isReplay"\s*:\s*true')

# Positive markers whose presence contradicts an explicit not-live marker.
CONTRADICTING_LIVE_MARKERS = [
    re.compile(r'"isLive"\s*:\s*true'),
    re.compile(r'"isLiveNow"\s*:\s*true'),
    re.compile(r'BADGE_STYLE_TYPE_LIVE_NOW'),
]

# Markers that make a nearby videoId the likely live one.
LIVE_PROXIMITY_MARKERS = CONTRADICTING_LIVE_MARKERS + [
    re.compile(r'"hlsManifestUrl"'),
    re.compile(r'"isLiveContent"\s*:\s*true'),
]

VIDEO_ID_FIELD = re.compile(r'"videoId"\s*:\s*"(' + VIDEO_ID + r')"')


@dataclass(frozen=True)
class Rule:
    tag: str
    pattern: re.Pattern[str]

    def occurrences(self, text: str) -> Iterator[re.Match]:
        return self.pattern.finditer(text)

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def rule(tag: str, pattern: str, literal: bool = False) -> Rule:
    return Rule(tag, re.compile(re.escape(pattern) if literal else pattern))


def any_marker(text: str, markers: List[re.Pattern[str]]) -> bool:
    return any(m.search(text) for m in markers)


def window(text: str, start: int, end: int, radius: int) -> str:
    return text[max(0, start - radius):end + radius]


def decode_json_string(raw: str) -> str:
    """Decode the body of a JSON string literal (``\\u0026`` and friends)."""
    try:
        return json.loads(f'"{raw}"')
    except ValueError:
        try:
            return raw.encode("latin-1", "backslashreplace").decode("unicode_escape")
        except UnicodeDecodeError:
            return raw


def string_field(text: str, name: str) -> Optional[str]:
    """First value of a ``"name":"..."`` field, decoded."""
    m = re.search(r'"' + re.escape(name) + r'"\s*:\s*"' + JSON_STR + '"', text)
    if not m:
        return None
    return decode_json_string(m.group(1))


def channel_id_field(text: str, name: str) -> Optional[str]:
    m = re.search(r'"' + re.escape(name) + r'"\s*:\s*"(UC[A-Za-z0-9_-]+)"', text)
    return m.group(1) if m else None


def meta_content(text: str, key: str) -> Optional[str]:
    """``content`` of a ``<meta property|name|itemprop=key>`` tag, either attribute order."""
    k = re.escape(key)
    patterns = [
        r'<meta\s+(?:property|name|itemprop)="' + k + r'"\s+content="([^"]*)"',
        r'<meta\s+content="([^"]*)"\s+(?:property|name|itemprop)="' + k + r'"',
    ]
    for p in patterns:
        m = re.search(p, text, re.IGNORECASE)
        if m:
            return html_lib.unescape(m.group(1))
    return None


def canonical_href(text: str) -> Optional[str]:
    m = re.search(r'<link\s+rel="canonical"\s+href="([^"]+)"', text, re.IGNORECASE)
    return html_lib.unescape(m.group(1)) if m else None


def page_title(text: str) -> Optional[str]:
    m = re.search(r"<title[^>]*>([^<]*)</title>", text, re.IGNORECASE)
    return html_lib.unescape(m.group(1)) if m else None


def watch_video_id(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    m = re.search(r"[?&]v=(" + VIDEO_ID + r")(?![A-Za-z0-9_-])", url)
    return m.group(1) if m else None


def is_watch_url(url: Optional[str]) -> bool:
    return bool(url) and "/watch" in url and watch_video_id(url) is not None
