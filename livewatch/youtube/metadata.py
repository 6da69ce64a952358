import re
from typing import Optional

from .models import YOUTUBE_BASE
from .signals import (
    JSON_STR,
    LIVE_PROXIMITY_MARKERS,
    REPLAY_MARKER,
    VIDEO_ID,
    VIDEO_ID_FIELD,
    any_marker,
    canonical_href,
    decode_json_string,
    meta_content,
    page_title,
    watch_video_id,
    window,
)

SITE_NAME = "YouTube"
THUMBNAIL_TEMPLATE = "https://i.ytimg.com/vi/{video_id}/maxresdefault.jpg"

# Radius, in characters, searched around each embedded videoId for a live marker.
VIDEO_ID_PROXIMITY_WINDOW = 2000

_VIDEO_DETAILS_ID = re.compile(r'"videoDetails"\s*:\s*\{\s*"videoId"\s*:\s*"(' + VIDEO_ID + r')"')

_STRUCTURED_TITLES = [
    re.compile(r'"videoDetails"\s*:\s*\{[^{}]*?"title"\s*:\s*"' + JSON_STR + '"'),
    re.compile(r'"title"\s*:\s*\{\s*"simpleText"\s*:\s*"' + JSON_STR + '"'),
    re.compile(r'"title"\s*:\s*\{\s*"runs"\s*:\s*\[\s*\{\s*"text"\s*:\s*"' + JSON_STR + '"'),
]

_SITE_SUFFIX = re.compile(r"(?:^|\s)-\s+" + SITE_NAME + r"\s*$")


def watch_url(video_id: str) -> str:
    return f"{YOUTUBE_BASE}/watch?v={video_id}"


def thumbnail_url(video_id: str) -> str:
    return THUMBNAIL_TEMPLATE.format(video_id=video_id)


def _nearby_live_video_id(body: str, radius: int) -> Optional[str]:
    for m in VIDEO_ID_FIELD.finditer(body):
        region = window(body, m.start(), m.end(), radius)
        if any_marker(region, LIVE_PROXIMITY_MARKERS) and not REPLAY_MARKER.search(region):
            return m.group(1)
    return None


def extract_video_id(body: str, final_url: Optional[str], proximity_window: int = VIDEO_ID_PROXIMITY_WINDOW) -> Optional[str]:
    vid = watch_video_id(final_url)
    if vid:
        return vid
    vid = watch_video_id(meta_content(body, "og:url"))
    if vid:
        return vid
    vid = watch_video_id(canonical_href(body))
    if vid:
        return vid
    m = _VIDEO_DETAILS_ID.search(body)
    if m:
        return m.group(1)
    vid = _nearby_live_video_id(body, proximity_window)
    if vid:
        return vid
    m = VIDEO_ID_FIELD.search(body)
    return m.group(1) if m else None


def clean_title(raw: Optional[str]) -> Optional[str]:
    if raw is None:
        return None
    title = _SITE_SUFFIX.sub("", raw.strip()).strip()
    if not title or title == SITE_NAME:
        return None
    return title


def extract_title(body: str, channel_name: str) -> str:
    for pattern in _STRUCTURED_TITLES:
        m = pattern.search(body)
        if m:
            title = clean_title(decode_json_string(m.group(1)))
            if title:
                return title
    for raw in (meta_content(body, "title"), meta_content(body, "og:title"), page_title(body)):
        title = clean_title(raw)
        if title:
            return title
    return f"{channel_name} is Live!"
