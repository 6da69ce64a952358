from typing import List, Optional

from .models import LiveVerdict
from .signals import (
    CONTRADICTING_LIVE_MARKERS,
    REPLAY_MARKER,
    Rule,
    any_marker,
    is_watch_url,
    rule,
    window,
)

# Characters either side of a positive match that are checked for a replay flag.
REPLAY_CONTEXT_WINDOW = 1000

NEGATIVE_RULES: List[Rule] = [
    rule("isLive_false", r'"isLive"\s*:\s*false'),
    rule("isLiveNow_false", r'"isLiveNow"\s*:\s*false'),
    rule("video_unavailable", "This video is unavailable", literal=True),
    rule("video_private", "This video is private", literal=True),
    rule("recording_unavailable", "This live stream recording is not available", literal=True),
    rule("isReplay_true", r'"isReplay"\s*:\s*true'),
    rule("isPremiere_true", r'"isPremiere"\s*:\s*true'),
    rule("isUpcoming_true", r'"isUpcoming"\s*:\s*true'),
    rule("stream_offline", r'"status"\s*:\s*"LIVE_STREAM_OFFLINE"'),
]

POSITIVE_RULES: List[Rule] = [
    rule("isLive_true", r'"isLive"\s*:\s*true'),
    rule("isLiveNow_true", r'"isLiveNow"\s*:\s*true'),
    rule("badge_live_now", "BADGE_STYLE_TYPE_LIVE_NOW", literal=True),
    rule("style_live", r'"style"\s*:\s*"LIVE"'),
    rule("live_badge", r'"liveBadge"\s*:'),
    rule("live_chat_renderer", r'"liveChatRenderer"\s*:'),
    rule("live_streamability", r'"liveStreamabilityRenderer"\s*:'),
    rule("broadcast_id", r'"broadcastId"\s*:\s*"'),
    rule("latency_class", r'"latencyClass"\s*:\s*"'),
    rule("is_live_content", r'"isLiveContent"\s*:\s*true'),
    rule("stream_started", r'"startTimestamp"\s*:\s*"'),
]

LIVE_CHAT_CONTINUATION = rule("live_chat_active", r'/live_chat\?|"liveChatContinuation"')
LIVE_CHAT_REPLAY = rule("live_chat_replay", r"live_chat_replay")
WATCH_PAGE_META = rule("redirect_with_live_meta", r'"videoDetails"\s*:|"liveBadge"\s*:')


def _negative_marker(body: str) -> Optional[str]:
    for r in NEGATIVE_RULES:
        if r.matches(body):
            return r.tag
    return None


def _positive_match(r: Rule, body: str) -> bool:
    for m in r.occurrences(body):
        if not REPLAY_MARKER.search(window(body, m.start(), m.end(), REPLAY_CONTEXT_WINDOW)):
            return True
    return False


def detect_live(body: str, final_url: Optional[str] = None) -> LiveVerdict:
    """Decide live / not live from the text of a channel's /live page.

    Explicit not-live markers win unless a positive marker contradicts them
    somewhere in the same document. Positive rules are then tried in order and
    the first one whose match is not inside a replay region names the reason.
    """
    negative = _negative_marker(body)
    if negative and not any_marker(body, CONTRADICTING_LIVE_MARKERS):
        return LiveVerdict(False, f"not_live:{negative}")

    for r in POSITIVE_RULES:
        if _positive_match(r, body):
            return LiveVerdict(True, r.tag)

    if (LIVE_CHAT_CONTINUATION.matches(body)
            and not LIVE_CHAT_REPLAY.matches(body)
            and not REPLAY_MARKER.search(body)):
        return LiveVerdict(True, LIVE_CHAT_CONTINUATION.tag)

    if is_watch_url(final_url) and WATCH_PAGE_META.matches(body):
        return LiveVerdict(True, WATCH_PAGE_META.tag)

    return LiveVerdict(False, "no_live_indicators")
