import logging
from typing import Optional

import httpx

from livewatch.config.settings import settings
from livewatch.errors import UnresolvableChannelError
from .canonical import fetch_canonical_channel_id
from .identifier import resolve_identifier
from .live_detector import detect_live
from .metadata import extract_title, extract_video_id, thumbnail_url, watch_url
from .models import DetectionResult
from .ownership import verify_ownership
from .page_client import YouTubePageClient

log = logging.getLogger(__name__)


def error_reason(exc: BaseException) -> str:
    return f"error:{str(exc) or type(exc).__name__}"


class LiveChecker:
    def __init__(self, client: YouTubePageClient, proximity_window: Optional[int] = None):
        self.client = client
        self.proximity_window = proximity_window

    async def check(self, channel_url: str, display_name: str) -> DetectionResult:
        """Run the full detection pipeline for one channel.

        Raises UnresolvableChannelError when the URL is not a channel reference.
        Network failures are folded into a not-live result.
        """
        identifier = resolve_identifier(channel_url)
        if identifier is None:
            raise UnresolvableChannelError(channel_url)

        try:
            expected_id = await fetch_canonical_channel_id(self.client, identifier)
            page = await self.client.fetch_live_page(identifier)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            log.warning("Live check failed for %s: %r", display_name, e)
            return DetectionResult.not_live(error_reason(e))

        verdict = detect_live(page.body, page.final_url)
        if not verdict.is_live:
            log.info("%s not live (%s)", display_name, verdict.reason)
            return DetectionResult.not_live(verdict.reason)

        ownership = verify_ownership(page.body, expected_id, display_name)
        if not ownership.owned:
            log.warning("%s: live signal %s rejected, %s", display_name, verdict.reason, ownership.reason)
            return DetectionResult.not_live(f"ownership_failed:{ownership.reason};{verdict.reason}")

        window = self.proximity_window if self.proximity_window is not None else settings.proximity_window_chars
        video_id = extract_video_id(page.body, page.final_url, window)
        if video_id is None:
            log.warning("%s is live but no video id could be extracted", display_name)
        result = DetectionResult(
            is_live=True,
            reason=f"{verdict.reason};{ownership.reason}",
            stream_url=watch_url(video_id) if video_id else identifier.live_page_url,
            stream_title=extract_title(page.body, display_name),
            stream_thumbnail=thumbnail_url(video_id) if video_id else None,
            video_id=video_id,
        )
        log.info("%s is LIVE (%s) %s", display_name, result.reason, result.stream_url)
        return result
