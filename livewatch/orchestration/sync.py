import asyncio
import logging
import time
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from typing import List, Optional

from livewatch.errors import ChannelStoreError, UnresolvableChannelError
from livewatch.metrics.registry import (
    channel_checks_total,
    channels_live,
    channels_total,
    last_sync_timestamp,
    live_transitions_total,
    ownership_rejections_total,
    persist_errors_total,
    sync_duration_seconds,
    sync_errors_total,
)
from livewatch.storage.base import ChannelStatusUpdate, ChannelStore, MonitoredChannel
from livewatch.youtube.checker import LiveChecker, error_reason
from livewatch.youtube.models import DetectionResult

log = logging.getLogger(__name__)


@dataclass
class ChannelSyncResult:
    id: str
    name: str
    was_live: bool
    is_live: bool
    detected_by: str
    status_changed: bool
    live_url: Optional[str] = None
    title: Optional[str] = None
    thumbnail: Optional[str] = None
    persisted: bool = True


@dataclass
class SyncSummary:
    checked: int
    live_count: int
    changed_count: int
    skipped: int
    timestamp: str
    results: List[ChannelSyncResult] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Checked {self.checked} channels"

    def to_dict(self):
        d = asdict(self)
        d["message"] = self.message
        return d


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _outcome(result: DetectionResult) -> str:
    if result.is_live:
        return 'live'
    if result.reason.startswith('error:'):
        return 'error'
    if result.reason.startswith('ownership_failed'):
        return 'ownership_failed'
    return 'offline'


def status_update(channel: MonitoredChannel, result: DetectionResult, updated_at: str) -> ChannelStatusUpdate:
    # stream fields are always cleared when not live
    return ChannelStatusUpdate(
        channel_id=channel.id,
        is_live=result.is_live,
        live_stream_url=result.stream_url if result.is_live else None,
        live_stream_title=result.stream_title if result.is_live else None,
        live_stream_thumbnail=result.stream_thumbnail if result.is_live else None,
        updated_at=updated_at,
    )


async def sync_channel(store: ChannelStore, checker: LiveChecker, channel: MonitoredChannel) -> Optional[ChannelSyncResult]:
    try:
        result = await checker.check(channel.channel_url, channel.display_name)
    except UnresolvableChannelError:
        log.warning("Skipping %s: could not extract channel identifier from %s", channel.display_name, channel.channel_url)
        channel_checks_total.labels(outcome='skipped').inc()
        return None
    except Exception as e:
        log.exception("Check error channel=%s error=%s", channel.display_name, e)
        result = DetectionResult.not_live(error_reason(e))

    outcome = _outcome(result)
    channel_checks_total.labels(outcome=outcome).inc()
    if outcome == 'ownership_failed':
        ownership_rejections_total.inc()

    changed = channel.last_known_live != result.is_live
    if changed:
        log.info("Status CHANGED for %s: %s -> %s", channel.display_name, channel.last_known_live, result.is_live)
        live_transitions_total.labels(direction='online' if result.is_live else 'offline').inc()

    update = status_update(channel, result, utc_now_iso())
    persisted = True
    try:
        await store.save_status(update)
    except ChannelStoreError as e:
        persisted = False
        persist_errors_total.inc()
        log.error("Error updating %s: %s", channel.display_name, e)

    return ChannelSyncResult(
        id=channel.id,
        name=channel.display_name,
        was_live=channel.last_known_live,
        is_live=result.is_live,
        detected_by=result.reason,
        status_changed=changed,
        live_url=update.live_stream_url,
        title=update.live_stream_title,
        thumbnail=update.live_stream_thumbnail,
        persisted=persisted,
    )


async def sync_live_status(store: ChannelStore, checker: LiveChecker) -> SyncSummary:
    """Check every monitored channel concurrently and write back its live state.

    A failure to load the channel list aborts the batch with ChannelStoreError;
    everything after that is isolated per channel.
    """
    start = time.monotonic()
    try:
        channels = await store.list_channels()
    except ChannelStoreError:
        sync_errors_total.inc()
        raise

    log.info("Starting live status check for %d channels", len(channels))
    outcomes = await asyncio.gather(*(sync_channel(store, checker, c) for c in channels))
    results = [r for r in outcomes if r is not None]

    summary = SyncSummary(
        checked=len(results),
        live_count=sum(1 for r in results if r.is_live),
        changed_count=sum(1 for r in results if r.status_changed),
        skipped=len(outcomes) - len(results),
        timestamp=utc_now_iso(),
        results=results,
    )
    channels_total.set(summary.checked)
    channels_live.set(summary.live_count)
    sync_duration_seconds.observe(time.monotonic() - start)
    last_sync_timestamp.set_to_current_time()
    log.info("Sync complete: live %d/%d, status changes %d, skipped %d",
             summary.live_count, summary.checked, summary.changed_count, summary.skipped)
    return summary
