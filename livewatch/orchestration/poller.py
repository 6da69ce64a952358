import asyncio
import logging
from typing import Optional

from livewatch.config.settings import settings
from livewatch.errors import ChannelStoreError
from livewatch.storage.base import ChannelStore
from livewatch.youtube.checker import LiveChecker
from .sync import SyncSummary, sync_live_status

log = logging.getLogger(__name__)


class Poller:
    def __init__(self, store: ChannelStore, checker: LiveChecker):
        self.store = store
        self.checker = checker
        self.last_summary: Optional[SyncSummary] = None

    async def run_once(self) -> Optional[SyncSummary]:
        try:
            self.last_summary = await sync_live_status(self.store, self.checker)
        except ChannelStoreError as e:
            log.error("Error syncing YouTube live status: %s", e)
            return None
        return self.last_summary

    async def run(self):
        while True:
            await self.run_once()
            await asyncio.sleep(self.get_interval())

    def get_interval(self) -> int:
        # read on every cycle so PATCH /settings takes effect
        return settings.poll_interval_sec
