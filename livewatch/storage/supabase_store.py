import asyncio
import logging
from typing import List, Optional

from supabase import Client, create_client

from livewatch.errors import ChannelStoreError
from .base import ChannelStatusUpdate, ChannelStore, MonitoredChannel

log = logging.getLogger(__name__)


class SupabaseChannelStore(ChannelStore):
    def __init__(self, url: Optional[str], key: Optional[str], table: str = "featured_youtubers",
                 client: Optional[Client] = None):
        if client is None:
            if not url or not key:
                raise ChannelStoreError("SUPABASE_URL and SUPABASE_KEY required")
            client = create_client(url, key)
        self._client = client
        self.table = table

    def _select_active(self):
        return (
            self._client.table(self.table)
            .select("id, channel_url, is_live, name")
            .eq("is_active", True)
            .execute()
        )

    def _update(self, update: ChannelStatusUpdate):
        return self._client.table(self.table).update(update.to_row()).eq("id", update.channel_id).execute()

    async def list_channels(self) -> List[MonitoredChannel]:
        try:
            resp = await asyncio.to_thread(self._select_active)
        except Exception as e:
            raise ChannelStoreError(f"Could not load channels from {self.table}: {e}") from e
        return [MonitoredChannel.from_row(row) for row in (resp.data or [])]

    async def save_status(self, update: ChannelStatusUpdate) -> None:
        try:
            await asyncio.to_thread(self._update, update)
        except Exception as e:
            raise ChannelStoreError(f"Could not update channel {update.channel_id}: {e}") from e
