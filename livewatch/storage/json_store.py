import json
from pathlib import Path
from typing import Any, Dict, List, Union

from livewatch.errors import ChannelStoreError
from .base import ChannelStatusUpdate, ChannelStore, MonitoredChannel


class JsonChannelStore(ChannelStore):
    """Channel rows kept in a local JSON file, same columns as the database table.

    Reads and writes are synchronous and never yield to the event loop, so
    concurrent per-channel saves cannot interleave.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _load(self) -> List[Dict[str, Any]]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                rows = json.load(f)
        except (OSError, ValueError) as e:
            raise ChannelStoreError(f"Could not read {self.path}: {e}") from e
        if not isinstance(rows, list):
            raise ChannelStoreError(f"{self.path} must contain a list of channel rows")
        return rows

    def _flush(self, rows: List[Dict[str, Any]]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            json.dump(rows, f, ensure_ascii=False, indent=2)
        tmp.replace(self.path)

    async def list_channels(self) -> List[MonitoredChannel]:
        return [MonitoredChannel.from_row(r) for r in self._load() if r.get("is_active", True)]

    async def save_status(self, update: ChannelStatusUpdate) -> None:
        rows = self._load()
        for row in rows:
            if str(row.get("id")) == update.channel_id:
                row.update(update.to_row())
                break
        else:
            raise ChannelStoreError(f"Unknown channel {update.channel_id}")
        try:
            self._flush(rows)
        except OSError as e:
            raise ChannelStoreError(f"Could not write {self.path}: {e}") from e
