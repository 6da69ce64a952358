from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


@dataclass
class MonitoredChannel:
    id: str
    channel_url: str
    display_name: str
    last_known_live: bool = False

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> "MonitoredChannel":
        return cls(
            id=str(row["id"]),
            channel_url=row.get("channel_url") or "",
            display_name=row.get("name") or "",
            last_known_live=bool(row.get("is_live")),
        )


@dataclass
class ChannelStatusUpdate:
    channel_id: str
    is_live: bool
    live_stream_url: Optional[str]
    live_stream_title: Optional[str]
    live_stream_thumbnail: Optional[str]
    updated_at: str

    def to_row(self) -> Dict[str, Any]:
        row = asdict(self)
        row.pop("channel_id")
        return row


class ChannelStore(ABC):
    @abstractmethod
    async def list_channels(self) -> List[MonitoredChannel]:
        """Active monitored channels. Raises ChannelStoreError."""

    @abstractmethod
    async def save_status(self, update: ChannelStatusUpdate) -> None:
        """Write one channel's live state. Raises ChannelStoreError."""
