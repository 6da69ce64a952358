from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional

YOUTUBE_BASE = "https://www.youtube.com"


class IdentifierKind(str, Enum):
    HANDLE = "handle"
    CHANNEL_ID = "channelId"
    CUSTOM_NAME = "customName"


@dataclass(frozen=True)
class ChannelIdentifier:
    kind: IdentifierKind
    value: str

    @property
    def channel_page_url(self) -> str:
        if self.kind is IdentifierKind.HANDLE:
            return f"{YOUTUBE_BASE}/@{self.value}"
        if self.kind is IdentifierKind.CHANNEL_ID:
            return f"{YOUTUBE_BASE}/channel/{self.value}"
        return f"{YOUTUBE_BASE}/c/{self.value}"

    @property
    def live_page_url(self) -> str:
        return f"{self.channel_page_url}/live"


@dataclass
class LivePage:
    body: str
    final_url: str
    status_code: int = 200


@dataclass
class LiveVerdict:
    is_live: bool
    reason: str


@dataclass
class OwnershipVerdict:
    owned: bool
    reason: str


@dataclass
class DetectionResult:
    is_live: bool
    reason: str
    stream_url: Optional[str] = None
    stream_title: Optional[str] = None
    stream_thumbnail: Optional[str] = None
    video_id: Optional[str] = None

    @classmethod
    def not_live(cls, reason: str) -> "DetectionResult":
        return cls(is_live=False, reason=reason)

    def to_dict(self):
        return asdict(self)
