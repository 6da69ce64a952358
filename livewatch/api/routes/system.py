from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List, Optional
from livewatch.errors import ChannelStoreError
from livewatch.storage.base import ChannelStore

router = APIRouter(prefix="/system", tags=["system"])

_store: Optional[ChannelStore] = None

class Health(BaseModel):
    status: str

class ChannelView(BaseModel):
    id: str
    name: str
    channel_url: str
    is_live: bool

@router.get('/health', response_model=Health)
async def health():
    return Health(status='ok')

@router.get('/channels', response_model=List[ChannelView])
async def channels():
    if _store is None:
        raise HTTPException(503, "Channel store not available")
    try:
        rows = await _store.list_channels()
    except ChannelStoreError as e:
        raise HTTPException(500, str(e))
    return [ChannelView(id=c.id, name=c.display_name, channel_url=c.channel_url, is_live=c.last_known_live) for c in rows]

def set_store(store: ChannelStore):
    global _store
    _store = store
