from fastapi import APIRouter
from fastapi.responses import JSONResponse
from typing import Optional

from livewatch.errors import ChannelStoreError
from livewatch.orchestration.sync import sync_live_status
from livewatch.storage.base import ChannelStore
from livewatch.youtube.checker import LiveChecker

router = APIRouter(prefix="/sync", tags=["sync"])

_store: Optional[ChannelStore] = None
_checker: Optional[LiveChecker] = None


@router.post("")
async def run_sync():
    if _store is None or _checker is None:
        return JSONResponse({"error": "Live checker not available"}, status_code=503)
    try:
        summary = await sync_live_status(_store, _checker)
    except ChannelStoreError as e:
        return JSONResponse({"error": str(e)}, status_code=500)
    return summary.to_dict()


def set_engine(store: ChannelStore, checker: LiveChecker):
    global _store, _checker
    _store = store
    _checker = checker
