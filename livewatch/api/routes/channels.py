from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Optional

from livewatch.errors import ChannelLookupError, UnresolvableChannelError
from livewatch.youtube.channel_info import lookup_channel
from livewatch.youtube.checker import LiveChecker

router = APIRouter(prefix="/channels", tags=["channels"])

_checker: Optional[LiveChecker] = None


class LookupRequest(BaseModel):
    channel_url: str = Field(alias="channelUrl")


class CheckRequest(BaseModel):
    channel_url: str = Field(alias="channelUrl")
    name: str = ""


def _require_checker() -> LiveChecker:
    if _checker is None:
        raise HTTPException(503, "Live checker not available")
    return _checker


@router.post("/lookup")
async def lookup(req: LookupRequest):
    checker = _require_checker()
    try:
        info = await lookup_channel(checker.client, req.channel_url)
    except UnresolvableChannelError as e:
        raise HTTPException(400, str(e))
    except ChannelLookupError as e:
        raise HTTPException(502, str(e))
    return info.to_dict()


@router.post("/check")
async def check(req: CheckRequest):
    checker = _require_checker()
    try:
        result = await checker.check(req.channel_url, req.name)
    except UnresolvableChannelError as e:
        raise HTTPException(400, str(e))
    return result.to_dict()


def set_checker(checker: LiveChecker):
    global _checker
    _checker = checker
