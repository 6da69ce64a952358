from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import Optional, Dict
from livewatch.config.settings import settings

router = APIRouter(prefix="/settings", tags=["settings"])

dynamic_overrides: Dict[str, str] = {}

class SettingsView(BaseModel):
    poll_interval_sec: int
    request_timeout_sec: float
    canonical_timeout_sec: float
    proximity_window_chars: int
    channel_store: str
    channel_table: str
    log_format: str
    metrics_port: int
    api_port: int
    overrides: Dict[str, str]

class SettingsPatch(BaseModel):
    poll_interval_sec: Optional[int] = Field(None, ge=30, le=86400)
    request_timeout_sec: Optional[float] = Field(None, gt=0, le=120)
    proximity_window_chars: Optional[int] = Field(None, ge=100, le=50000)

@router.get("", response_model=SettingsView)
async def get_settings():
    return SettingsView(
        poll_interval_sec=settings.poll_interval_sec,
        request_timeout_sec=settings.request_timeout_sec,
        canonical_timeout_sec=settings.canonical_timeout_sec,
        proximity_window_chars=settings.proximity_window_chars,
        channel_store=settings.channel_store,
        channel_table=settings.channel_table,
        log_format=settings.log_format,
        metrics_port=settings.metrics_port,
        api_port=settings.api_port,
        overrides=dynamic_overrides,
    )

@router.patch("", response_model=SettingsView)
async def patch_settings(patch: SettingsPatch):
    if patch.poll_interval_sec is not None:
        settings.poll_interval_sec = patch.poll_interval_sec  # type: ignore[attr-defined]
        dynamic_overrides["poll_interval_sec"] = str(patch.poll_interval_sec)
    if patch.request_timeout_sec is not None:
        settings.request_timeout_sec = patch.request_timeout_sec  # type: ignore[attr-defined]
        dynamic_overrides["request_timeout_sec"] = str(patch.request_timeout_sec)
    if patch.proximity_window_chars is not None:
        settings.proximity_window_chars = patch.proximity_window_chars  # type: ignore[attr-defined]
        dynamic_overrides["proximity_window_chars"] = str(patch.proximity_window_chars)
    return await get_settings()
