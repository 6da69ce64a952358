"""Tests for the channel stores."""

import json
from types import SimpleNamespace

import pytest

from livewatch.errors import ChannelStoreError
from livewatch.storage.base import ChannelStatusUpdate
from livewatch.storage.json_store import JsonChannelStore
from livewatch.storage.supabase_store import SupabaseChannelStore

ROWS = [
    {"id": 1, "name": "SkylifeRP", "channel_url": "https://www.youtube.com/@SkylifeRP", "is_live": True,
     "is_active": True, "live_stream_url": "https://www.youtube.com/watch?v=abc12345678",
     "live_stream_title": "Old", "live_stream_thumbnail": "https://i.ytimg.com/vi/abc12345678/maxresdefault.jpg"},
    {"id": 2, "name": "Retired", "channel_url": "https://www.youtube.com/@Retired", "is_live": False,
     "is_active": False},
]


def _offline(channel_id: str) -> ChannelStatusUpdate:
    return ChannelStatusUpdate(channel_id=channel_id, is_live=False, live_stream_url=None, live_stream_title=None,
                               live_stream_thumbnail=None, updated_at="2026-10-19T12:00:00+00:00")


@pytest.mark.asyncio
async def test_json_store_lists_active_channels(write_channels):
    store = JsonChannelStore(write_channels(ROWS))
    channels = await store.list_channels()
    assert [c.id for c in channels] == ["1"]
    assert channels[0].display_name == "SkylifeRP"
    assert channels[0].last_known_live is True


@pytest.mark.asyncio
async def test_json_store_clears_stream_fields(write_channels):
    path = write_channels(ROWS)
    store = JsonChannelStore(path)
    await store.save_status(_offline("1"))
    row = json.loads(path.read_text(encoding="utf-8"))[0]
    assert row["is_live"] is False
    assert row["live_stream_url"] is None
    assert row["live_stream_title"] is None
    assert row["live_stream_thumbnail"] is None
    assert row["updated_at"] == "2026-10-19T12:00:00+00:00"
    assert not path.with_suffix(".tmp").exists()


@pytest.mark.asyncio
async def test_json_store_errors(tmp_path, write_channels):
    with pytest.raises(ChannelStoreError):
        await JsonChannelStore(tmp_path / "missing.json").list_channels()
    store = JsonChannelStore(write_channels(ROWS))
    with pytest.raises(ChannelStoreError):
        await store.save_status(_offline("404"))


class FakeQuery:
    def __init__(self, log, data=None, fail=False):
        self.log = log
        self.data = data or []
        self.fail = fail

    def __getattr__(self, name):
        def call(*args, **kwargs):
            self.log.append((name, args))
            return self
        return call

    def execute(self):
        if self.fail:
            raise RuntimeError("network down")
        return SimpleNamespace(data=self.data)


class FakeSupabase:
    def __init__(self, data=None, fail=False):
        self.log = []
        self.data = data
        self.fail = fail

    def table(self, name):
        self.log.append(("table", (name,)))
        return FakeQuery(self.log, self.data, self.fail)


@pytest.mark.asyncio
async def test_supabase_store_reads_active_rows():
    fake = FakeSupabase(data=[ROWS[0]])
    store = SupabaseChannelStore(None, None, client=fake)
    channels = await store.list_channels()
    assert channels[0].channel_url == "https://www.youtube.com/@SkylifeRP"
    assert ("eq", ("is_active", True)) in fake.log


@pytest.mark.asyncio
async def test_supabase_store_update_targets_row():
    fake = FakeSupabase()
    store = SupabaseChannelStore(None, None, client=fake)
    await store.save_status(_offline("1"))
    update = next(args for name, args in fake.log if name == "update")
    assert update[0]["live_stream_url"] is None
    assert ("eq", ("id", "1")) in fake.log


@pytest.mark.asyncio
async def test_supabase_failure_is_a_store_error():
    store = SupabaseChannelStore(None, None, client=FakeSupabase(fail=True))
    with pytest.raises(ChannelStoreError):
        await store.list_channels()


def test_supabase_store_requires_credentials():
    with pytest.raises(ChannelStoreError):
        SupabaseChannelStore(None, None)
