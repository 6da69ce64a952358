from livewatch.config.settings import Settings
from .base import ChannelStore


def build_store(cfg: Settings) -> ChannelStore:
    if cfg.channel_store == "file":
        from .json_store import JsonChannelStore
        return JsonChannelStore(cfg.channels_file)
    from .supabase_store import SupabaseChannelStore
    return SupabaseChannelStore(cfg.supabase_url, cfg.supabase_key, cfg.channel_table)
