from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)

class Settings(BaseSettings):
    supabase_url: Optional[str] = Field(default=None, alias="SUPABASE_URL")
    supabase_key: Optional[str] = Field(default=None, alias="SUPABASE_KEY")
    channel_table: str = Field(default="featured_youtubers", alias="CHANNEL_TABLE")
    channel_store: str = Field(default="supabase", alias="CHANNEL_STORE")
    channels_file: str = Field(default="data/channels.json", alias="CHANNELS_FILE")
    request_timeout_sec: float = Field(default=20.0, alias="REQUEST_TIMEOUT_SEC")
    canonical_timeout_sec: float = Field(default=10.0, alias="CANONICAL_TIMEOUT_SEC")
    proximity_window_chars: int = Field(default=2000, alias="PROXIMITY_WINDOW_CHARS")
    poll_interval_sec: int = Field(default=300, alias="POLL_INTERVAL_SEC")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="USER_AGENT")
    log_format: str = Field(default="plain", alias="LOG_FORMAT")
    metrics_port: int = Field(default=9100, alias="METRICS_PORT")
    api_port: int = Field(default=8000, alias="API_PORT")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

settings = Settings()
