class LiveWatchError(Exception):
    pass


class UnresolvableChannelError(LiveWatchError):
    def __init__(self, channel_url: str):
        super().__init__(f"Unrecognised channel URL: {channel_url}")
        self.channel_url = channel_url


class ChannelStoreError(LiveWatchError):
    """Reading or writing the monitored channel records failed."""


class ChannelLookupError(LiveWatchError):
    pass
