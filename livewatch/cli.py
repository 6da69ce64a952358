import asyncio
import argparse
import json
import logging
import sys
from livewatch.orchestration.service import main as service_main, configure_logging

async def _sync() -> int:
    from livewatch.config.settings import settings
    from livewatch.errors import ChannelStoreError
    from livewatch.orchestration.sync import sync_live_status
    from livewatch.storage.factory import build_store
    from livewatch.youtube.checker import LiveChecker
    from livewatch.youtube.page_client import YouTubePageClient

    try:
        store = build_store(settings)
        async with YouTubePageClient() as client:
            summary = await sync_live_status(store, LiveChecker(client))
    except ChannelStoreError as e:
        print(json.dumps({"error": str(e)}))
        return 1
    print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))
    return 0


async def _check(channel_url: str, name: str) -> int:
    from livewatch.errors import UnresolvableChannelError
    from livewatch.youtube.checker import LiveChecker
    from livewatch.youtube.page_client import YouTubePageClient

    async with YouTubePageClient() as client:
        try:
            result = await LiveChecker(client).check(channel_url, name)
        except UnresolvableChannelError as e:
            print(e)
            return 2
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    return 0


async def _lookup(channel_url: str) -> int:
    from livewatch.errors import LiveWatchError
    from livewatch.youtube.channel_info import lookup_channel
    from livewatch.youtube.page_client import YouTubePageClient

    async with YouTubePageClient() as client:
        try:
            info = await lookup_channel(client, channel_url)
        except LiveWatchError as e:
            print(e)
            return 2
    print(json.dumps(info.to_dict(), indent=2, ensure_ascii=False))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="YouTube live status sync")
    parser.add_argument("command", nargs="?", default="run", choices=["run", "sync", "check", "lookup"], help="run service, run one sync batch, check or look up a single channel")
    parser.add_argument("url", nargs="?", help="channel URL for check / lookup")
    parser.add_argument("name", nargs="?", default="", help="display name for check")
    args = parser.parse_args(argv)

    if args.command in ("check", "lookup") and not args.url:
        print("Missing channel URL")
        return 2

    if args.command == "run":
        # Start the long-running service (poller + API server)
        asyncio.run(service_main())
        return 0

    from livewatch.config.settings import settings
    configure_logging(settings.log_format)
    logging.getLogger().setLevel(logging.WARNING if args.command == "sync" else logging.INFO)
    if args.command == "sync":
        return asyncio.run(_sync())
    if args.command == "check":
        return asyncio.run(_check(args.url, args.name or args.url))
    return asyncio.run(_lookup(args.url))

if __name__ == "__main__":
    sys.exit(main())
