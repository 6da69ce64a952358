import logging
import asyncio
import json
import sys
from prometheus_client import start_http_server
from livewatch.config.settings import settings
from livewatch.orchestration.poller import Poller
from livewatch.storage.factory import build_store
from livewatch.youtube.checker import LiveChecker
from livewatch.youtube.page_client import YouTubePageClient
from livewatch.api.server import app, set_engine
import uvicorn


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            'time': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'msg': record.getMessage(),
        }
        if record.exc_info:
            base['exc'] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def configure_logging(log_format: str = "plain"):
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    if log_format == 'json':
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.INFO)
    # per-request lines from httpx drown out the sync log
    logging.getLogger("httpx").setLevel(logging.WARNING)


async def main():
    configure_logging(settings.log_format)
    if settings.metrics_port:
        start_http_server(settings.metrics_port)
    store = build_store(settings)
    async with YouTubePageClient() as client:
        checker = LiveChecker(client)
        set_engine(store, checker)
        poller = Poller(store, checker)
        # Run poller and API server concurrently
        async def run_api():
            config = uvicorn.Config(app, host="0.0.0.0", port=settings.api_port, log_level="info", lifespan="on")
            server = uvicorn.Server(config)
            await server.serve()
        await asyncio.gather(poller.run(), run_api())

if __name__ == "__main__":
    asyncio.run(main())
