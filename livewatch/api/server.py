from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from livewatch.api.routes import settings as settings_routes
from livewatch.api.routes import sync as sync_routes
from livewatch.api.routes import channels as channels_routes
from livewatch.api.routes import system as system_routes
from livewatch.storage.base import ChannelStore
from livewatch.youtube.checker import LiveChecker

app = FastAPI(title="livewatch API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.include_router(settings_routes.router)
app.include_router(sync_routes.router)
app.include_router(channels_routes.router)
app.include_router(system_routes.router)

# Engine injection proxy

def set_engine(store: ChannelStore, checker: LiveChecker):
    sync_routes.set_engine(store, checker)
    channels_routes.set_checker(checker)
    system_routes.set_store(store)
