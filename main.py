from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from autorefresh.api.config import router as config_router
from autorefresh.api.pages import router as pages_router
from autorefresh.core import logs
from autorefresh.core.config import settings
from autorefresh.core.properties import SystemProperties
from autorefresh.extensions.registry import init_extensions


@asynccontextmanager
async def lifespan(app: FastAPI):
    logs.init("autorefresh", settings.LOG_LEVEL)
    # one property context per process, shared by extensions and renderers
    app.state.properties = SystemProperties()
    app.state.extensions = init_extensions(app.state.properties)
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    return {"status": "ok", "message": "auto-refresh settings service running"}


app.include_router(config_router)
app.include_router(pages_router)
