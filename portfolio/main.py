from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import router
from .config import settings
from .database import async_session_factory, init_db
from .shell import ToolShell
from .tools import CapabilityClient


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    capabilities = CapabilityClient(
        settings.functions_url,
        api_key=settings.functions_api_key,
        timeout=settings.capability_timeout_s,
    )
    shell = ToolShell(capabilities=capabilities)
    async with async_session_factory() as db:
        await shell.load(db)
    app.state.shell = shell
    yield
    shell.close()


app = FastAPI(lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"ok": True}
