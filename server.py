import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI

from vimeo_proxy.api.cors import add_cors_headers
from vimeo_proxy.api.v1.endpoints.videos import router as video_router
from vimeo_proxy.config import Settings, load_settings
from vimeo_proxy.domain.entities.token_table import TokenTable
from vimeo_proxy.infrastructure.vimeo_catalog import build_http_client

log = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One upstream client per running app, closed on shutdown
        app.state.http_client = build_http_client(settings, transport=transport)
        try:
            yield
        finally:
            await app.state.http_client.aclose()

    app = FastAPI(title="Vimeo Proxy API", lifespan=lifespan)

    # Built once, read-only for the life of the process
    app.state.settings = settings
    app.state.token_table = TokenTable.from_pairs(settings.token_pairs)

    if not len(app.state.token_table):
        log.warning("No caller secrets configured, every request will be rejected")

    # Setup CORS
    app.middleware("http")(add_cors_headers)

    # Register routers
    app.include_router(video_router)

    @app.get("/")
    async def root():
        return {"status": "ok", "message": "Vimeo proxy is running"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
