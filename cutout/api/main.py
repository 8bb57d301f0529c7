"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, HTTPException, Request, Response

from cutout.config.settings import get_settings
from cutout.removebg.client import RemoveBgClient
from cutout.removebg.errors import EncodingError


def create_app(client: RemoveBgClient | None = None) -> FastAPI:
    """Initialise the FastAPI application.

    Without an explicit ``client`` one is built from settings at startup, so a
    missing API key stops the service before it accepts requests.
    """

    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if client is not None:
            app.state.remove_bg = client
            yield
            return
        async with RemoveBgClient.from_settings(settings) as owned:
            app.state.remove_bg = owned
            yield

    app = FastAPI(
        title="Wardrobe Cutout API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "prod" else None,
        redoc_url="/redoc" if settings.environment != "prod" else None,
        lifespan=lifespan,
    )

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.post("/cutout", tags=["images"])
    async def cutout(request: Request) -> Response:
        """Remove the background from the raw image sent as the request body."""

        body = await request.body()
        outcome = await request.app.state.remove_bg.remove_background(body)
        if outcome.ok:
            return Response(content=outcome.data, media_type="image/png")
        if isinstance(outcome.error, EncodingError):
            raise HTTPException(status_code=422, detail=str(outcome.error))
        raise HTTPException(status_code=502, detail=str(outcome.error))

    return app
