"""FastAPI application factory."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.handlers import handle_relay
from core.config import Config
from core.headers import HeaderBuilder
from core.protocols import RequestLogger
from core.transform import RequestTransformer
from services.relay_service import RelayService
from services.upstream import UpstreamClient

RELAY_PATH = "/api/claude"


def create_app(
    config: Config,
    logger: RequestLogger,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``transport`` replaces the network transport of the upstream client (tests).
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        upstream_client = httpx.AsyncClient(
            timeout=config.upstream.timeout,
            transport=transport,
        )
        app.state.upstream_client = UpstreamClient(upstream_client)
        app.state.relay_service = RelayService(
            config=config,
            logger=logger,
            transformer=RequestTransformer(config.relay.credential_field),
            header_builder=HeaderBuilder(config.upstream.anthropic_version),
        )
        try:
            yield
        finally:
            await upstream_client.aclose()

    app = FastAPI(title="Claude API Relay", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post(RELAY_PATH)
    async def relay_claude(request: Request):
        return await handle_relay(request, logger)

    return app
