"""REST API interface for the bid proxy.

Provides endpoints for:
- OpenRTB auction proxying (POST /openrtb2/auction)
- Health checks
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import Response

from ...clients import Dispatcher, DownstreamClient
from ...config import ProxyConfig, configure_logging, get_settings, load_proxy_config
from ...errors import MalformedRequestError, RequestSerializationError
from ...flows import AuctionFlow

logger = logging.getLogger(__name__)

AUCTION_PATH = "/openrtb2/auction"


def create_app(
    config: Optional[ProxyConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create the proxy application.

    Args:
        config: Proxy configuration. If None, settings are loaded and logging
            is configured at startup
        transport: httpx transport for downstream calls (tests)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log_file = None
        if config is None:
            settings = get_settings()
            configure_logging(settings)
            proxy_config = load_proxy_config(settings)
            log_file = settings.log_file
        else:
            proxy_config = config

        if log_file:
            logger.info(f"Proxy server started. Logging to {log_file}")
        else:
            logger.info("Proxy server started")

        client = DownstreamClient(
            timeout=proxy_config.downstream_timeout,
            transport=transport,
        )
        app.state.config = proxy_config
        app.state.client = client
        try:
            yield
        finally:
            await client.close()

    app = FastAPI(
        title="Bid Proxy API",
        description="OpenRTB auction proxy arbitrating between PubMatic and Jio",
        version="0.1.0",
        lifespan=lifespan,
    )

    # =========================================================================
    # Endpoints
    # =========================================================================

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.post(AUCTION_PATH)
    async def auction(request: Request):
        """Proxy an auction and return the highest downstream bid."""
        body = await request.body()

        flow = AuctionFlow(
            config=request.app.state.config,
            dispatcher=Dispatcher(request.app.state.client),
        )
        try:
            outcome = await flow.run(body)
        except MalformedRequestError:
            raise HTTPException(status_code=400, detail="Invalid JSON in request")
        except RequestSerializationError as e:
            logger.error(str(e))
            raise HTTPException(status_code=500, detail="Failed to marshal modified request")

        if outcome.no_bid:
            return Response(status_code=204)

        return Response(content=outcome.body, media_type="application/json")

    return app


app = create_app()
