# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""HTTP client for downstream demand sources (Prebid Server, Jio DSP).

Any transport-level failure, or an unusable destination URL, is reported
as an absent response rather than raised: a destination that cannot be
reached simply has no bid.
"""

import logging
from typing import Any, Optional

import httpx

from ..models.auction import DownstreamRequest, DownstreamResponse

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class DownstreamClient:
    """Client that POSTs serialized auction requests to a destination.

    Usage:
        async with DownstreamClient() as client:
            response = await client.send(request)
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the downstream client.

        Args:
            http_client: Shared httpx client; one is created if not given
            timeout: Per-call timeout in seconds (httpx default if None)
            transport: Custom httpx transport for a created client
        """
        self._owns_client = http_client is None
        if http_client is None:
            kwargs: dict[str, Any] = {}
            if timeout is not None:
                kwargs["timeout"] = timeout
            if transport is not None:
                kwargs["transport"] = transport
            http_client = httpx.AsyncClient(**kwargs)
        self._http_client = http_client

    async def __aenter__(self) -> "DownstreamClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying httpx client if this client created it."""
        if self._owns_client:
            await self._http_client.aclose()

    async def send(self, request: DownstreamRequest) -> DownstreamResponse:
        """POST one request and return the raw body, or an absent response."""
        label = request.destination.label
        try:
            response = await self._http_client.post(
                request.url,
                content=request.body,
                headers={"Content-Type": JSON_CONTENT_TYPE},
            )
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Error forwarding to {label}: {e!r}")
            return DownstreamResponse(destination=request.destination)

        body = response.content
        logger.info(f"Response received from {label}: {body.decode('utf-8', errors='replace')}")
        return DownstreamResponse(destination=request.destination, body=body)
