"""Concurrent fan-out of downstream requests."""

import asyncio
from typing import Sequence

from ..models.auction import DownstreamRequest, DownstreamResponse
from .dsp_client import DownstreamClient


class Dispatcher:
    """Send every downstream request at once and wait for all of them.

    Each send resolves to a response or an absent marker on its own, so one
    destination failing never cancels or delays another. There are no
    retries and no early results.
    """

    def __init__(self, client: DownstreamClient) -> None:
        self._client = client

    async def dispatch(
        self,
        requests: Sequence[DownstreamRequest],
    ) -> list[DownstreamResponse]:
        """Send all requests concurrently.

        Returns:
            Responses in the same order as `requests`
        """
        responses = await asyncio.gather(*(self._client.send(request) for request in requests))
        return list(responses)
