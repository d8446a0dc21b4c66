# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Auction Flow - one inbound auction from raw body to arbitration.

Workflow:
1. Receive: parse the body, log bundle and impression types
2. Transform: build the PubMatic and Jio request bodies
3. Dispatch: send both concurrently and wait for both
4. Arbitrate: keep the response with the higher first-bid price

A flow instance handles exactly one auction; its `state` records how far
the auction got. Configuration is shared and read-only.
"""

import logging
from datetime import datetime
from typing import Optional, Union

from ..clients.dispatcher import Dispatcher
from ..config.proxy_config import ProxyConfig
from ..engines.ad_type import detect_ad_types
from ..engines.bid_arbiter import BidArbiter
from ..engines.request_transformer import RequestTransformer, parse_request
from ..errors import MalformedRequestError
from ..models.auction import ArbitrationOutcome, DownstreamRequest, DownstreamResponse
from ..models.flow_state import AuctionStage, AuctionState
from ..models.openrtb import BidRequest

logger = logging.getLogger(__name__)

UNKNOWN_BUNDLE = "UNKNOWN_BUNDLE"


class AuctionFlow:
    """Flow for proxying a single auction to the downstream bidders.

    Example:
        flow = AuctionFlow(config, Dispatcher(client))
        outcome = await flow.run(body)
        if outcome.no_bid:
            ...
    """

    def __init__(
        self,
        config: ProxyConfig,
        dispatcher: Dispatcher,
        transformer: Optional[RequestTransformer] = None,
        arbiter: Optional[BidArbiter] = None,
    ) -> None:
        """Initialize the auction flow.

        Args:
            config: Immutable proxy configuration
            dispatcher: Dispatcher used for the downstream calls
            transformer: Request transformer (built from config if not given)
            arbiter: Bid arbiter (default instance if not given)
        """
        self._config = config
        self._dispatcher = dispatcher
        self._transformer = transformer or RequestTransformer(config)
        self._arbiter = arbiter or BidArbiter()
        self.state = AuctionState()

    async def run(self, body: Union[bytes, str]) -> ArbitrationOutcome:
        """Run the auction end to end.

        Raises:
            MalformedRequestError: If the body is not a JSON object
            RequestSerializationError: If a downstream body cannot be built
        """
        request = self.receive(body)
        requests = self.transform(request)
        responses = await self.dispatch(requests)
        return self.arbitrate(responses)

    def receive(self, body: Union[bytes, str]) -> BidRequest:
        """Parse the inbound body and record what it asks for."""
        try:
            request = parse_request(body)
        except MalformedRequestError as e:
            logger.error(f"Invalid JSON: {e}")
            raise

        self.state.stage = AuctionStage.RECEIVED
        self.state.bundle = request.bundle
        logger.info(f"Incoming request from bundle: {request.bundle or UNKNOWN_BUNDLE}")

        self.state.ad_types = detect_ad_types(request)
        for ad_type in self.state.ad_types:
            logger.info(f"Impression type detected: {ad_type.value}")

        return request

    def transform(self, request: BidRequest) -> list[DownstreamRequest]:
        """Build the per-destination request bodies."""
        requests = self._transformer.build(request)
        self.state.stage = AuctionStage.TRANSFORMED
        return requests

    async def dispatch(self, requests: list[DownstreamRequest]) -> list[DownstreamResponse]:
        """Send the requests and wait for every destination."""
        responses = await self._dispatcher.dispatch(requests)
        self.state.stage = AuctionStage.DISPATCHED
        return responses

    def arbitrate(self, responses: list[DownstreamResponse]) -> ArbitrationOutcome:
        """Pick the winner and close the auction."""
        outcome = self._arbiter.arbitrate(responses)
        self.state.stage = AuctionStage.ARBITRATED
        self.state.outcome = outcome

        if outcome.no_bid:
            logger.warning("No valid bids received from either DSP")
            self.state.stage = AuctionStage.NO_BID
        else:
            self.state.stage = AuctionStage.WON
        self.state.completed_at = datetime.utcnow()

        return outcome
