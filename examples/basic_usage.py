# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Basic usage example for the Bid Proxy.

Demonstrates:
- Building a proxy config
- Rewriting one request for PubMatic and Jio
- Running an auction against in-process bidders
"""

import asyncio
import json

import httpx

from bid_proxy.clients import Dispatcher, DownstreamClient
from bid_proxy.config import ProxyConfig
from bid_proxy.engines import RequestTransformer, parse_request
from bid_proxy.flows import AuctionFlow

BID_REQUEST = {
    "id": "example-auction",
    "app": {"bundle": "com.truecaller"},
    "imp": [{"id": "1", "banner": {"w": 320, "h": 50}}],
}

PRICES = {"pubmatic.example": 1.80, "jio.example": 2.10}


def bidder(request: httpx.Request) -> httpx.Response:
    """Answer every request with one bid priced per host."""
    price = PRICES[request.url.host]
    return httpx.Response(
        200,
        json={
            "id": "example-auction",
            "seatbid": [{"bid": [{"id": request.url.host, "impid": "1", "price": price}]}],
        },
    )


async def main():
    """Run basic usage example."""
    print("=" * 60)
    print("Bid Proxy - Basic Usage Example")
    print("=" * 60)

    config = ProxyConfig(
        publisher_id="156276",
        prebid_auction_url="http://pubmatic.example/openrtb2/auction",
        jio_dsp_url="http://jio.example/jiodsp/?spid=51",
    )

    # Step 1: Show what each destination receives
    print("\n1. Rewriting the request...")
    transformer = RequestTransformer(config)
    for downstream in transformer.build(parse_request(json.dumps(BID_REQUEST))):
        print(f"   {downstream.destination.label} -> {downstream.url}")
        print(f"     {downstream.body.decode()}")

    # Step 2: Run the whole auction
    print("\n2. Running the auction...")
    transport = httpx.MockTransport(bidder)
    async with DownstreamClient(transport=transport) as client:
        flow = AuctionFlow(config, Dispatcher(client))
        outcome = await flow.run(json.dumps(BID_REQUEST))

    for destination, price in outcome.prices.items():
        print(f"   {destination.label}: {price:.2f}")

    if outcome.no_bid:
        print("   No valid bids received")
    else:
        print(f"   Winner: {outcome.winner.label}")
        print(f"   Stage: {flow.state.stage.value}")

    print("\n" + "=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
