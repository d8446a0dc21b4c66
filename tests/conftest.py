"""Pytest configuration and fixtures for Bid Proxy tests."""

import json
import logging
from typing import Any, Callable, Optional, Union

import httpx
import pytest

from bid_proxy.config import ProxyConfig
from bid_proxy.models import Destination

PREBID_URL = "http://prebid.test/openrtb2/auction"
JIO_URL = "http://jio.test/jiodsp/?spid=51"

# What a stub destination does: answer with these bytes, return this
# response, or raise this transport error.
StubOutcome = Union[bytes, httpx.Response, Exception]


def make_bid_response(price: Any, bid_id: str = "bid-1") -> bytes:
    """Build a minimal OpenRTB bid response with a single bid."""
    return json.dumps({
        "id": "auction-1",
        "seatbid": [
            {
                "seat": "seat-1",
                "bid": [{"id": bid_id, "impid": "1", "price": price}],
            }
        ],
        "cur": "USD",
    }).encode()


class StubDestinations:
    """httpx.MockTransport handler standing in for Prebid Server and Jio."""

    def __init__(self, pubmatic: StubOutcome, jio: StubOutcome):
        self.outcomes = {Destination.PUBMATIC: pubmatic, Destination.JIO: jio}
        self.requests: dict[Destination, httpx.Request] = {}

    def destination_for(self, request: httpx.Request) -> Destination:
        if request.url.host == "prebid.test":
            return Destination.PUBMATIC
        return Destination.JIO

    def handler(self, request: httpx.Request) -> httpx.Response:
        destination = self.destination_for(request)
        self.requests[destination] = request

        outcome = self.outcomes[destination]
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, httpx.Response):
            return outcome
        return httpx.Response(200, content=outcome, headers={"Content-Type": "application/json"})

    def sent_json(self, destination: Destination) -> dict[str, Any]:
        """Decoded body that was sent to a destination."""
        return json.loads(self.requests[destination].content)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def restore_root_logger():
    """Put the root logger handlers back after a test reconfigures them."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def proxy_config() -> ProxyConfig:
    """Create a proxy configuration pointing at the stub destinations."""
    return ProxyConfig(
        publisher_id="156276",
        prebid_auction_url=PREBID_URL,
        jio_dsp_url=JIO_URL,
    )


@pytest.fixture
def stub_destinations() -> Callable[..., StubDestinations]:
    """Factory for stub destinations; default is no answer from either."""

    def factory(
        pubmatic: Optional[StubOutcome] = None,
        jio: Optional[StubOutcome] = None,
    ) -> StubDestinations:
        return StubDestinations(
            pubmatic=pubmatic if pubmatic is not None else httpx.ConnectError("refused"),
            jio=jio if jio is not None else httpx.ConnectError("refused"),
        )

    return factory


@pytest.fixture
def bid_response() -> Callable[..., bytes]:
    """Factory for raw single-bid responses."""
    return make_bid_response


@pytest.fixture
def banner_request() -> dict[str, Any]:
    """Create a truecaller request with one banner impression."""
    return {
        "id": "req-001",
        "imp": [
            {
                "id": "1",
                "banner": {"w": 320, "h": 50},
                "bidfloor": 0.1,
            }
        ],
        "app": {"bundle": "com.truecaller", "name": "Truecaller"},
        "device": {"os": "android", "ifa": "abc-123"},
        "tmax": 300,
    }


@pytest.fixture
def video_request() -> dict[str, Any]:
    """Create a request for an unmapped bundle with one video impression."""
    return {
        "id": "req-002",
        "imp": [
            {
                "id": "1",
                "video": {"mimes": ["video/mp4"], "w": 640, "h": 480},
            }
        ],
        "app": {"bundle": "com.unmapped.app"},
    }


@pytest.fixture
def mixed_request() -> dict[str, Any]:
    """Create a snapchat request with several impression formats."""
    return {
        "id": "req-003",
        "imp": [
            {"id": "1", "native": {"request": "{}"}},
            "not-an-impression",
            {"id": "2", "video": {}, "banner": {}},
            {"id": "3", "ext": {"prebid": {"bidder": {"appnexus": {"placementId": 13144370}}}}},
        ],
        "app": {"bundle": "com.snapchat.android"},
        "ext": {"prebid": {"debug": True}},
    }
