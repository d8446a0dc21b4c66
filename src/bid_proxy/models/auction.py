# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Auction models shared by the transformer, dispatcher and arbiter."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class AdType(str, Enum):
    """Declared format of an impression."""

    VIDEO = "video"
    BANNER = "banner"
    NATIVE = "native"
    UNKNOWN = "unknown"


class Destination(str, Enum):
    """Downstream demand sources, in arbitration priority order."""

    PUBMATIC = "pubmatic"
    JIO = "jio"

    @property
    def label(self) -> str:
        """Display name used in logs."""
        return {"pubmatic": "PubMatic", "jio": "Jio"}[self.value]


class DownstreamRequest(BaseModel):
    """A serialized request bound for one destination."""

    destination: Destination
    url: str
    body: bytes


class DownstreamResponse(BaseModel):
    """Raw outcome of one downstream call.

    `body` is None when the call failed (transport error or non-2xx).
    """

    destination: Destination
    body: Optional[bytes] = None

    @property
    def received(self) -> bool:
        """Whether the destination answered at all."""
        return self.body is not None


class SourceBid(BaseModel):
    """First-bid price parsed from a downstream response.

    `has_bid` is False when the response was absent or carried no usable
    bid; `price` is then 0.0.
    """

    destination: Destination
    price: float = 0.0
    has_bid: bool = False
    body: Optional[bytes] = None



class ArbitrationOutcome(BaseModel):
    """Result of comparing the downstream bids."""

    winner: Optional[Destination] = None
    body: Optional[bytes] = None
    prices: dict[Destination, float] = Field(default_factory=dict)

    @property
    def no_bid(self) -> bool:
        """True when no destination returned a usable bid."""
        return self.winner is None

    @property
    def winning_price(self) -> float:
        """Price of the winning bid, 0.0 for no bid."""
        if self.winner is None:
            return 0.0
        return self.prices.get(self.winner, 0.0)
