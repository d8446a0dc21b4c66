# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Data models for the Bid Proxy."""

from .auction import (
    AdType,
    ArbitrationOutcome,
    Destination,
    DownstreamRequest,
    DownstreamResponse,
    SourceBid,
)
from .flow_state import AuctionStage, AuctionState
from .openrtb import (
    App,
    BidderExt,
    BidRequest,
    Impression,
    ImpressionExt,
    PrebidExt,
    PubmaticParams,
    RequestExt,
)

__all__ = [
    # Auction
    "AdType",
    "ArbitrationOutcome",
    "Destination",
    "DownstreamRequest",
    "DownstreamResponse",
    "SourceBid",
    # Flow state
    "AuctionStage",
    "AuctionState",
    # OpenRTB
    "App",
    "BidderExt",
    "BidRequest",
    "Impression",
    "ImpressionExt",
    "PrebidExt",
    "PubmaticParams",
    "RequestExt",
]
