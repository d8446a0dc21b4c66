# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Auction logic engines for the Bid Proxy."""

from .ad_type import classify_ad_type, detect_ad_types
from .bid_arbiter import BidArbiter, extract_first_bid, parse_bid_price, read_bid_price
from .request_transformer import RequestTransformer, parse_request, serialize_request
from .slot_resolver import SlotResolver

__all__ = [
    "BidArbiter",
    "RequestTransformer",
    "SlotResolver",
    "classify_ad_type",
    "detect_ad_types",
    "extract_first_bid",
    "parse_bid_price",
    "parse_request",
    "read_bid_price",
    "serialize_request",
]
