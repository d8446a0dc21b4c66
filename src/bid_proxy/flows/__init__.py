# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Auction orchestration flows."""

from .auction_flow import AuctionFlow

__all__ = ["AuctionFlow"]
