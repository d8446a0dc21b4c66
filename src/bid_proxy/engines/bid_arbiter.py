# Author: Green Mountain Systems AI Inc.
# Donated to IAB Tech Lab

"""Bid Arbiter - pick the downstream response with the highest first bid.

Rules:
- Each response is scored by seatbid[0].bid[0].price
- A missing response, invalid JSON or an unexpected shape has no bid and
  scores 0
- The first source sets the price to beat. A later source with a bid takes
  over only with a strictly higher price, so PubMatic keeps ties
- The first source wins on its own only with a price above 0; otherwise
  there is no winner
"""

import json
import logging
import math
from typing import Any, Optional, Sequence

from ..models.auction import ArbitrationOutcome, DownstreamResponse, SourceBid

logger = logging.getLogger(__name__)


def extract_first_bid(document: Any) -> Optional[dict[str, Any]]:
    """Return seatbid[0].bid[0] of a bid response, or None."""
    if not isinstance(document, dict):
        return None

    seatbid = document.get("seatbid")
    if not isinstance(seatbid, list) or not seatbid:
        return None

    seat = seatbid[0]
    if not isinstance(seat, dict):
        return None

    bids = seat.get("bid")
    if not isinstance(bids, list) or not bids:
        return None

    bid = bids[0]
    return bid if isinstance(bid, dict) else None


def read_bid_price(body: Optional[bytes]) -> Optional[float]:
    """Price of the first bid in a raw response, None if there is no usable bid.

    Negative prices are returned as sent.
    """
    if not body:
        return None

    try:
        document = json.loads(body)
    except ValueError:
        return None

    bid = extract_first_bid(document)
    if bid is None:
        return None

    price = bid.get("price")
    # bool is an int subclass
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return None

    price = float(price)
    if not math.isfinite(price):
        return None
    return price


def parse_bid_price(body: Optional[bytes]) -> float:
    """Price of the first bid in a raw response, 0.0 if there is none."""
    price = read_bid_price(body)
    return 0.0 if price is None else price


class BidArbiter:
    """Select the winning downstream response.

    Example:
        outcome = BidArbiter().arbitrate(responses)
        if not outcome.no_bid:
            return outcome.body
    """

    def score(self, responses: Sequence[DownstreamResponse]) -> list[SourceBid]:
        """Parse the first-bid price of every response."""
        bids = []
        for response in responses:
            price = read_bid_price(response.body)
            if response.received and price is None:
                logger.warning(f"No usable bid in {response.destination.label} response")
            bids.append(
                SourceBid(
                    destination=response.destination,
                    price=0.0 if price is None else price,
                    has_bid=price is not None,
                    body=response.body,
                )
            )
        return bids

    def arbitrate(self, responses: Sequence[DownstreamResponse]) -> ArbitrationOutcome:
        """Compare the responses and return the outcome.

        Args:
            responses: Downstream responses in destination priority order

        Returns:
            ArbitrationOutcome with the winner's raw bytes, or no winner
        """
        bids = self.score(responses)

        leader: Optional[SourceBid] = None
        to_beat = 0.0
        for index, bid in enumerate(bids):
            if index == 0:
                to_beat = bid.price
                if bid.has_bid and bid.price > 0:
                    leader = bid
            elif bid.has_bid and bid.price > to_beat:
                leader, to_beat = bid, bid.price

        outcome = ArbitrationOutcome(
            winner=leader.destination if leader else None,
            body=leader.body if leader else None,
            prices={bid.destination: bid.price for bid in bids},
        )

        summary = ", ".join(f"{bid.destination.label}: {bid.price:.2f}" for bid in bids)
        winner = outcome.winner.label if outcome.winner else "None"
        logger.info(f"Final Bids -> {summary} | Winner: {winner}")

        return outcome
