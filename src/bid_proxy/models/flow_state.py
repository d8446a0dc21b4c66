"""Flow state models for auction orchestration.

These models track one inbound auction from receipt through arbitration.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .auction import AdType, ArbitrationOutcome


class AuctionStage(str, Enum):
    """Stage of a single auction.

    received -> transformed -> dispatched -> arbitrated -> won | no_bid
    """

    RECEIVED = "received"
    TRANSFORMED = "transformed"
    DISPATCHED = "dispatched"
    ARBITRATED = "arbitrated"
    WON = "won"
    NO_BID = "no_bid"


TERMINAL_STAGES = frozenset({AuctionStage.WON, AuctionStage.NO_BID})


class AuctionState(BaseModel):
    """State of one auction as it moves through the flow."""

    auction_id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12])
    stage: AuctionStage = AuctionStage.RECEIVED
    started_at: datetime = Field(default_factory=datetime.utcnow)
    completed_at: Optional[datetime] = None

    bundle: Optional[str] = None
    ad_types: list[AdType] = Field(default_factory=list)
    outcome: Optional[ArbitrationOutcome] = None

    @property
    def is_terminal(self) -> bool:
        """Whether the auction has finished."""
        return self.stage in TERMINAL_STAGES
