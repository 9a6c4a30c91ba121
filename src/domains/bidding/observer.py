"""Observer port for the bidding domain: notified once per accepted bid."""

from typing import Protocol

from src.domains.bidding.models import Bid


class BidObserver(Protocol):
    def on_bid_placed(self, bid: Bid) -> None: ...
