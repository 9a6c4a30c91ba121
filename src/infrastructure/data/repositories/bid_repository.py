"""
Bid repository: append-only, in-memory store of accepted bids.

Lives for the session only; nothing is written to disk.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domains.bidding.models import Bid


class BidRepository:
    """
    Ordered store of accepted bids. Insertion order is acceptance order.
    Does not re-validate; the controller only hands it accepted bids.
    """

    def __init__(self) -> None:
        self._bids: list[Bid] = []

    def __len__(self) -> int:
        return len(self._bids)

    def add_bid(self, bid: Bid) -> None:
        self._bids.append(bid)

    def get_all_bids(self) -> tuple[Bid, ...]:
        """Return every stored bid in insertion order, as a read-only tuple."""
        return tuple(self._bids)
