"""
Bid validation: a pure predicate over a Bid.
"""

from __future__ import annotations

from src.domains.bidding.models import Bid


class BidValidator:
    def is_valid(self, bid: Bid) -> bool:
        """
        Return True iff the bidder name is present and non-blank and the amount is positive.

        Never raises. NaN amounts fail the `> 0` comparison and are rejected.
        """
        name = bid.bidder_name
        if name is None or not name.strip():
            return False
        return bid.amount > 0
