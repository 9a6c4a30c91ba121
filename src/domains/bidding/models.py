"""
Bid value object.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Bid:
    """A named monetary offer. Validity is checked by BidValidator, not here."""

    bidder_name: str | None
    amount: float

    def __str__(self) -> str:
        # Log line format shown in the bid display, e.g. "Alice - $100.0"
        return f"{self.bidder_name} - ${self.amount}"
