"""Bidding domain: bid value, validation, observer port, and the controller."""

from src.domains.bidding.controller import BidController
from src.domains.bidding.errors import AmountParseError, BiddingError
from src.domains.bidding.models import Bid
from src.domains.bidding.observer import BidObserver
from src.domains.bidding.validator import BidValidator

__all__ = [
    "AmountParseError",
    "Bid",
    "BidController",
    "BidObserver",
    "BidValidator",
    "BiddingError",
]
