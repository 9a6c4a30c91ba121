"""
Bid controller: validates a bid, stores it, and notifies observers.
"""

from __future__ import annotations

from typing import Callable

from src.domains.bidding.models import Bid
from src.domains.bidding.observer import BidObserver
from src.domains.bidding.validator import BidValidator
from src.infrastructure.data.repositories.bid_repository import BidRepository
from src.utils.logger import get_logger

logger = get_logger()


def _log_rejection(bid: Bid) -> None:
    logger.warning("Invalid Bid! name=%r amount=%r", bid.bidder_name, bid.amount)


class BidController:
    """
    Orchestrates validate -> store -> notify for each submitted bid.

    The observer registry is append-only: no duplicate detection and no removal.
    Rejected bids are reported through `on_invalid` (the user-facing "Invalid Bid!"
    signal) instead of an exception or a return value.
    """

    def __init__(
        self,
        validator: BidValidator | None = None,
        repository: BidRepository | None = None,
        on_invalid: Callable[[Bid], None] | None = None,
    ) -> None:
        self._validator = validator or BidValidator()
        self._repository = repository if repository is not None else BidRepository()
        self._on_invalid = on_invalid or _log_rejection
        self._observers: list[BidObserver] = []

    @property
    def repository(self) -> BidRepository:
        return self._repository

    @property
    def observers(self) -> tuple[BidObserver, ...]:
        return tuple(self._observers)

    def add_observer(self, observer: BidObserver) -> None:
        self._observers.append(observer)

    def build_bid(self, name: str | None, amount: float) -> Bid:
        """Bid as place_bid would see it: trimmed name, amount as float."""
        return Bid(name.strip() if name is not None else None, float(amount))

    def place_bid(self, name: str | None, amount: float) -> None:
        """
        Build a bid from the trimmed name and amount, then accept or reject it.

        Accepted bids are appended to the repository before any observer runs;
        observers are called in registration order and their exceptions propagate.
        """
        bid = self.build_bid(name, amount)
        if not self._validator.is_valid(bid):
            self._on_invalid(bid)
            return

        self._repository.add_bid(bid)
        logger.info("Accepted bid: %s (total bids: %d)", bid, len(self._repository))
        for observer in self._observers:
            observer.on_bid_placed(bid)
