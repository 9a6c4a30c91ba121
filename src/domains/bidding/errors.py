"""Exceptions raised by the bidding package."""


class BiddingError(Exception):
    """Base class for bidding errors."""


class AmountParseError(BiddingError, ValueError):
    """Raised when bid amount text cannot be parsed as a number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Not a valid bid amount: {text!r}")
        self.text = text
