"""
Front-end session for the bidding form.

Sits between the Streamlit widgets and BidController: parses the raw amount text,
places the bid, and reports what the form should show. Holds no Streamlit state
so it can be driven from tests.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from src.domains.bidding.controller import BidController
from src.domains.bidding.errors import AmountParseError
from src.domains.bidding.models import Bid
from src.utils.logger import get_logger

logger = get_logger()

PARSE_ERROR_MESSAGE = "Please enter a valid amount."
INVALID_BID_MESSAGE = "Invalid Bid!"

# "$1,250.50" -> "1,250.50"; "-5", "-$5" and ".5" keep their sign and point;
# the last number in a phrase is taken as the amount
_AMOUNT_RE = re.compile(r"(-?)\$?\s*(-?(?:\d[\d,]*(?:\.\d+)?|\.\d+))")
_FILLER_WORDS = {"a", "at", "bid", "bids", "for", "is", "of", "offer", "offers", "places", "placed"}
_MINUS_WORDS = {"minus", "negative"}


def parse_amount(text: str | None) -> float:
    """
    Parse raw amount text into a float.

    Raises:
        AmountParseError: If the text is empty or not a number.
    """
    raw = (text or "").strip()
    # float() would read "1_000" as 1000.0
    if "_" in raw:
        raise AmountParseError(raw)
    try:
        return float(raw)
    except ValueError:
        raise AmountParseError(raw) from None


def split_spoken_bid(transcript: str | None) -> tuple[str, str]:
    """
    Split a dictated phrase into (name, amount_text) for the form inputs.

    "Alice 100" -> ("Alice", "100"); "Bob bids $1,250 dollars" -> ("Bob", "1250");
    "Bob minus 5" -> ("Bob", "-5"). Signs and decimals are kept as spoken so the
    validator, not this helper, decides whether the amount is acceptable.
    Without a number the whole phrase becomes the name and the amount is empty.
    """
    text = (transcript or "").strip()
    matches = list(_AMOUNT_RE.finditer(text))
    if not matches:
        return text, ""
    last = matches[-1]
    amount_text = last.group(2).replace(",", "")
    if last.group(1) and not amount_text.startswith("-"):
        amount_text = "-" + amount_text
    words = text[: last.start()].split()
    if words and words[-1].lower() in _MINUS_WORDS and not amount_text.startswith("-"):
        words.pop()
        amount_text = "-" + amount_text
    while words and words[-1].lower().strip(",.:;") in _FILLER_WORDS:
        words.pop()
    name = " ".join(words).rstrip(",.:;- ")
    return name, amount_text


class Outcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class SubmissionResult:
    outcome: Outcome
    message: str
    clear_inputs: bool
    bid: Bid | None = None


class BidLog:
    """Observer that keeps the display log: one "<name> - $<amount>" line per accepted bid."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def on_bid_placed(self, bid: Bid) -> None:
        self._lines.append(str(bid))

    def as_text(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)


class BidSession:
    """
    One user's bidding session: a controller wired to a BidLog.

    Extra observers may be registered through `controller.add_observer`. An injected
    controller keeps its own `on_invalid` handler; the rejected bid reported by
    `submit` is then rebuilt with `controller.build_bid`.
    """

    def __init__(self, controller: BidController | None = None) -> None:
        self._rejected: Bid | None = None
        self.controller = controller or BidController(on_invalid=self._record_rejection)
        self.log = BidLog()
        self.controller.add_observer(self.log)

    def _record_rejection(self, bid: Bid) -> None:
        logger.warning("Invalid Bid! name=%r amount=%r", bid.bidder_name, bid.amount)
        self._rejected = bid

    def submit(self, name: str | None, amount_text: str | None) -> SubmissionResult:
        """
        Handle one press of "Place Bid".

        A parse failure never reaches the controller and keeps the inputs. Once the
        amount parses, the inputs are cleared whether the bid is accepted or rejected.
        """
        try:
            amount = parse_amount(amount_text)
        except AmountParseError as e:
            logger.info("Amount parse failed: %s", e)
            return SubmissionResult(Outcome.PARSE_ERROR, PARSE_ERROR_MESSAGE, clear_inputs=False)

        self._rejected = None
        count_before = len(self.controller.repository)
        self.controller.place_bid(name, amount)

        if len(self.controller.repository) > count_before:
            bid = self.controller.repository.get_all_bids()[-1]
            return SubmissionResult(Outcome.ACCEPTED, f"Bid placed: {bid}", clear_inputs=True, bid=bid)
        rejected = self._rejected or self.controller.build_bid(name, amount)
        return SubmissionResult(Outcome.REJECTED, INVALID_BID_MESSAGE, clear_inputs=True, bid=rejected)
